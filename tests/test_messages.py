from dataclasses import dataclass

import pytest

from cwtoken.messages import (
    BankSend,
    Binary,
    Coin,
    Expiration,
    Message,
    MessageError,
    WasmExecute,
    _UINT128,
    _wire,
    coins,
    cosmos_msg_from_json,
    cosmos_msg_to_json,
    from_binary,
    to_binary,
)


class DemoExecMsg(Message):
    """Messages used only by these tests."""


@dataclass(frozen=True)
class SetAmount(DemoExecMsg):
    amount: int = _wire(_UINT128)


@dataclass(frozen=True)
class ClearAll(DemoExecMsg):
    pass


@dataclass(frozen=True)
class Renamed(DemoExecMsg, tag="custom"):
    pass


def test_binary_base64_round_trip():
    data = Binary(b'{"some":123}')
    assert Binary.from_base64(data.to_base64()) == data


def test_binary_from_invalid_base64():
    with pytest.raises(MessageError):
        Binary.from_base64("not base64!")


def test_coins_builds_single_coin():
    assert coins(10, "atom") == [Coin("atom", 10)]


def test_bank_send_from_json():
    value = {
        "bank": {
            "send": {
                "to_address": "receiver",
                "amount": [{"amount": "10", "denom": "atom"}],
            }
        }
    }
    assert cosmos_msg_from_json(value) == BankSend("receiver", coins(10, "atom"))


@pytest.mark.parametrize(
    "msg",
    [
        BankSend("receiver", coins(10, "atom")),
        WasmExecute("contract", Binary(b'{"some":123}'), coins(5, "atom")),
        WasmExecute("contract", Binary(b"")),
    ],
)
def test_cosmos_msg_round_trip(msg):
    assert cosmos_msg_from_json(from_binary(to_binary(cosmos_msg_to_json(msg)))) == msg


def test_cosmos_msg_unknown_variant():
    with pytest.raises(MessageError):
        cosmos_msg_from_json({"bank": {"burn": {"amount": []}}})


def test_cosmos_msg_bad_amount():
    with pytest.raises(MessageError):
        cosmos_msg_from_json({"bank": {"send": {"to_address": "r", "amount": [{"amount": -1, "denom": "a"}]}}})


@pytest.mark.parametrize(
    "expiration",
    [Expiration.at_height(123_456), Expiration.at_time(8888888888), Expiration.never()],
)
def test_expiration_round_trip(expiration):
    assert Expiration.from_json_value(from_binary(to_binary(expiration))) == expiration


def test_expiration_never_wire_form():
    assert Expiration.never().to_json_value() == {"never": {}}


def test_expiration_time_is_nanoseconds_string():
    assert Expiration.at_time(8888888888).to_json_value() == {"at_time": "8888888888000000000"}


def test_expiration_default_is_never():
    assert Expiration() == Expiration.never()


def test_expiration_rejects_both_kinds():
    with pytest.raises(MessageError):
        Expiration(height=1, time_nanos=2)


def test_expiration_rejects_unknown_kind():
    with pytest.raises(MessageError):
        Expiration.from_json_value({"at_block": 5})


def test_messages_lists_sorted_tags():
    assert DemoExecMsg.messages() == ["clear_all", "custom", "set_amount"]
    assert from_binary(to_binary(Renamed())) == {"custom": {}}


def test_message_round_trip_through_group():
    original = SetAmount(7777)
    decoded = DemoExecMsg.from_json_value(from_binary(to_binary(original)))
    assert decoded == original


def test_message_decodes_amount_string():
    value = from_binary(b'{"set_amount": {"amount": "5"}}')
    assert DemoExecMsg.from_json_value(value) == SetAmount(5)


def test_empty_variant_decodes():
    value = from_binary(b'{"clear_all": {}}')
    assert DemoExecMsg.from_json_value(value) == ClearAll()


def test_unknown_variant_rejected():
    value = from_binary(b'{"nope": {}}')
    with pytest.raises(MessageError):
        DemoExecMsg.from_json_value(value)


def test_variant_rejects_other_tag():
    value = from_binary(b'{"clear_all": {}}')
    with pytest.raises(MessageError):
        SetAmount.from_json_value(value)


def test_unknown_field_rejected():
    value = from_binary(b'{"set_amount": {"amount": "5", "extra": 1}}')
    with pytest.raises(MessageError):
        DemoExecMsg.from_json_value(value)


def test_missing_field_rejected():
    value = from_binary(b'{"set_amount": {}}')
    with pytest.raises(MessageError):
        DemoExecMsg.from_json_value(value)


def test_uint128_overflow_rejected():
    with pytest.raises(MessageError):
        to_binary(SetAmount(2**128))


def test_duplicate_tag_rejected():
    with pytest.raises(TypeError):

        class Duplicate(DemoExecMsg, tag="clear_all"):
            pass

    assert DemoExecMsg.messages() == ["clear_all", "custom", "set_amount"]
    assert DemoExecMsg.from_json_value(from_binary(b'{"clear_all": {}}')) == ClearAll()


def test_to_binary_is_compact_and_round_trips():
    value = {"a": [1, 2], "b": {"c": "d"}}
    data = to_binary(value)
    assert b" " not in data
    assert from_binary(data) == value


def test_from_binary_rejects_invalid_json():
    with pytest.raises(MessageError):
        from_binary(b"{not json")