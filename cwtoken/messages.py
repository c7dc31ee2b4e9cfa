"""Wire types shared by all contract messages and their JSON encoding."""

from __future__ import annotations

import base64
import binascii
import dataclasses
import json
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar


class MessageError(ValueError):
    """Raised when a value cannot be encoded to or decoded from its wire form."""


class Binary(bytes):
    """Raw bytes that travel as a base64 string in JSON."""

    def to_base64(self) -> str:
        return base64.b64encode(self).decode("ascii")

    @classmethod
    def from_base64(cls, text: str) -> Binary:
        try:
            return cls(base64.b64decode(text, validate=True))
        except (binascii.Error, ValueError, TypeError) as exc:
            raise MessageError(f"invalid base64 data: {exc}") from exc

    def __repr__(self) -> str:
        return f"Binary({bytes(self)!r})"


@dataclass(frozen=True)
class _Codec:
    encode: Callable[[Any], Any]
    decode: Callable[[Any], Any]
    optional: bool = False


def _wire(codec: _Codec, **kwargs: Any) -> Any:
    """Declare a dataclass field together with the codec for its wire form."""
    if codec.optional and "default" not in kwargs and "default_factory" not in kwargs:
        kwargs["default"] = None
    return dataclasses.field(metadata={"codec": codec}, **kwargs)


def _single_entry(value: Any, what: str) -> tuple[str, Any]:
    if not isinstance(value, dict) or len(value) != 1:
        raise MessageError(f"expected {what} as an object with exactly one key, got {value!r}")
    ((key, body),) = value.items()
    return key, body


def _check_string(value: Any) -> str:
    if not isinstance(value, str):
        raise MessageError(f"expected a string, got {value!r}")
    return value


def _check_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise MessageError(f"expected a boolean, got {value!r}")
    return value


def _check_uint(value: Any, bits: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise MessageError(f"expected an unsigned {bits}-bit integer, got {value!r}")
    return value


def _uint(bits: int) -> _Codec:
    def check(value: Any) -> int:
        return _check_uint(value, bits)

    return _Codec(check, check)


_DIGITS = re.compile(r"[0-9]+")


def _decimal(bits: int) -> _Codec:
    """Unsigned integer carried as a decimal string."""

    def encode(value: Any) -> str:
        return str(_check_uint(value, bits))

    def decode(value: Any) -> int:
        if not isinstance(value, str) or not _DIGITS.fullmatch(value):
            raise MessageError(f"expected a decimal string, got {value!r}")
        return _check_uint(int(value), bits)

    return _Codec(encode, decode)


def _encode_binary(value: Any) -> str:
    if not isinstance(value, (bytes, bytearray)):
        raise MessageError(f"expected bytes, got {value!r}")
    return Binary(value).to_base64()


def _decode_binary(value: Any) -> Binary:
    return Binary.from_base64(_check_string(value))


def _optional(codec: _Codec) -> _Codec:
    return _Codec(
        lambda value: None if value is None else codec.encode(value),
        lambda value: None if value is None else codec.decode(value),
        optional=True,
    )


def _list_of(codec: _Codec) -> _Codec:
    def encode(value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise MessageError(f"expected a list, got {value!r}")
        return [codec.encode(item) for item in value]

    def decode(value: Any) -> list[Any]:
        if not isinstance(value, list):
            raise MessageError(f"expected a list, got {value!r}")
        return [codec.decode(item) for item in value]

    return _Codec(encode, decode)


def _struct_to_json(obj: Any) -> dict[str, Any]:
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise MessageError(f"cannot encode {obj!r}")
    result = {}
    for f in dataclasses.fields(obj):
        codec = f.metadata.get("codec")
        if codec is None:
            raise MessageError(f"field {f.name!r} of {type(obj).__name__} has no wire form")
        result[f.name] = codec.encode(getattr(obj, f.name))
    return result


def _struct_from_json(cls: type, value: Any) -> Any:
    if not isinstance(value, dict):
        raise MessageError(f"expected an object for {cls.__name__}, got {value!r}")
    known = {f.name: f for f in dataclasses.fields(cls) if f.init}
    unknown = sorted(set(value) - set(known))
    if unknown:
        raise MessageError(f"unknown field {unknown[0]!r} for {cls.__name__}")
    kwargs = {}
    for name, f in known.items():
        codec = f.metadata["codec"]
        if name in value:
            kwargs[name] = codec.decode(value[name])
        elif codec.optional:
            kwargs[name] = None
        else:
            raise MessageError(f"missing field {name!r} for {cls.__name__}")
    return cls(**kwargs)


def _struct(cls: type) -> _Codec:
    def encode(value: Any) -> dict[str, Any]:
        if not isinstance(value, cls):
            raise MessageError(f"expected {cls.__name__}, got {value!r}")
        return _struct_to_json(value)

    return _Codec(encode, lambda value: _struct_from_json(cls, value))


_STRING = _Codec(_check_string, _check_string)
_BOOL = _Codec(_check_bool, _check_bool)
_U8 = _uint(8)
_U32 = _uint(32)
_U64 = _uint(64)
_UINT128 = _decimal(128)
_TIMESTAMP = _decimal(64)
_BINARY = _Codec(_encode_binary, _decode_binary)


@dataclass(frozen=True)
class Coin:
    """An amount of a native denomination."""

    denom: str = _wire(_STRING)
    amount: int = _wire(_UINT128)


def coins(amount: int, denom: str) -> list[Coin]:
    """A list holding a single coin."""
    return [Coin(denom, amount)]


@dataclass(frozen=True)
class BankSend:
    """Bank message sending native coins to an address."""

    to_address: str = _wire(_STRING)
    amount: list[Coin] = _wire(_list_of(_struct(Coin)))


@dataclass(frozen=True)
class WasmExecute:
    """Wasm message executing another contract."""

    contract_addr: str = _wire(_STRING)
    msg: Binary = _wire(_BINARY)
    funds: list[Coin] = _wire(_list_of(_struct(Coin)), default_factory=list)


_COSMOS_VARIANTS: dict[tuple[str, str], type] = {
    ("bank", "send"): BankSend,
    ("wasm", "execute"): WasmExecute,
}


def cosmos_msg_to_json(msg: BankSend | WasmExecute) -> dict[str, Any]:
    """Encode a chain message into its JSON value."""
    for (module, action), cls in _COSMOS_VARIANTS.items():
        if type(msg) is cls:
            return {module: {action: _struct_to_json(msg)}}
    raise MessageError(f"unsupported cosmos message {msg!r}")


def cosmos_msg_from_json(value: Any) -> BankSend | WasmExecute:
    """Decode a chain message from its JSON value."""
    module, inner = _single_entry(value, "cosmos message")
    action, body = _single_entry(inner, f"{module} message")
    cls = _COSMOS_VARIANTS.get((module, action))
    if cls is None:
        raise MessageError(f"unsupported cosmos message {module}.{action}")
    return _struct_from_json(cls, body)


_COSMOS_MSG = _Codec(cosmos_msg_to_json, cosmos_msg_from_json)


@dataclass(frozen=True)
class Expiration:
    """A block height, a time, or never; the default is never."""

    height: int | None = None
    time_nanos: int | None = None

    def __post_init__(self) -> None:
        if self.height is not None and self.time_nanos is not None:
            raise MessageError("an expiration is either a height or a time, not both")

    @classmethod
    def at_height(cls, height: int) -> Expiration:
        return cls(height=height)

    @classmethod
    def at_time(cls, seconds: int) -> Expiration:
        return cls(time_nanos=seconds * 1_000_000_000)

    @classmethod
    def never(cls) -> Expiration:
        return cls()

    def to_json_value(self) -> dict[str, Any]:
        if self.height is not None:
            return {"at_height": _U64.encode(self.height)}
        if self.time_nanos is not None:
            return {"at_time": _TIMESTAMP.encode(self.time_nanos)}
        return {"never": {}}

    @classmethod
    def from_json_value(cls, value: Any) -> Expiration:
        kind, body = _single_entry(value, "expiration")
        if kind == "at_height":
            return cls(height=_U64.decode(body))
        if kind == "at_time":
            return cls(time_nanos=_TIMESTAMP.decode(body))
        if kind == "never":
            if body != {}:
                raise MessageError(f"expected an empty object for never, got {body!r}")
            return cls()
        raise MessageError(f"unknown expiration kind {kind!r}")


def _encode_expiration(value: Any) -> dict[str, Any]:
    if not isinstance(value, Expiration):
        raise MessageError(f"expected an Expiration, got {value!r}")
    return value.to_json_value()


_EXPIRATION = _Codec(_encode_expiration, Expiration.from_json_value)


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class Message:
    """Base of message groups and their variants.

    A direct subclass is a group; dataclass subclasses of a group are its
    variants, each encoded as ``{tag: {fields...}}``.
    """

    _tag: ClassVar[str] = ""
    _variants: ClassVar[dict[str, type[Message]]]

    def __init_subclass__(cls, *, tag: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if Message in cls.__bases__:
            cls._variants = {}
            return
        cls._tag = tag or _snake_case(cls.__name__)
        groups = [base for base in cls.__mro__[1:] if "_variants" in base.__dict__]
        for group in groups:
            if cls._tag in group._variants:
                raise TypeError(f"{group.__name__} already has a variant {cls._tag!r}")
        for group in groups:
            group._variants[cls._tag] = cls

    def to_json_value(self) -> dict[str, Any]:
        if not type(self)._tag:
            raise MessageError(f"{type(self).__name__} is not a message variant")
        return {self._tag: _struct_to_json(self)}

    @classmethod
    def from_json_value(cls, value: Any) -> Message:
        tag, body = _single_entry(value, "message")
        if "_variants" in cls.__dict__:
            variant = cls._variants.get(tag)
            if variant is None:
                expected = ", ".join(sorted(cls._variants))
                raise MessageError(f"unknown variant {tag!r}, expected one of: {expected}")
        elif cls._tag:
            if tag != cls._tag:
                raise MessageError(f"expected variant {cls._tag!r}, got {tag!r}")
            variant = cls
        else:
            raise MessageError(f"{cls.__name__} has no variants")
        return _struct_from_json(variant, body)

    @classmethod
    def messages(cls) -> list[str]:
        variants = cls.__dict__.get("_variants")
        if variants is not None:
            return sorted(variants)
        return [cls._tag] if cls._tag else []


def _to_json(value: Any) -> Any:
    if isinstance(value, (BankSend, WasmExecute)):
        return cosmos_msg_to_json(value)
    to_json = getattr(value, "to_json_value", None)
    if callable(to_json) and not isinstance(value, type):
        return to_json()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _struct_to_json(value)
    if isinstance(value, (bytes, bytearray)):
        return _encode_binary(value)
    return value


def _json_default(obj: Any) -> Any:
    converted = _to_json(obj)
    if converted is obj:
        raise TypeError(f"cannot encode {type(obj).__name__}")
    return converted


def to_binary(value: Any) -> Binary:
    """Serialize a message, wire struct or plain JSON value to compact JSON bytes."""
    try:
        text = json.dumps(
            _to_json(value),
            default=_json_default,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except MessageError:
        raise
    except (TypeError, ValueError) as exc:
        raise MessageError(f"cannot serialize value: {exc}") from exc
    return Binary(text.encode("utf-8"))


def from_binary(data: bytes | str) -> Any:
    """Parse JSON bytes into a plain JSON value."""
    try:
        text = data if isinstance(data, str) else bytes(data).decode("utf-8")
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MessageError(f"invalid JSON data: {exc}") from exc