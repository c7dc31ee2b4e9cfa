import pytest

from cwtoken.marketing import Logo
from cwtoken.responses import Cw20Coin
from cwtoken.validation import (
    DuplicateInitialBalanceAddresses,
    InvalidPngHeader,
    InvalidXmlPreamble,
    LogoTooBig,
    ValidationError,
    validate_accounts,
    validate_msg,
    verify_logo,
)

PNG_HEADER = bytes([0x89, ord("P"), ord("N"), ord("G"), 0x0D, 0x0A, 0x1A, 0x0A])
SVG = b'<?xml version="1.0"?><svg></svg>'
CAP = 5 * 1024


def test_valid_token_parameters_pass():
    assert validate_msg("Cash Token", "CASH", 9) is None
    assert validate_msg("Auto Gen", "AUTO-X", 18) is None


@pytest.mark.parametrize("name", ["ab", "x" * 51, ""])
def test_name_length_is_checked(name):
    with pytest.raises(ValidationError, match="Name is not in the expected format"):
        validate_msg(name, "CASH", 6)


def test_name_length_counts_utf8_bytes():
    assert validate_msg("\u00e9a", "CASH", 6) is None
    assert validate_msg("x" * 50, "CASH", 6) is None
    with pytest.raises(ValidationError):
        validate_msg("\u00e9", "CASH", 6)


@pytest.mark.parametrize("symbol", ["CA", "CASH1", "CA SH", "A" * 13, "CA\u00c9"])
def test_symbol_format_is_checked(symbol):
    with pytest.raises(ValidationError, match="Ticker symbol is not in expected format"):
        validate_msg("Cash Token", symbol, 6)


def test_symbol_boundaries_accepted():
    assert validate_msg("Cash Token", "abc", 6) is None
    assert validate_msg("Cash Token", "A" * 12, 6) is None
    assert validate_msg("Cash Token", "---", 6) is None


def test_decimals_limit():
    assert validate_msg("Cash Token", "CASH", 18) is None
    with pytest.raises(ValidationError, match="Decimals must not exceed 18"):
        validate_msg("Cash Token", "CASH", 19)


def test_duplicate_addresses_rejected():
    accounts = [Cw20Coin("addr0001", 11223344), Cw20Coin("addr0001", 7890987)]
    with pytest.raises(DuplicateInitialBalanceAddresses):
        validate_accounts(accounts)


def test_unique_addresses_accepted():
    accounts = [Cw20Coin("addr0001", 11223344), Cw20Coin("addr0002", 7890987)]
    assert validate_accounts(accounts) is None
    assert validate_accounts([]) is None


def test_duplicate_error_is_validation_error():
    with pytest.raises(ValidationError):
        validate_accounts(iter([Cw20Coin("a", 1), Cw20Coin("b", 2), Cw20Coin("a", 3)]))


def test_url_logo_accepted():
    assert verify_logo(Logo.url("url")) is None


def test_png_logo_accepted():
    assert verify_logo(Logo.png(PNG_HEADER)) is None
    assert verify_logo(Logo.png(PNG_HEADER + b"\x01" * (CAP - len(PNG_HEADER)))) is None


def test_png_oversized():
    with pytest.raises(LogoTooBig):
        verify_logo(Logo.png(PNG_HEADER + b"\x01" * 6000))
    with pytest.raises(LogoTooBig):
        verify_logo(Logo.png(PNG_HEADER + b"\x01" * (CAP - len(PNG_HEADER) + 1)))


def test_png_invalid_header():
    with pytest.raises(InvalidPngHeader):
        verify_logo(Logo.png(b"\x01"))


def test_png_size_checked_before_header():
    with pytest.raises(LogoTooBig):
        verify_logo(Logo.png(b"\x01" * 6000))


def test_svg_logo_accepted():
    assert verify_logo(Logo.svg(SVG)) is None


def test_svg_oversized():
    img = b'<?xml version="1.0"?><svg>' + b"x" * 6000 + b"</svg>"
    with pytest.raises(LogoTooBig):
        verify_logo(Logo.svg(img))


@pytest.mark.parametrize(
    "img",
    [b"\x01", b"", b"<svg></svg>", b"<?xml version", b'<?xml version="1.0"><svg/>'],
)
def test_svg_invalid_preamble(img):
    with pytest.raises(InvalidXmlPreamble):
        verify_logo(Logo.svg(img))


def test_svg_preamble_checked_before_size():
    with pytest.raises(InvalidXmlPreamble):
        verify_logo(Logo.svg(b"x" * 6000))