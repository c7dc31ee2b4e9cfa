"""Checks applied to token parameters, initial balances and logos."""

from __future__ import annotations

import re
from collections.abc import Iterable

from cwtoken.marketing import Logo
from cwtoken.responses import Cw20Coin

_LOGO_SIZE_CAP = 5 * 1024
_PNG_HEADER = b"\x89PNG\r\n\x1a\n"
_XML_PREFIX = b"<?xml "
_XML_POSTFIX = b"?>"
_SYMBOL = re.compile(rb"[A-Za-z-]{3,12}")


class ValidationError(ValueError):
    """Raised when token parameters, balances or a logo are not acceptable."""


class DuplicateInitialBalanceAddresses(ValidationError):
    def __init__(self, message: str = "Duplicate initial balance addresses") -> None:
        super().__init__(message)


class LogoTooBig(ValidationError):
    def __init__(self, message: str = "Logo binary data exceeds 5KB limit") -> None:
        super().__init__(message)


class InvalidPngHeader(ValidationError):
    def __init__(self, message: str = "Invalid png header") -> None:
        super().__init__(message)


class InvalidXmlPreamble(ValidationError):
    def __init__(self, message: str = "Invalid xml preamble for SVG") -> None:
        super().__init__(message)


def validate_msg(name: str, symbol: str, decimals: int) -> None:
    """Check the token name, ticker symbol and number of decimals."""
    if not 3 <= len(name.encode("utf-8")) <= 50:
        raise ValidationError("Name is not in the expected format (3-50 UTF-8 bytes)")
    if not _SYMBOL.fullmatch(symbol.encode("utf-8")):
        raise ValidationError("Ticker symbol is not in expected format [a-zA-Z\\-]{3,12}")
    if decimals > 18:
        raise ValidationError("Decimals must not exceed 18")


def validate_accounts(accounts: Iterable[Cw20Coin]) -> None:
    """Reject initial balances that name the same address more than once."""
    addresses = [coin.address for coin in accounts]
    if len(set(addresses)) != len(addresses):
        raise DuplicateInitialBalanceAddresses()


def verify_logo(logo: Logo) -> None:
    """Check embedded logo data; URLs are accepted as they are."""
    if logo.kind == "svg":
        _verify_xml_logo(bytes(logo.content))
    elif logo.kind == "png":
        _verify_png_logo(bytes(logo.content))


def _verify_xml_logo(data: bytes) -> None:
    _verify_xml_preamble(data)
    if len(data) > _LOGO_SIZE_CAP:
        raise LogoTooBig()


def _verify_png_logo(data: bytes) -> None:
    if len(data) > _LOGO_SIZE_CAP:
        raise LogoTooBig()
    if not data.startswith(_PNG_HEADER):
        raise InvalidPngHeader()


def _verify_xml_preamble(data: bytes) -> None:
    if not data:
        raise InvalidXmlPreamble()
    end = data.find(b">")
    preamble = data if end < 0 else data[: end + 1]
    if not (preamble.startswith(_XML_PREFIX) and preamble.endswith(_XML_POSTFIX)):
        raise InvalidXmlPreamble()