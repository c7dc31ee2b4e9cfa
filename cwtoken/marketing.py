"""Marketing metadata: logos, marketing info and its messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cwtoken.messages import (
    _BINARY,
    _STRING,
    Binary,
    Message,
    MessageError,
    _Codec,
    _optional,
    _single_entry,
    _wire,
)

_LOGO_KINDS = ("url", "svg", "png")


@dataclass(frozen=True)
class Logo:
    """A logo given either as a URL or as embedded SVG or PNG data."""

    kind: str
    content: str | Binary

    def __post_init__(self) -> None:
        if self.kind not in _LOGO_KINDS:
            raise MessageError(f"unknown logo kind {self.kind!r}")
        if self.kind == "url":
            if not isinstance(self.content, str):
                raise MessageError("a logo URL must be a string")
        elif isinstance(self.content, (bytes, bytearray)):
            object.__setattr__(self, "content", Binary(self.content))
        else:
            raise MessageError("embedded logo data must be bytes")

    @classmethod
    def url(cls, address: str) -> Logo:
        return cls("url", address)

    @classmethod
    def svg(cls, data: bytes) -> Logo:
        return cls("svg", Binary(data))

    @classmethod
    def png(cls, data: bytes) -> Logo:
        return cls("png", Binary(data))

    def to_json_value(self) -> dict[str, Any]:
        if self.kind == "url":
            return {"url": self.content}
        return {"embedded": {self.kind: self.content.to_base64()}}

    @classmethod
    def from_json_value(cls, value: Any) -> Logo:
        kind, body = _single_entry(value, "logo")
        if kind == "url":
            return cls.url(_STRING.decode(body))
        if kind == "embedded":
            embedded_kind, data = _single_entry(body, "embedded logo")
            if embedded_kind in ("svg", "png"):
                return cls(embedded_kind, _BINARY.decode(data))
            raise MessageError(f"unknown embedded logo kind {embedded_kind!r}")
        raise MessageError(f"unknown logo kind {kind!r}")


def _encode_logo(value: Any) -> dict[str, Any]:
    if not isinstance(value, Logo):
        raise MessageError(f"expected a Logo, got {value!r}")
    return value.to_json_value()


_LOGO = _Codec(_encode_logo, Logo.from_json_value)


@dataclass(frozen=True)
class LogoInfo:
    """Where the logo lives: a URL, or embedded on chain when ``url`` is None."""

    url: str | None = None


def _encode_logo_info(value: Any) -> Any:
    if not isinstance(value, LogoInfo):
        raise MessageError(f"expected a LogoInfo, got {value!r}")
    return "embedded" if value.url is None else {"url": value.url}


def _decode_logo_info(value: Any) -> LogoInfo:
    if value == "embedded":
        return LogoInfo()
    kind, body = _single_entry(value, "logo info")
    if kind != "url":
        raise MessageError(f"unknown logo info kind {kind!r}")
    return LogoInfo(url=_STRING.decode(body))


_LOGO_INFO = _Codec(_encode_logo_info, _decode_logo_info)


@dataclass(frozen=True)
class MarketingInfoResponse:
    project: str | None = _wire(_optional(_STRING))
    description: str | None = _wire(_optional(_STRING))
    logo: LogoInfo | None = _wire(_optional(_LOGO_INFO))
    marketing: str | None = _wire(_optional(_STRING))


@dataclass(frozen=True)
class DownloadLogoResponse:
    mime_type: str = _wire(_STRING)
    data: Binary = _wire(_BINARY)


class MarketingExecMsg(Message):
    """Execute messages of the marketing interface."""


@dataclass(frozen=True)
class UpdateMarketing(MarketingExecMsg):
    """Update metadata; None leaves a field unchanged, an empty string clears it."""

    project: str | None = _wire(_optional(_STRING))
    description: str | None = _wire(_optional(_STRING))
    marketing: str | None = _wire(_optional(_STRING))


@dataclass(frozen=True)
class UploadLogo(MarketingExecMsg):
    logo: Logo = _wire(_LOGO)


class MarketingQueryMsg(Message):
    """Query messages of the marketing interface."""


@dataclass(frozen=True)
class MarketingInfo(MarketingQueryMsg):
    pass


@dataclass(frozen=True)
class DownloadLogo(MarketingQueryMsg):
    pass