"""Minting messages and responses."""

from __future__ import annotations

from dataclasses import dataclass

from cwtoken.messages import _STRING, _UINT128, Message, _optional, _wire


@dataclass(frozen=True)
class MinterResponse:
    """Who may mint, and the cap on total supply (None means unlimited)."""

    minter: str = _wire(_STRING)
    cap: int | None = _wire(_optional(_UINT128))


class MintingExecMsg(Message):
    """Execute messages of the minting interface."""


@dataclass(frozen=True)
class Mint(MintingExecMsg):
    recipient: str = _wire(_STRING)
    amount: int = _wire(_UINT128)


@dataclass(frozen=True)
class UpdateMinter(MintingExecMsg):
    """Set a new minter; None removes the minter forever."""

    new_minter: str | None = _wire(_optional(_STRING))


class MintingQueryMsg(Message):
    """Query messages of the minting interface."""


@dataclass(frozen=True)
class Minter(MintingQueryMsg):
    pass