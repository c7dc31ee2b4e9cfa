"""Allowance messages and responses."""

from __future__ import annotations

from dataclasses import dataclass

from cwtoken.messages import (
    _BINARY,
    _EXPIRATION,
    _STRING,
    _U32,
    _UINT128,
    Binary,
    Expiration,
    Message,
    _list_of,
    _optional,
    _struct,
    _wire,
)


@dataclass(frozen=True)
class AllowanceResponse:
    """How much a spender may use from an owner; zero and never by default."""

    allowance: int = _wire(_UINT128, default=0)
    expires: Expiration = _wire(_EXPIRATION, default_factory=Expiration)


@dataclass(frozen=True)
class AllowanceInfo:
    spender: str = _wire(_STRING)
    allowance: int = _wire(_UINT128)
    expires: Expiration = _wire(_EXPIRATION)


@dataclass(frozen=True)
class AllAllowancesResponse:
    allowances: list[AllowanceInfo] = _wire(_list_of(_struct(AllowanceInfo)), default_factory=list)


@dataclass(frozen=True)
class SpenderAllowanceInfo:
    owner: str = _wire(_STRING)
    allowance: int = _wire(_UINT128)
    expires: Expiration = _wire(_EXPIRATION)


@dataclass(frozen=True)
class AllSpenderAllowancesResponse:
    allowances: list[SpenderAllowanceInfo] = _wire(
        _list_of(_struct(SpenderAllowanceInfo)), default_factory=list
    )


@dataclass(frozen=True)
class AllAccountsResponse:
    accounts: list[str] = _wire(_list_of(_STRING), default_factory=list)


class AllowancesExecMsg(Message):
    """Execute messages of the allowances interface."""


@dataclass(frozen=True)
class IncreaseAllowance(AllowancesExecMsg):
    """Raise a spender's allowance; a given expiration replaces the current one."""

    spender: str = _wire(_STRING)
    amount: int = _wire(_UINT128)
    expires: Expiration | None = _wire(_optional(_EXPIRATION))


@dataclass(frozen=True)
class DecreaseAllowance(AllowancesExecMsg):
    """Lower a spender's allowance; a given expiration replaces the current one."""

    spender: str = _wire(_STRING)
    amount: int = _wire(_UINT128)
    expires: Expiration | None = _wire(_optional(_EXPIRATION))


@dataclass(frozen=True)
class TransferFrom(AllowancesExecMsg):
    owner: str = _wire(_STRING)
    recipient: str = _wire(_STRING)
    amount: int = _wire(_UINT128)


@dataclass(frozen=True)
class SendFrom(AllowancesExecMsg):
    owner: str = _wire(_STRING)
    contract: str = _wire(_STRING)
    amount: int = _wire(_UINT128)
    msg: Binary = _wire(_BINARY)


@dataclass(frozen=True)
class BurnFrom(AllowancesExecMsg):
    owner: str = _wire(_STRING)
    amount: int = _wire(_UINT128)


class AllowancesQueryMsg(Message):
    """Query messages of the allowances interface."""


@dataclass(frozen=True)
class Allowance(AllowancesQueryMsg):
    owner: str = _wire(_STRING)
    spender: str = _wire(_STRING)


@dataclass(frozen=True)
class AllAllowances(AllowancesQueryMsg):
    owner: str = _wire(_STRING)
    start_after: str | None = _wire(_optional(_STRING))
    limit: int | None = _wire(_optional(_U32))


@dataclass(frozen=True)
class AllSpenderAllowances(AllowancesQueryMsg):
    spender: str = _wire(_STRING)
    start_after: str | None = _wire(_optional(_STRING))
    limit: int | None = _wire(_optional(_U32))


@dataclass(frozen=True)
class AllAccounts(AllowancesQueryMsg):
    start_after: str | None = _wire(_optional(_STRING))
    limit: int | None = _wire(_optional(_U32))