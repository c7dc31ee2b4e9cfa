"""Proxy interface: re-dispatch messages and check execution permission."""

from __future__ import annotations

from dataclasses import dataclass

from cwtoken.messages import (
    _BOOL,
    _COSMOS_MSG,
    _STRING,
    BankSend,
    Message,
    WasmExecute,
    _list_of,
    _wire,
)


@dataclass(frozen=True)
class CanExecuteResp:
    can_execute: bool = _wire(_BOOL, default=False)


class Cw1ExecMsg(Message):
    """Execute messages of the proxy interface."""


@dataclass(frozen=True)
class Execute(Cw1ExecMsg):
    """Re-dispatch these messages with the contract as sender."""

    msgs: list[BankSend | WasmExecute] = _wire(_list_of(_COSMOS_MSG))


class Cw1QueryMsg(Message):
    """Query messages of the proxy interface."""


@dataclass(frozen=True)
class CanExecute(Cw1QueryMsg):
    """Whether ``sender`` could execute ``msg`` through the proxy."""

    sender: str = _wire(_STRING)
    msg: BankSend | WasmExecute = _wire(_COSMOS_MSG)