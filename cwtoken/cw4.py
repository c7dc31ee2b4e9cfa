"""Group membership interface messages."""

from __future__ import annotations

from dataclasses import dataclass

from cwtoken.messages import _STRING, Message, _list_of, _wire


class Cw4ExecMsg(Message):
    """Execute messages of the group interface."""


@dataclass(frozen=True)
class UpdateAdmin(Cw4ExecMsg):
    admin: str = _wire(_STRING)


@dataclass(frozen=True)
class UpdateMembers(Cw4ExecMsg):
    members: list[str] = _wire(_list_of(_STRING))


@dataclass(frozen=True)
class AddHook(Cw4ExecMsg):
    hook: str = _wire(_STRING)


@dataclass(frozen=True)
class RemoveHook(Cw4ExecMsg):
    hook: str = _wire(_STRING)


class Cw4QueryMsg(Message):
    """Query messages of the group interface."""


@dataclass(frozen=True)
class Member(Cw4QueryMsg):
    member: str = _wire(_STRING)


@dataclass(frozen=True)
class ListMembers(Cw4QueryMsg):
    pass


@dataclass(frozen=True)
class TotalWeight(Cw4QueryMsg):
    pass


@dataclass(frozen=True)
class Admin(Cw4QueryMsg):
    pass


@dataclass(frozen=True)
class Hooks(Cw4QueryMsg):
    pass