"""Token payloads and query responses."""

from __future__ import annotations

from dataclasses import dataclass

from cwtoken.messages import (
    _BINARY,
    _STRING,
    _U8,
    _UINT128,
    Binary,
    WasmExecute,
    _struct_to_json,
    _wire,
    to_binary,
)


@dataclass(frozen=True)
class Cw20ReceiveMsg:
    """Payload delivered to a contract under the ``receive`` variant."""

    sender: str = _wire(_STRING)
    amount: int = _wire(_UINT128)
    msg: Binary = _wire(_BINARY)

    def into_binary(self) -> Binary:
        """Serialize as the ``receive`` execute message."""
        return to_binary({"receive": _struct_to_json(self)})

    def into_cosmos_msg(self, contract_addr: str) -> WasmExecute:
        """Build a message executing the named contract with this payload."""
        return WasmExecute(contract_addr=str(contract_addr), msg=self.into_binary(), funds=[])


@dataclass(frozen=True)
class Cw20Coin:
    address: str = _wire(_STRING)
    amount: int = _wire(_UINT128)

    def is_empty(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"address: {self.address}, amount: {self.amount}"


@dataclass(frozen=True)
class Cw20CoinVerified:
    address: str = _wire(_STRING)
    amount: int = _wire(_UINT128)

    def is_empty(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"address: {self.address}, amount: {self.amount}"


@dataclass(frozen=True)
class BalanceResponse:
    balance: int = _wire(_UINT128)


@dataclass(frozen=True)
class TokenInfoResponse:
    name: str = _wire(_STRING)
    symbol: str = _wire(_STRING)
    decimals: int = _wire(_U8)
    total_supply: int = _wire(_UINT128)