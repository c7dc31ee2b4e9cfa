# cwtoken

Plain Python data types for fungible-token contracts and the interfaces
around them:

- JSON messages for the token allowance, minting and marketing interfaces,
  and for proxy (`cw1`) and group (`cw4`) contracts;
- the response types that token contracts return;
- the validation rules a token contract applies to its creation parameters,
  initial balances and uploaded logos.

Only the standard library is used.

## Installation

```
pip install cwtoken
```

To run the tests:

```
pip install "cwtoken[test]"
pytest
```

## Modules

| Module               | What it holds |
|----------------------|---------------|
| `cwtoken.messages`   | `Binary`, `Coin`, `coins`, `BankSend`, `WasmExecute`, `cosmos_msg_to_json` / `cosmos_msg_from_json`, `Expiration`, the `Message` base class, `MessageError`, `to_binary` / `from_binary` |
| `cwtoken.responses`  | `Cw20ReceiveMsg`, `Cw20Coin`, `Cw20CoinVerified`, `BalanceResponse`, `TokenInfoResponse` |
| `cwtoken.marketing`  | `Logo`, `LogoInfo`, `MarketingInfoResponse`, `DownloadLogoResponse`; messages `UpdateMarketing`, `UploadLogo` (`MarketingExecMsg`) and `MarketingInfo`, `DownloadLogo` (`MarketingQueryMsg`) |
| `cwtoken.allowances` | `AllowanceResponse`, `AllowanceInfo`, `AllAllowancesResponse`, `SpenderAllowanceInfo`, `AllSpenderAllowancesResponse`, `AllAccountsResponse`; messages `IncreaseAllowance`, `DecreaseAllowance`, `TransferFrom`, `SendFrom`, `BurnFrom` (`AllowancesExecMsg`) and `Allowance`, `AllAllowances`, `AllSpenderAllowances`, `AllAccounts` (`AllowancesQueryMsg`) |
| `cwtoken.minting`    | `MinterResponse`; messages `Mint`, `UpdateMinter` (`MintingExecMsg`) and `Minter` (`MintingQueryMsg`) |
| `cwtoken.cw1`        | `CanExecuteResp`; messages `Execute` (`Cw1ExecMsg`) and `CanExecute` (`Cw1QueryMsg`) |
| `cwtoken.cw4`        | messages `UpdateAdmin`, `UpdateMembers`, `AddHook`, `RemoveHook` (`Cw4ExecMsg`) and `Member`, `ListMembers`, `TotalWeight`, `Admin`, `Hooks` (`Cw4QueryMsg`) |
| `cwtoken.validation` | `validate_msg`, `validate_accounts`, `verify_logo` and the errors `ValidationError`, `DuplicateInitialBalanceAddresses`, `LogoTooBig`, `InvalidPngHeader`, `InvalidXmlPreamble` |

## Messages and JSON

Each message is a frozen dataclass belonging to a group (such as
`Cw4ExecMsg`). It encodes to the externally tagged form
`{"snake_case_name": {fields...}}`; a group decodes whichever of its
variants it is given, and `messages()` lists the group's tags in sorted
order. Amounts travel as decimal strings, binary data as base64.

```python
from cwtoken.cw4 import Cw4ExecMsg, UpdateAdmin
from cwtoken.messages import from_binary, to_binary

msg = UpdateAdmin(admin="admin_name")
data = to_binary(msg)   # Binary(b'{"update_admin":{"admin":"admin_name"}}')
assert Cw4ExecMsg.from_json_value(from_binary(data)) == msg

Cw4ExecMsg.messages()
# ['add_hook', 'remove_hook', 'update_admin', 'update_members']
```

Malformed input (wrong types, unknown or missing fields, unknown variants,
bad base64) raises `MessageError`, a subclass of `ValueError`.

Bank and wasm messages can be carried by the proxy messages:

```python
from cwtoken.cw1 import Execute
from cwtoken.messages import BankSend, coins

Execute(msgs=[BankSend(to_address="receiver", amount=coins(10, "atom"))])
```

Expirations are built with `Expiration.at_height(n)`,
`Expiration.at_time(seconds)` or `Expiration.never()` (the default).

## Sending tokens to a contract

```python
from cwtoken.messages import Binary
from cwtoken.responses import Cw20ReceiveMsg

receive = Cw20ReceiveMsg(sender="addr0001", amount=100, msg=Binary(b'{"some":123}'))
wasm = receive.into_cosmos_msg("contract0")   # a WasmExecute with no funds
```

## Validation

```python
from cwtoken.marketing import Logo
from cwtoken.responses import Cw20Coin
from cwtoken.validation import LogoTooBig, validate_accounts, validate_msg, verify_logo

validate_msg("Cash Token", "CASH", 9)
validate_accounts([Cw20Coin("addr0001", 10), Cw20Coin("addr0002", 5)])

try:
    verify_logo(Logo.png(b"\x89PNG\r\n\x1a\n" + b"\x01" * 6000))
except LogoTooBig:
    ...
```

Names must be 3 to 50 UTF-8 bytes, symbols 3 to 12 characters from
`[a-zA-Z-]`, decimals at most 18. Initial balances may not repeat an
address. Embedded logos are capped at 5 KiB; PNG data must start with the
PNG signature and SVG data with an XML preamble (`<?xml ... ?>`). Logo URLs
are not checked. Every failure raises a `ValidationError`.

## What it does not do

The package describes messages, responses and validation rules only. It
does not execute messages, keep balances, allowances or marketing data,
or simulate a chain; there is no command-line tool.