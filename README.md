# solview

`solview` reads the binary wire format of Solana-style transaction messages
and turns the values in them into short strings for a small display. It is a
pure-Python library with no third-party dependencies.

## Modules

- `solview.parser`: `Parser` wraps a byte buffer and reads values from it in
  order. It reads little-endian integers (`u8`, `u16`, `u32`, `u64`, `i64`),
  compact lengths of one to three bytes (`length`), option tags (`option`,
  which returns an `Option`), u64-length-prefixed byte strings
  (`sized_string`, which returns a `SizedString`), 32-byte public keys and
  hashes (`pubkey`, `hash`), and compact-length-prefixed byte runs (`data`).
  It also reads whole structures: `pubkeys_header`, `pubkeys`,
  `message_header` (a `MessageHeader`) and `instruction` (an `Instruction`).
  `remaining()` and `is_empty()` report what is left. Reading past the end,
  or reading an invalid option tag, raises `ParseError`.
- `solview.printer`: formats values for display fields of a given size.
  `out_length` counts a terminating byte, as a fixed display buffer would.
  - `print_token_amount(amount, asset, decimals, out_length)` and
    `print_amount(amount, out_length)` (9 decimals, suffix `SAFE`) render
    amounts with trailing fractional zeros removed.
  - `print_u64` and `print_i64` render integers in decimal.
  - `print_timestamp` renders Unix seconds as `YYYY-MM-DD hh:mm:ss`.
  - `print_string` and `print_sized_string` return `(text, truncated)`.
    Truncated text ends in `~`.
  - `print_summary(text, out_length, left_length, right_length)` shortens
    long text to `head..tail`.
  - `encode_base58(data, max_out_length=None)` encodes up to 64 bytes.

  A value that does not fit, or is out of range, raises `PrintError`.
- `solview.rfc3339`: `rfc3339_format(seconds, length)` formats Unix seconds
  for years 0000 to 9999. It raises `TimestampError` outside that range, or
  when `length` is 19 or less.
- `solview.instruction`: support for checking compiled instructions.
  - `instruction_validate(instruction, header)` raises
    `InvalidInstructionError` if the program index or any account index is
    outside the message's accounts.
  - `ProgramId`, `InstructionInfo` and `InstructionBrief` describe decoded
    instructions and expected shapes. `instruction_info_matches_brief` and
    `instruction_infos_match_briefs` compare them.
  - `InstructionAccountsIterator` yields the account keys an instruction
    refers to. It provides `skip()` and `remaining()`.
- `solview.associated_token_account`:
  `parse_spl_associated_token_account_instruction(instruction, header)`
  reads the seven accounts of a "create" instruction. It returns the funder,
  address, owner and mint in a `SplAssociatedTokenAccountCreateInfo`. It
  raises `InvalidInstructionError` if accounts are missing.

## What it does not do

The package does not know the addresses of any program, so it does not map
an instruction to a `ProgramId` by itself. It does not decode system, stake,
vote or token program instructions. It does not process a whole message
body, and it does not build a transaction summary for display. It is a
library only and has no command-line tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from solview.parser import Parser
from solview.printer import encode_base58, print_amount, print_summary

parser = Parser(bytes([42, 0, 0, 0, 0, 0, 0, 0]))
print(print_amount(parser.u64(), 24))     # 0.000000042 SAFE
assert parser.is_empty()

key = encode_base58(bytes(32), 45)        # "11111111111111111111111111111111"
print(print_summary(key, 27, 12, 12))     # 111111111111..111111111111
```