"""Reader for the compact binary encoding of transaction messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "HASH_SIZE",
    "Instruction",
    "MessageHeader",
    "Option",
    "ParseError",
    "Parser",
    "PUBKEY_SIZE",
    "PubkeysHeader",
    "SizedString",
]

PUBKEY_SIZE = 32
HASH_SIZE = 32


class ParseError(ValueError):
    """Raised when the input does not hold the value being read."""


class Option(enum.IntEnum):
    """Presence tag of an optional field."""

    NONE = 0
    SOME = 1


@dataclass(frozen=True)
class SizedString:
    """A length-prefixed byte string."""

    string: bytes

    @property
    def length(self) -> int:
        return len(self.string)


@dataclass(frozen=True)
class PubkeysHeader:
    """Signature counts and the number of account keys in a message."""

    num_required_signatures: int
    num_readonly_signed_accounts: int
    num_readonly_unsigned_accounts: int
    pubkeys_length: int


@dataclass(frozen=True)
class MessageHeader:
    """Everything in a message before its instructions."""

    pubkeys_header: PubkeysHeader
    pubkeys: tuple[bytes, ...]
    blockhash: bytes | None
    instructions_length: int


@dataclass(frozen=True)
class Instruction:
    """One compiled instruction: program index, account indices and data."""

    program_id_index: int
    accounts: bytes
    data: bytes

    @property
    def accounts_length(self) -> int:
        return len(self.accounts)

    @property
    def data_length(self) -> int:
        return len(self.data)


class Parser:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, buffer):
        self._buffer = bytes(buffer)
        self._offset = 0

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._buffer) - self._offset

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def _take(self, count: int, what: str) -> bytes:
        left = self.remaining()
        if count > left:
            raise ParseError(f"{what} needs {count} bytes, {left} left")
        chunk = self._buffer[self._offset:self._offset + count]
        self._offset += count
        return chunk

    def _unsigned(self, size: int, what: str) -> int:
        return int.from_bytes(self._take(size, what), "little")

    def u8(self) -> int:
        return self._take(1, "u8")[0]

    def u16(self) -> int:
        return self._unsigned(2, "u16")

    def u32(self) -> int:
        return self._unsigned(4, "u32")

    def u64(self) -> int:
        return self._unsigned(8, "u64")

    def i64(self) -> int:
        return int.from_bytes(self._take(8, "i64"), "little", signed=True)

    def length(self) -> int:
        """Read a compact length of one to three bytes, seven bits per byte."""
        value = 0
        for shift in (0, 7, 14):
            byte = self.u8()
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                break
        return value

    def option(self) -> Option:
        tag = self.u8()
        try:
            return Option(tag)
        except ValueError:
            raise ParseError(f"invalid option tag {tag}") from None

    def sized_string(self) -> SizedString:
        size = self.u64()
        return SizedString(self._take(size, "string"))

    def pubkey(self) -> bytes:
        return self._take(PUBKEY_SIZE, "pubkey")

    def hash(self) -> bytes:
        return self._take(HASH_SIZE, "hash")

    def pubkeys_header(self) -> PubkeysHeader:
        return PubkeysHeader(
            num_required_signatures=self.u8(),
            num_readonly_signed_accounts=self.u8(),
            num_readonly_unsigned_accounts=self.u8(),
            pubkeys_length=self.length(),
        )

    def pubkeys(self) -> tuple[PubkeysHeader, tuple[bytes, ...]]:
        """Read the pubkeys header and the account keys it announces."""
        header = self.pubkeys_header()
        raw = self._take(header.pubkeys_length * PUBKEY_SIZE, "pubkeys")
        keys = tuple(
            raw[start:start + PUBKEY_SIZE] for start in range(0, len(raw), PUBKEY_SIZE)
        )
        return header, keys

    def data(self) -> bytes:
        """Read a compact-length-prefixed byte run."""
        size = self.length()
        return self._take(size, "data")

    def message_header(self) -> MessageHeader:
        header, keys = self.pubkeys()
        blockhash = self.hash()
        return MessageHeader(
            pubkeys_header=header,
            pubkeys=keys,
            blockhash=blockhash,
            instructions_length=self.length(),
        )

    def instruction(self) -> Instruction:
        program_id_index = self.u8()
        accounts = self.data()
        data = self.data()
        return Instruction(program_id_index, accounts, data)