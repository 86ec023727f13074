"""Decoding of the associated token account program's create instruction."""

from __future__ import annotations

from dataclasses import dataclass

from .instruction import InstructionAccountsIterator, InvalidInstructionError
from .parser import Instruction, MessageHeader

__all__ = [
    "SplAssociatedTokenAccountCreateInfo",
    "parse_spl_associated_token_account_instruction",
]


@dataclass(frozen=True)
class SplAssociatedTokenAccountCreateInfo:
    """Accounts involved in creating an associated token account."""

    funder: bytes
    address: bytes
    owner: bytes
    mint: bytes


def _take(accounts: InstructionAccountsIterator, role: str) -> bytes:
    try:
        return next(accounts)
    except StopIteration:
        raise InvalidInstructionError(f"missing {role} account") from None


def parse_spl_associated_token_account_instruction(
    instruction: Instruction, header: MessageHeader
) -> SplAssociatedTokenAccountCreateInfo:
    """Read the accounts of a create instruction.

    Seven accounts are required: funder, address, owner, mint, then the system
    program, the token program and the rent sysvar, which are passed over.
    """
    accounts = InstructionAccountsIterator(header, instruction)
    info = SplAssociatedTokenAccountCreateInfo(
        funder=_take(accounts, "funder"),
        address=_take(accounts, "address"),
        owner=_take(accounts, "owner"),
        mint=_take(accounts, "mint"),
    )
    for _ in ("system program", "token program", "rent sysvar"):
        accounts.skip()
    return info