"""Classification, validation and account walking for compiled instructions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

from .parser import Instruction, MessageHeader

__all__ = [
    "InstructionAccountsIterator",
    "InstructionBrief",
    "InstructionInfo",
    "InvalidInstructionError",
    "ProgramId",
    "instruction_info_matches_brief",
    "instruction_infos_match_briefs",
    "instruction_validate",
]


class InvalidInstructionError(ValueError):
    """Raised when an instruction does not fit the message it belongs to."""


class ProgramId(enum.IntEnum):
    """Programs whose instructions are recognised."""

    UNKNOWN = 0
    STAKE = 1
    SYSTEM = 2
    VOTE = 3
    SPL_TOKEN = 4
    SPL_ASSOCIATED_TOKEN_ACCOUNT = 5
    SPL_MEMO = 6
    SERUM_ASSERT_OWNER = 7


# Programs with a single instruction: the program alone identifies it.
_SINGLE_INSTRUCTION_PROGRAMS = frozenset(
    {
        ProgramId.SERUM_ASSERT_OWNER,
        ProgramId.SPL_ASSOCIATED_TOKEN_ACCOUNT,
        ProgramId.SPL_MEMO,
    }
)

# Programs whose instructions are told apart by an instruction kind.
_MULTI_INSTRUCTION_PROGRAMS = frozenset(
    {
        ProgramId.SPL_TOKEN,
        ProgramId.STAKE,
        ProgramId.SYSTEM,
        ProgramId.VOTE,
    }
)


@dataclass
class InstructionInfo:
    """A decoded instruction: its program, its kind within that program and details."""

    kind: ProgramId = ProgramId.UNKNOWN
    instruction_kind: Any = None
    details: Any = None


@dataclass(frozen=True)
class InstructionBrief:
    """The shape an instruction is expected to have: program and instruction kind."""

    program_id: ProgramId
    instruction_kind: Any = None


def instruction_validate(instruction: Instruction, header: MessageHeader) -> Instruction:
    """Check that every index of ``instruction`` refers to an account of the message.

    Returns the instruction unchanged; raises InvalidInstructionError otherwise.
    """
    count = header.pubkeys_header.pubkeys_length
    if instruction.program_id_index >= count:
        raise InvalidInstructionError(
            f"program id index {instruction.program_id_index} out of range for {count} accounts"
        )
    for index in instruction.accounts:
        if index >= count:
            raise InvalidInstructionError(
                f"account index {index} out of range for {count} accounts"
            )
    return instruction


def instruction_info_matches_brief(info: InstructionInfo, brief: InstructionBrief) -> bool:
    """Whether ``info`` is the instruction that ``brief`` describes."""
    if brief.program_id != info.kind:
        return False
    if brief.program_id in _SINGLE_INSTRUCTION_PROGRAMS:
        return True
    if brief.program_id in _MULTI_INSTRUCTION_PROGRAMS:
        return brief.instruction_kind == info.instruction_kind
    return False


def instruction_infos_match_briefs(
    infos: Sequence[InstructionInfo], briefs: Sequence[InstructionBrief]
) -> bool:
    """Whether each info matches the brief at the same position, with equal counts."""
    if len(infos) != len(briefs):
        return False
    return all(
        instruction_info_matches_brief(info, brief) for info, brief in zip(infos, briefs)
    )


class InstructionAccountsIterator(Iterator[bytes]):
    """Yields the account keys an instruction refers to, in order."""

    def __init__(self, header: MessageHeader, instruction: Instruction):
        self._pubkeys = header.pubkeys
        self._accounts = bytes(instruction.accounts)
        self._position = 0

    def __iter__(self) -> InstructionAccountsIterator:
        return self

    def __next__(self) -> bytes:
        if self._position >= len(self._accounts):
            raise StopIteration
        index = self._accounts[self._position]
        self._position += 1
        if index >= len(self._pubkeys):
            raise InvalidInstructionError(
                f"account index {index} out of range for {len(self._pubkeys)} keys"
            )
        return self._pubkeys[index]

    def skip(self) -> None:
        """Pass over the next account without looking it up."""
        if self._position >= len(self._accounts):
            raise InvalidInstructionError("instruction has no more accounts")
        self._position += 1

    def remaining(self) -> int:
        """Number of accounts not yet taken."""
        return max(len(self._accounts) - self._position, 0)