import pytest

from solview.associated_token_account import (
    SplAssociatedTokenAccountCreateInfo,
    parse_spl_associated_token_account_instruction,
)
from solview.instruction import InvalidInstructionError
from solview.parser import Instruction, MessageHeader, PubkeysHeader


KEYS = tuple(bytes([n]) * 32 for n in range(1, 8))


def _header():
    return MessageHeader(PubkeysHeader(1, 0, 5, len(KEYS)), KEYS, bytes(32), 1)


def test_parse_create():
    ix = Instruction(6, bytes([0, 1, 0, 2, 3, 4, 5]), b"")
    info = parse_spl_associated_token_account_instruction(ix, _header())
    assert info == SplAssociatedTokenAccountCreateInfo(
        funder=KEYS[0], address=KEYS[1], owner=KEYS[0], mint=KEYS[2]
    )


def test_parse_create_distinct_roles():
    ix = Instruction(6, bytes([3, 2, 1, 0, 4, 5, 6]), b"")
    info = parse_spl_associated_token_account_instruction(ix, _header())
    assert (info.funder, info.address, info.owner, info.mint) == (KEYS[3], KEYS[2], KEYS[1], KEYS[0])


def test_extra_accounts_are_ignored():
    ix = Instruction(6, bytes([0, 1, 2, 3, 4, 5, 6, 6]), b"")
    info = parse_spl_associated_token_account_instruction(ix, _header())
    assert info.mint == KEYS[3]


@pytest.mark.parametrize("count", [0, 3, 4, 6])
def test_too_few_accounts(count):
    ix = Instruction(6, bytes(range(count)), b"")
    with pytest.raises(InvalidInstructionError):
        parse_spl_associated_token_account_instruction(ix, _header())