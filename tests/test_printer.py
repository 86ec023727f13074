import pytest

from solview.parser import SizedString
from solview.printer import (
    PrintError,
    encode_base58,
    print_amount,
    print_i64,
    print_sized_string,
    print_string,
    print_summary,
    print_timestamp,
    print_token_amount,
    print_u64,
)

U64_MAX = 2**64 - 1
LONG_KEY = "GADFVW3UXVKDOU626XUPYDJU2BFCGFJHQ6SREYOZ6IJV4XSHOALEQN2I"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "0 SAFE"),
        (1, "0.000000001 SAFE"),
        (1000000000, "1 SAFE"),
        (10000000000000001, "10000000.000000001 SAFE"),
        (10000000001, "10.000000001 SAFE"),
        (10000000100000000, "10000000.1 SAFE"),
    ],
)
def test_print_amount(amount, expected):
    assert print_amount(amount, 24) == expected


@pytest.mark.parametrize(
    "amount, decimals, expected",
    [
        (0, 0, "0 TST"),
        (0, 10, "0 TST"),
        (0, 19, "0 TST"),
        (1, 0, "1 TST"),
        (1, 10, "0.0000000001 TST"),
        (1, 19, "0.0000000000000000001 TST"),
        (10000000000000000000, 19, "1 TST"),
        (U64_MAX, 19, "1.8446744073709551615 TST"),
        (U64_MAX, 10, "1844674407.3709551615 TST"),
        (U64_MAX, 1, "1844674407370955161.5 TST"),
        (U64_MAX, 0, "18446744073709551615 TST"),
    ],
)
def test_print_token_amount(amount, decimals, expected):
    assert print_token_amount(amount, "TST", decimals, 26) == expected


def test_print_token_amount_without_asset():
    assert print_token_amount(1500, None, 3, 26) == "1.5"


def test_print_token_amount_digits_do_not_fit():
    with pytest.raises(PrintError):
        print_token_amount(1, "TST", 10, 10)


def test_print_token_amount_asset_does_not_fit():
    with pytest.raises(PrintError):
        print_token_amount(U64_MAX, "TST", 19, 25)


def test_print_sized_string():
    string = SizedString(bytes([0x74, 0x65, 0x73, 0x74]))
    assert print_sized_string(string, 5) == ("test", False)
    assert print_sized_string(string, 4) == ("te~", True)
    assert print_sized_string(string, 2) == ("~", True)
    assert print_sized_string(string, 1) == ("", True)


def test_print_string():
    assert print_string("fits", 5) == ("fits", False)
    assert print_string("too long", 5) == ("too~", True)
    assert print_string("too_long", 2) == ("~", True)
    assert print_string("too_long", 1) == ("", True)


def test_print_summary():
    assert print_summary(LONG_KEY, 27, 12, 12) == "GADFVW3UXVKD..4XSHOALEQN2I"
    assert print_summary(LONG_KEY, 27, 6, 6) == "GADFVW..LEQN2I"
    assert print_summary("short enough", 27, 12, 12) == "short enough"


def test_print_summary_buffer_too_small():
    with pytest.raises(PrintError):
        print_summary("buffer too small", 0, 12, 12)


@pytest.mark.parametrize(
    "value, expected",
    [
        (-(2**63), "-9223372036854775808"),
        (2**63 - 1, "9223372036854775807"),
        (0, "0"),
        (-1, "-1"),
    ],
)
def test_print_i64(value, expected):
    assert print_i64(value, 21) == expected


def test_print_u64():
    assert print_u64(0, 21) == "0"
    assert print_u64(U64_MAX, 21) == "18446744073709551615"


def test_print_u64_too_small():
    with pytest.raises(PrintError):
        print_u64(U64_MAX, 20)
    with pytest.raises(PrintError):
        print_u64(0, 0)


def test_print_timestamp():
    assert print_timestamp(0, 20) == "1970-01-01 00:00:00"
    assert print_timestamp(1588374349, 20) == "2020-05-01 23:05:49"


def test_print_timestamp_too_small():
    with pytest.raises(PrintError):
        print_timestamp(0, 19)


def test_encode_base58_zero_pubkey():
    assert encode_base58(bytes(32), 45) == "1" * 32


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", ""),
        (b"\x00", "1"),
        (bytes.fromhex("61"), "2g"),
        (bytes.fromhex("626262"), "a3gV"),
        (bytes.fromhex("636363"), "aPEr"),
        (bytes.fromhex("0000287fb4cd"), "11233QC4"),
        (b"Hello World!", "2NEpo7TZRRrLZSi2U"),
    ],
)
def test_encode_base58_vectors(data, expected):
    assert encode_base58(data, 64) == expected


def test_encode_base58_output_too_small():
    with pytest.raises(PrintError):
        encode_base58(bytes.fromhex("61"), 2)


def test_encode_base58_input_too_long():
    with pytest.raises(PrintError):
        encode_base58(bytes(65), 200)