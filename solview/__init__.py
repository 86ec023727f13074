"""Read Solana-style transaction message bytes and format their values for display."""

__version__ = "1.0.6"

__all__ = [
    "associated_token_account",
    "instruction",
    "parser",
    "printer",
    "rfc3339",
]