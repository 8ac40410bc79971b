"""Tests for password hashing and token helpers."""

from ledger_api.app.core.clock import ledger_date
from ledger_api.app.core.security import generate_session_token, hash_password, verify_password

from .conftest import FIXED_NOW


def test_hash_is_salted_and_verifiable():
    first = hash_password("abcd", rounds=4)
    second = hash_password("abcd", rounds=4)
    assert first != second
    assert first.startswith("$2b$04$")
    assert verify_password("abcd", first)
    assert verify_password("abcd", second)
    assert not verify_password("abce", first)


def test_verify_rejects_malformed_hash():
    assert verify_password("abcd", "plain-text") is False


def test_session_tokens_are_unique():
    tokens = {generate_session_token() for _ in range(100)}
    assert len(tokens) == 100


def test_ledger_date_has_day_and_month_only():
    assert ledger_date(lambda: FIXED_NOW) == "05/03"


def test_long_password_is_hashed_in_full():
    hashed = hash_password("x" * 100, rounds=4)
    assert verify_password("x" * 100, hashed)
    assert not verify_password("x" * 99 + "y", hashed)
    assert not verify_password("x" * 72, hashed)
