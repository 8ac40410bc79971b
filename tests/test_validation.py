"""Tests for request payload validation and error classification."""

import pytest

from ledger_api.app.core.errors import RequestValidationFailed, ValidationFailure
from ledger_api.app.core.validation import RequestShape, check_payload, validate_payload
from ledger_api.app.schemas.transaction import TransactionKind


def registration(**overrides):
    payload = {
        "name": "Ana",
        "email": "a@x.com",
        "password": "abcd",
        "password_confirmation": "abcd",
    }
    payload.update(overrides)
    return payload


class TestRegisterShape:

    def test_valid_payload_returns_model(self):
        model, failure = check_payload(RequestShape.REGISTER, registration())
        assert failure is None
        assert model.name == "Ana"
        assert model.email == "a@x.com"

    def test_confirm_alias_is_accepted(self):
        payload = registration()
        del payload["password_confirmation"]
        payload["confirm"] = "abcd"
        model, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is None
        assert model.password_confirmation == "abcd"

    def test_invalid_email(self):
        _, failure = check_payload(RequestShape.REGISTER, registration(email="not-an-email"))
        assert failure is ValidationFailure.INVALID_EMAIL

    def test_password_mismatch(self):
        _, failure = check_payload(RequestShape.REGISTER, registration(password_confirmation="abce"))
        assert failure is ValidationFailure.PASSWORD_MISMATCH

    def test_missing_confirmation_is_a_mismatch(self):
        payload = registration()
        del payload["password_confirmation"]
        _, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is ValidationFailure.PASSWORD_MISMATCH

    def test_short_password(self):
        _, failure = check_payload(
            RequestShape.REGISTER, registration(password="ab", password_confirmation="ab")
        )
        assert failure is ValidationFailure.PASSWORD_TOO_SHORT

    def test_empty_name_is_generic(self):
        _, failure = check_payload(RequestShape.REGISTER, registration(name=""))
        assert failure is ValidationFailure.INVALID

    def test_missing_email_is_generic(self):
        payload = registration()
        del payload["email"]
        _, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is ValidationFailure.INVALID

    def test_email_wins_over_everything(self):
        payload = registration(name="", email="nope", password="ab", password_confirmation="zz")
        _, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is ValidationFailure.INVALID_EMAIL

    def test_mismatch_wins_over_short_password(self):
        payload = registration(password="ab", password_confirmation="abc")
        _, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is ValidationFailure.PASSWORD_MISMATCH

    def test_short_password_wins_over_generic(self):
        payload = registration(name="", password="ab", password_confirmation="ab")
        _, failure = check_payload(RequestShape.REGISTER, payload)
        assert failure is ValidationFailure.PASSWORD_TOO_SHORT


class TestLoginShape:

    def test_valid(self):
        model, failure = check_payload(RequestShape.LOGIN, {"email": "a@x.com", "password": "abcd"})
        assert failure is None
        assert model.password == "abcd"

    def test_email_before_password(self):
        _, failure = check_payload(RequestShape.LOGIN, {"email": "bad", "password": "a"})
        assert failure is ValidationFailure.INVALID_EMAIL

    def test_short_password(self):
        _, failure = check_payload(RequestShape.LOGIN, {"email": "a@x.com", "password": "a"})
        assert failure is ValidationFailure.PASSWORD_TOO_SHORT

    def test_missing_password(self):
        _, failure = check_payload(RequestShape.LOGIN, {"email": "a@x.com"})
        assert failure is ValidationFailure.INVALID


class TestTransactionShape:

    def test_valid(self):
        model, failure = check_payload(
            RequestShape.TRANSACTION, {"kind": "deposit", "amount": 50, "description": "salary"}
        )
        assert failure is None
        assert model.kind is TransactionKind.DEPOSIT
        assert model.amount == 50.0

    def test_numeric_string_amount_is_parsed(self):
        model, failure = check_payload(
            RequestShape.TRANSACTION, {"kind": "withdrawal", "amount": "12.5", "description": "lunch"}
        )
        assert failure is None
        assert model.amount == 12.5

    @pytest.mark.parametrize("amount", ["abc", "NaN", "inf", None, True])
    def test_non_numeric_amount_rejected(self, amount):
        _, failure = check_payload(
            RequestShape.TRANSACTION, {"kind": "deposit", "amount": amount, "description": "x"}
        )
        assert failure is ValidationFailure.INVALID

    def test_empty_description_rejected(self):
        _, failure = check_payload(
            RequestShape.TRANSACTION, {"kind": "deposit", "amount": 1, "description": ""}
        )
        assert failure is ValidationFailure.INVALID

    def test_unknown_kind_wins_over_generic(self):
        _, failure = check_payload(
            RequestShape.TRANSACTION, {"kind": "transfer", "amount": "abc", "description": "x"}
        )
        assert failure is ValidationFailure.INVALID_KIND


@pytest.mark.parametrize("shape", list(RequestShape))
def test_non_object_payload_is_invalid(shape):
    _, failure = check_payload(shape, ["not", "an", "object"])
    assert failure is ValidationFailure.INVALID


def test_validate_payload_raises_with_failure():
    with pytest.raises(RequestValidationFailed) as excinfo:
        validate_payload(RequestShape.LOGIN, {"email": "bad", "password": "abcd"})
    assert excinfo.value.failure is ValidationFailure.INVALID_EMAIL
    assert excinfo.value.status_code == 422
    assert excinfo.value.to_body() == {"detail": "Invalid email", "code": "invalid_email"}
