"""Unit tests for exception-to-envelope translation without an HTTP round trip."""

from __future__ import annotations

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from surveypoc.core.errors import translate_exception
from surveypoc.core.exceptions import FieldValidationError
from surveypoc.core.exceptions import FieldViolation
from surveypoc.core.exceptions import QuestionNotFoundError
from surveypoc.core.exceptions import UserNotFoundError
from surveypoc.core.i18n import MessageSource


def _missing(*location: str | int) -> dict:
    return {"type": "missing", "loc": location, "msg": "Field required", "input": {}}


@pytest.mark.parametrize("count", [1, 3])
def test_validation_error_has_one_field_item_per_issue(message_source: MessageSource, count: int) -> None:
    issues = [_missing("body", f"field_{index}") for index in range(count)]

    status_code, payload = translate_exception(RequestValidationError(issues), "en", message_source)

    assert status_code == 400
    assert len(payload.errors) == 1
    assert payload.errors[0].code == "validation_error"
    assert [item.field for item in payload.errors[0].field_errors] == [f"field_{index}" for index in range(count)]


def test_unknown_validation_code_keeps_framework_message(message_source: MessageSource) -> None:
    issue = {"type": "uuid_parsing", "loc": ("path", "survey_id"), "msg": "Input should be a valid UUID", "input": "x"}

    _, payload = translate_exception(RequestValidationError([issue]), "fr", message_source)

    field_error = payload.errors[0].field_errors[0]
    assert field_error.code == "uuid_parsing"
    assert field_error.message == "Input should be a valid UUID"


def test_empty_domain_violation_list_still_returns_validation_error(message_source: MessageSource) -> None:
    status_code, payload = translate_exception(FieldValidationError([]), "en", message_source)

    assert status_code == 400
    assert payload.to_payload() == {
        "errors": [{"code": "validation_error", "message": "Validation Error", "fieldErrors": []}]
    }


def test_domain_violation_prefers_field_specific_message(message_source: MessageSource) -> None:
    violation = FieldViolation(field="answers", code="missing", default_message="answers missing")

    _, payload = translate_exception(FieldValidationError([violation]), "en", message_source)

    assert payload.errors[0].field_errors[0].message == "At least one answer must be submitted"


def test_not_found_references_every_id_in_order(message_source: MessageSource) -> None:
    status_code, payload = translate_exception(QuestionNotFoundError([1, 2]), "en", message_source)

    assert status_code == 404
    assert [error.message for error in payload.errors] == [
        "The question with id 1 was not found",
        "The question with id 2 was not found",
    ]
    assert {error.code for error in payload.errors} == {"question_not_found"}


def test_user_not_found_uses_user_code(message_source: MessageSource) -> None:
    status_code, payload = translate_exception(UserNotFoundError(["u-9"]), "en", message_source)

    assert status_code == 404
    assert payload.to_payload() == {
        "errors": [{"code": "user_not_found", "message": "The user with id u-9 was not found"}]
    }


def test_not_found_requires_at_least_one_id() -> None:
    with pytest.raises(ValueError):
        QuestionNotFoundError([])


def test_http_exception_keeps_status_code(message_source: MessageSource) -> None:
    status_code, payload = translate_exception(
        StarletteHTTPException(status_code=405, detail="Method Not Allowed"), "en", message_source
    )

    assert status_code == 405
    assert payload.to_payload() == {"errors": [{"code": "method_not_allowed", "message": "Method Not Allowed"}]}


@pytest.mark.parametrize("exc", [RuntimeError("boom"), KeyError("secret"), ValueError()])
def test_unclassified_exceptions_become_single_internal_error(message_source: MessageSource, exc: Exception) -> None:
    status_code, payload = translate_exception(exc, "en", message_source)

    assert status_code == 500
    assert payload.to_payload() == {"errors": [{"code": "internal_error", "message": "Internal Server Error"}]}


def test_internal_error_message_is_localized(message_source: MessageSource) -> None:
    _, payload = translate_exception(RuntimeError("boom"), "fr", message_source)

    assert payload.errors[0].message == "Erreur interne du serveur"
