"""Translate exceptions raised while handling a request into the error envelope."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from surveypoc.core.config import get_settings
from surveypoc.core.exceptions import FieldValidationError
from surveypoc.core.exceptions import ResourceNotFoundError
from surveypoc.core.i18n import MessageSource
from surveypoc.core.i18n import build_message_source
from surveypoc.core.i18n import resolve_locale
from surveypoc.schemas.error import RestError
from surveypoc.schemas.error import RestErrors
from surveypoc.schemas.error import RestFieldError

logger = logging.getLogger(__name__)

ERR_VALIDATION_ERROR = "validation_error"
ERR_INTERNAL_SERVER_ERROR = "internal_error"

_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}
_NO_BODY_STATUSES = {status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED}

Translation = tuple[int, RestErrors]


def _http_error_code(status_code: int) -> str:
    if status_code == status.HTTP_404_NOT_FOUND:
        return "not_found"
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return "method_not_allowed"
    if status_code == status.HTTP_401_UNAUTHORIZED:
        return "unauthorized"
    if status_code == status.HTTP_403_FORBIDDEN:
        return "forbidden"
    if status_code == status.HTTP_409_CONFLICT:
        return "conflict"
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return ERR_INTERNAL_SERVER_ERROR
    return "bad_request"


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    if not location:
        return "request"

    parts = list(location)
    if parts[0] in _REQUEST_PARTS and len(parts) > 1:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def _issue_field(issue: Mapping[str, Any]) -> str:
    # json_invalid locations end with a character offset, not a field
    if issue.get("type") == "json_invalid":
        return "body"
    return _format_location(issue.get("loc", ()))


def _localized_field_error(
    message_source: MessageSource,
    locale: str,
    *,
    field: str,
    code: str,
    default_message: str,
    arguments: Mapping[str, Any] | None = None,
) -> RestFieldError:
    message = message_source.get_message(
        [f"{code}.{field}", code],
        locale,
        arguments=arguments,
        default=default_message,
    )
    return RestFieldError(field=field, code=code, message=message)


def _request_field_errors(
    exc: RequestValidationError, locale: str, message_source: MessageSource
) -> list[RestFieldError]:
    field_errors: list[RestFieldError] = []
    for issue in exc.errors():
        field_errors.append(
            _localized_field_error(
                message_source,
                locale,
                field=_issue_field(issue),
                code=str(issue.get("type", "value_error")),
                default_message=str(issue.get("msg", "Invalid value")),
                arguments=issue.get("ctx"),
            )
        )
    return field_errors


def _domain_field_errors(
    exc: FieldValidationError, locale: str, message_source: MessageSource
) -> list[RestFieldError]:
    return [
        _localized_field_error(
            message_source,
            locale,
            field=violation.field,
            code=violation.code,
            default_message=violation.default_message,
            arguments=violation.arguments,
        )
        for violation in exc.violations
    ]


def translate_validation_error(
    exc: RequestValidationError | FieldValidationError,
    locale: str,
    message_source: MessageSource,
) -> Translation:
    """Build a 400 response carrying one localized item per field error."""
    logger.error("Translating method arguments not valid", exc_info=exc)

    if isinstance(exc, FieldValidationError):
        field_errors = _domain_field_errors(exc, locale, message_source)
    else:
        field_errors = _request_field_errors(exc, locale, message_source)

    error = RestError(
        code=ERR_VALIDATION_ERROR,
        message=message_source.get_message([ERR_VALIDATION_ERROR], locale, default="Validation Error"),
        field_errors=field_errors,
    )
    return status.HTTP_400_BAD_REQUEST, RestErrors(errors=[error])


def translate_not_found(exc: ResourceNotFoundError, locale: str, message_source: MessageSource) -> Translation:
    """Build a 404 response with one item per missing identifier."""
    logger.error("Translating %s not found", exc.resource, exc_info=exc)

    rest_errors = RestErrors()
    for missing_id in exc.ids:
        rest_errors.add_error(
            RestError(
                code=exc.error_code,
                message=message_source.get_message(
                    [exc.error_code],
                    locale,
                    arguments={"id": missing_id},
                    default=f"The {exc.resource} with id {missing_id} was not found",
                ),
            )
        )
    return status.HTTP_404_NOT_FOUND, rest_errors


def translate_http_exception(exc: StarletteHTTPException) -> Translation:
    """Wrap framework HTTP errors, keeping their status code."""
    logger.warning("Translating HTTP error status=%s", exc.status_code, exc_info=exc)

    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else "Request failed"
    error = RestError(code=_http_error_code(exc.status_code), message=message)
    return exc.status_code, RestErrors(errors=[error])


def translate_internal_error(exc: BaseException, locale: str, message_source: MessageSource) -> Translation:
    """Build a generic 500 response that leaks nothing about ``exc``."""
    logger.error("Translating internal Server Error", exc_info=exc)

    error = RestError(
        code=ERR_INTERNAL_SERVER_ERROR,
        message=message_source.get_message([ERR_INTERNAL_SERVER_ERROR], locale, default="Internal Server Error"),
    )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, RestErrors(errors=[error])


def translate_exception(exc: BaseException, locale: str, message_source: MessageSource) -> Translation:
    """Map any exception to a status code and error envelope."""
    if isinstance(exc, (RequestValidationError, FieldValidationError)):
        return translate_validation_error(exc, locale, message_source)
    if isinstance(exc, ResourceNotFoundError):
        return translate_not_found(exc, locale, message_source)
    if isinstance(exc, StarletteHTTPException):
        return translate_http_exception(exc)
    return translate_internal_error(exc, locale, message_source)


def _message_source(request: Request) -> MessageSource:
    return request.app.state.message_source


def _request_locale(request: Request, message_source: MessageSource) -> str:
    return resolve_locale(
        request.headers.get("accept-language"),
        message_source.locales,
        message_source.default_locale,
    )


def _build_error_response(translation: Translation, *, headers: Mapping[str, str] | None = None) -> JSONResponse:
    status_code, payload = translation
    return JSONResponse(status_code=status_code, content=payload.to_payload(), headers=headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | FieldValidationError
) -> JSONResponse:
    """Return request binding and domain field errors as a 400 envelope."""

    message_source = _message_source(request)
    locale = _request_locale(request, message_source)
    return _build_error_response(translate_validation_error(exc, locale, message_source))


async def not_found_exception_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    """Return missing questions or users as a 404 envelope."""

    message_source = _message_source(request)
    locale = _request_locale(request, message_source)
    return _build_error_response(translate_not_found(exc, locale, message_source))


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> Response:
    """Normalize framework HTTP exceptions to the shared envelope."""

    translation = translate_http_exception(exc)
    headers = getattr(exc, "headers", None)
    if exc.status_code in _NO_BODY_STATUSES:
        return Response(status_code=exc.status_code, headers=headers)
    return _build_error_response(translation, headers=headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Avoid leaking internal exceptions while keeping response shape stable."""

    message_source = _message_source(request)
    locale = _request_locale(request, message_source)
    return _build_error_response(translate_internal_error(exc, locale, message_source))


def register_error_handlers(app: FastAPI, message_source: MessageSource | None = None) -> None:
    """Attach the exception translator to a FastAPI app instance."""

    app.state.message_source = message_source or build_message_source(get_settings())
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(FieldValidationError, validation_exception_handler)
    app.add_exception_handler(ResourceNotFoundError, not_found_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
