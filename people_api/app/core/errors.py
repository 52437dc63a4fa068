"""
Domain exceptions and their translation into HTTP problem responses.

Services raise the exceptions defined here; they never build HTTP
responses themselves.  ``register_exception_handlers`` installs one
handler per exception family on the FastAPI application so that every
failure leaves the API as a problem object with a machine readable
``errorCode``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


class PeopleError(Exception):
    """Base class for errors raised by the people services."""


class NotFoundError(PeopleError):
    """The requested person does not exist."""

    def __init__(self, person_id: int, message: Optional[str] = None) -> None:
        self.person_id = person_id
        super().__init__(message or f"Pessoa com ID {person_id} não encontrada")


class InvalidInputError(PeopleError, ValueError):
    """A parameter or value failed validation."""


class ConflictError(InvalidInputError):
    """A person with the requested id already exists.

    Reported with the same status as ``InvalidInputError``.
    """

    def __init__(self, person_id: int) -> None:
        self.person_id = person_id
        super().__init__(f"Pessoa com ID {person_id} já existe no sistema")


class ConstraintViolationError(InvalidInputError):
    """A record invariant was broken (e.g. admission before birth)."""


def problem(
    status_code: int,
    title: str,
    detail: str,
    error_code: str,
    message: str,
    request: Optional[Request] = None,
    **extra: Any,
) -> JSONResponse:
    """Build a problem+json response with the shared error body shape."""
    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path if request is not None else None,
        "errorCode": error_code,
        "message": message,
    }
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, media_type=PROBLEM_MEDIA_TYPE)


def _field_name(loc) -> str:
    # ("body", "birthDate") -> "birthDate"; ("query", "output") -> "output"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers mapping people exceptions to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return problem(
            status.HTTP_404_NOT_FOUND,
            "Pessoa não encontrada",
            str(exc),
            "PESSOA_NOT_FOUND",
            "A pessoa solicitada não foi encontrada no sistema",
            request,
        )

    @app.exception_handler(ConstraintViolationError)
    async def constraint_violation_handler(request: Request, exc: ConstraintViolationError) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return problem(
            status.HTTP_400_BAD_REQUEST,
            "Violação de restrição",
            str(exc),
            "CONSTRAINT_VIOLATION",
            "Os dados fornecidos violam as restrições do sistema",
            request,
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return problem(
            status.HTTP_400_BAD_REQUEST,
            "Parâmetro inválido",
            str(exc),
            "INVALID_PARAMETER",
            "Os parâmetros fornecidos são inválidos",
            request,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        field_errors: Dict[str, str] = {}
        for error in exc.errors():
            field_errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", "invalid value"))
        logger.info("%s %s: validation failed for %s", request.method, request.url.path, sorted(field_errors))
        return problem(
            status.HTTP_400_BAD_REQUEST,
            "Erro de validação",
            "Dados de entrada inválidos",
            "VALIDATION_ERROR",
            "Os dados fornecidos não atendem aos critérios de validação",
            request,
            fieldErrors=field_errors,
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return problem(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erro interno do servidor",
            "Ocorreu um erro inesperado no servidor",
            "INTERNAL_ERROR",
            "Entre em contato com o suporte técnico",
            request,
        )
