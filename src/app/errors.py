"""Application error kinds

Every failed use case returns an AppError whose kind decides the HTTP
status at the API boundary. Codes stay stable per operation; internal
detail only ever goes into `reason`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from libs.result import Error


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AUTHORIZATION = "authorization"
    TRANSACTION = "transaction"
    STORE = "store"


@dataclass(frozen=True)
class AppError(Error):
    kind: ErrorKind = ErrorKind.STORE


def error_code(label: str, suffix: str) -> str:
    return f"{label.upper().replace(' ', '_')}_{suffix}"


def not_found(label: str, entity_id: Optional[int] = None) -> AppError:
    reason = f"{label} id={entity_id} does not exist" if entity_id is not None else None
    return AppError(
        code=error_code(label, "NOT_FOUND"),
        message=f"{label if label.isupper() else label.capitalize()} not found",
        reason=reason,
        kind=ErrorKind.NOT_FOUND,
    )


def transaction_failed(code: str, message: str, exc: Exception) -> AppError:
    return AppError(code=code, message=message, reason=str(exc), kind=ErrorKind.TRANSACTION)


def retrieval_failed(code: str, message: str, exc: Exception) -> AppError:
    return AppError(code=code, message=message, reason=str(exc), kind=ErrorKind.STORE)
