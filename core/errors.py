"""
Error taxonomy shared by repositories, services and the HTTP layer.
Every error carries the HTTP status it maps to and a discriminated kind.
"""

from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    """Discriminated error kinds carried in failure envelopes."""

    MISSING_PARAMETER = "MISSING_PARAMETER"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_MEMBER = "ALREADY_MEMBER"
    NOT_A_MEMBER = "NOT_A_MEMBER"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    BACKEND_FAILURE = "BACKEND_FAILURE"
    PROFILE_PENDING = "PROFILE_PENDING"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TaskFlowError(Exception):
    """Base class for every anticipated failure."""

    status: int = 500
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(TaskFlowError):
    """A required identifier or parameter was empty or absent."""

    status = 400
    kind = ErrorKind.MISSING_PARAMETER


class ValidationFailure(TaskFlowError):
    """One or more field violations, aggregated into a single message."""

    status = 400
    kind = ErrorKind.VALIDATION_FAILURE

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


class NotFoundError(TaskFlowError):
    status = 404
    kind = ErrorKind.NOT_FOUND


class AlreadyMemberError(TaskFlowError):
    status = 400
    kind = ErrorKind.ALREADY_MEMBER


class NotAMemberError(TaskFlowError):
    status = 400
    kind = ErrorKind.NOT_A_MEMBER


class AuthenticationError(TaskFlowError):
    """The identity provider rejected the credentials or token."""

    status = 401
    kind = ErrorKind.AUTHENTICATION_FAILED


class ConflictError(TaskFlowError):
    """The identity provider reports the account already exists."""

    status = 409
    kind = ErrorKind.ALREADY_EXISTS


class BackendFailure(TaskFlowError):
    """Unexpected failure of the document store or identity provider."""

    status = 500
    kind = ErrorKind.BACKEND_FAILURE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
