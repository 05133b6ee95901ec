"""
Uniform result envelope returned by every service operation.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from core.errors import ErrorKind, TaskFlowError
from core.logger import format_exception_short, logger


class Envelope(BaseModel):
    """
    Result of a service call.

    - success: True when the operation completed
    - message: Human readable outcome
    - status: HTTP status the API layer responds with
    - data: Operation payload (optional)
    - error: Error kind, only present on failure
    """

    success: bool
    message: str
    status: int
    data: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, message: str, data: Any = None, status: int = 200) -> "Envelope":
        return cls(success=True, message=message, status=status, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        status: int,
        error: ErrorKind,
        data: Any = None,
    ) -> "Envelope":
        return cls(
            success=False,
            message=message,
            status=status,
            data=data,
            error=ErrorKind(error).value,
        )

    @classmethod
    def from_error(cls, prefix: str, exc: Exception) -> "Envelope":
        """
        Build a failure envelope from an exception.

        TaskFlowError subclasses keep their status and kind; anything else is a
        backend failure (500).
        """
        if isinstance(exc, TaskFlowError):
            return cls.fail(f"{prefix}: {exc.message}", exc.status, exc.kind)
        return cls.fail(f"{prefix}: {exc}", 500, ErrorKind.BACKEND_FAILURE)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the response body; `data` and `error` only when set."""
        body: Dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "status": self.status,
        }
        if self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = self.error
        return body


def failure_envelope(prefix: str, exc: Exception) -> Envelope:
    """Log a failed operation and convert the exception to an envelope."""
    if isinstance(exc, TaskFlowError) and exc.status < 500:
        logger.warning(f"{prefix}: {exc.message}")
    else:
        logger.error(format_exception_short(exc, prefix))
    return Envelope.from_error(prefix, exc)
