"""
API utility functions for response formatting.
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.errors import ErrorKind
from services.envelope import Envelope


def envelope_response(envelope: Envelope) -> JSONResponse:
    """
    Serialize a service envelope.

    The HTTP status code is the envelope's `status`.
    """
    return JSONResponse(
        status_code=envelope.status,
        content=jsonable_encoder(envelope.to_dict()),
    )


def error_response(
    message: str,
    status_code: int,
    error: ErrorKind,
    data: Optional[Any] = None,
) -> JSONResponse:
    """Failure envelope for errors raised outside a service call."""
    return envelope_response(Envelope.fail(message, status_code, error, data=data))
