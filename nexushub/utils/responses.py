"""
Response envelopes.

Every successful route returns the same shape:
    {"status": "success", "status_code": ..., "message": ..., "data": ...}
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(status_code: int, message: str, data: Any = None) -> JSONResponse:
    """Wrap `data` in the success envelope. Pydantic models are encoded."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "status_code": status_code,
            "message": message,
            "data": jsonable_encoder(data),
        },
    )
