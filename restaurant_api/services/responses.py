from __future__ import annotations

from typing import Optional, Type

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from restaurant_api.services.results import Result

ADDED = "added"
DELETED = "deleted"


def to_response(
    result: Result,
    schema: Optional[Type[BaseModel]] = None,
    confirmation: Optional[str] = None,
) -> JSONResponse:
    """
    Translate a service result into the HTTP response.

    Both client input and storage failures are reported as 400 with an
    ``error`` field. Successful writes return the bare ``confirmation``
    token instead of the affected entity.
    """
    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": jsonable_encoder(result.error)},
        )

    if confirmation is not None:
        return JSONResponse(status_code=status.HTTP_200_OK, content=confirmation)

    rows = result.value or []
    if schema is not None:
        payload = [
            schema.model_validate(row).model_dump(mode="json", by_alias=True)
            for row in rows
        ]
    else:
        payload = jsonable_encoder(rows)
    return JSONResponse(status_code=status.HTTP_200_OK, content=payload)
