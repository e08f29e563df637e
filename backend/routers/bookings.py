import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.booking import BookingHandler
from core.deps import get_booking_handler
from core.errors import BookingError, MissingFieldsError
from schemas.booking import BookingRequest

router = APIRouter()
logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def _read_booking(request: Request) -> BookingRequest:
    """Parse a JSON or form-encoded body into a BookingRequest.

    An empty body is treated like an empty form: every field is missing.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return BookingRequest.model_validate(dict(form))

    body = await request.body()
    if not body.strip():
        return BookingRequest()
    return BookingRequest.model_validate(json.loads(body))


@router.post(
    "/submit",
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": BookingRequest.model_json_schema()},
                "application/x-www-form-urlencoded": {"schema": BookingRequest.model_json_schema()},
            }
        }
    },
)
async def submit_booking(request: Request, handler: BookingHandler = Depends(get_booking_handler)):
    """Book one unit of an item"""
    try:
        payload = await _read_booking(request)
    except (ValidationError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        logger.info("[booking] invalid body: %s", e)
        return _failure(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    try:
        result = await handler.submit(payload)
    except MissingFieldsError as e:
        logger.info("[booking] rejected, missing fields: %s", ", ".join(e.fields))
        return _failure(e.status_code, e.message)
    except BookingError as e:
        logger.info("[booking] rejected %s/%s: %s", payload.category, payload.item, e.message)
        return _failure(e.status_code, e.message)
    except Exception as e:
        logger.exception("[booking] submit failed")
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Server error: {e}")

    return {"success": True, "message": "Booking successful", "data": result.catalog.to_document()}
