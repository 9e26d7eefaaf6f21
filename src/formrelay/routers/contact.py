"""Contact API router."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from formrelay.dependencies import MailerDep
from formrelay.exceptions import FormValidationError, MailTransportError
from formrelay.schemas.forms import ContactMessage
from formrelay.schemas.responses import SubmissionResponse
from formrelay.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def read_payload(request: Request) -> dict[str, Any]:
    """
    Read a JSON or form-encoded body into a plain dict.

    Raises:
        FormValidationError: If a JSON body cannot be decoded into an object
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FormValidationError("Invalid request body") from exc
    if not isinstance(data, dict):
        raise FormValidationError("Invalid request body")
    return data


@router.post("/contact", response_model=SubmissionResponse)
async def contact(request: Request, mailer: MailerDep) -> SubmissionResponse:
    """
    Relay a contact inquiry, with Reply-To set to the submitter.

    Raises:
        FormValidationError 400: If name, email or message is missing.
        HTTPException 500: If the email could not be sent.
    """
    payload = await read_payload(request)
    try:
        inquiry = ContactMessage.model_validate(payload)
    except ValidationError as exc:
        raise FormValidationError("Required fields missing") from exc

    try:
        await mailer.send_contact_message(inquiry)
    except MailTransportError as exc:
        logger.error("Contact message from %s not sent: %s", inquiry.email, exc)
        raise HTTPException(status_code=500, detail="Message failed") from exc

    return SubmissionResponse(success=True, message="Message sent")
