"""Careers API router - job application submissions."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from starlette.datastructures import FormData, UploadFile

from formrelay.config import settings
from formrelay.dependencies import MailerDep
from formrelay.exceptions import FormValidationError, MailTransportError, UploadTooLargeError
from formrelay.schemas.forms import Attachment, CareerApplication
from formrelay.schemas.responses import SubmissionResponse
from formrelay.utils.logger import get_logger
from formrelay.utils.uploads import read_form

logger = get_logger(__name__)

router = APIRouter()

TEXT_FIELDS = ("name", "email", "phone", "position", "message")


async def career_form(request: Request) -> AsyncIterator[FormData]:
    """Parse the application form in memory and release it after the request."""
    form = await read_form(request, settings.max_upload_bytes)
    try:
        yield form
    finally:
        await form.close()


async def read_resume(
    form: Annotated[FormData, Depends(career_form)],
) -> Attachment | None:
    """
    Buffer the uploaded resume in memory, enforcing the size cap.

    Runs as a dependency so oversized uploads are refused before the handler.

    Returns:
        The attachment, or None when no file was sent

    Raises:
        UploadTooLargeError: If the file is larger than ``max_upload_bytes``
    """
    resume = form.get("resume")
    if not isinstance(resume, UploadFile) or not resume.filename:
        return None

    limit = settings.max_upload_bytes
    content = await resume.read(limit + 1)
    if len(content) > limit:
        logger.warning("Rejected resume upload %r: over %d bytes", resume.filename, limit)
        raise UploadTooLargeError(limit)

    return Attachment(
        filename=resume.filename,
        content_type=resume.content_type or "application/octet-stream",
        content=content,
    )


@router.post("/careers/apply", response_model=SubmissionResponse)
async def apply(
    mailer: MailerDep,
    form: Annotated[FormData, Depends(career_form)],
    resume: Annotated[Attachment | None, Depends(read_resume)],
) -> SubmissionResponse:
    """
    Relay a job application to the HR mailbox.

    Raises:
        FormValidationError 400: If the resume or a required field is missing.
        HTTPException 500: If the email could not be sent.
    """
    if resume is None:
        raise FormValidationError("Resume required")

    fields = {key: form.get(key) for key in TEXT_FIELDS if isinstance(form.get(key), str)}
    try:
        application = CareerApplication(**fields)
    except ValidationError as exc:
        raise FormValidationError("Missing fields") from exc

    try:
        await mailer.send_career_application(application, resume)
    except MailTransportError as exc:
        logger.error("Career application from %s not sent: %s", application.email, exc)
        raise HTTPException(status_code=500, detail="Application failed") from exc

    return SubmissionResponse(success=True, message="Application submitted")
