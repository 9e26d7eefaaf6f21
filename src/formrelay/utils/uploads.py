"""Request form parsing that keeps uploaded files in memory."""

from __future__ import annotations

from fastapi import Request
from starlette.datastructures import FormData, Headers
from starlette.formparsers import MultiPartException, MultiPartParser

from formrelay.exceptions import FormValidationError, UploadTooLargeError

# Allowance for multipart boundaries and the text fields around the file
FORM_OVERHEAD_BYTES = 64 * 1024


class InMemoryMultiPartParser(MultiPartParser):
    """
    Multipart parser whose file parts never roll over to a temporary file.

    Starlette spools uploads to disk past 1 MiB by default; raising the spool
    threshold above the upload cap keeps every accepted file in memory.
    """

    def __init__(self, headers: Headers, stream, *, spool_max_size: int) -> None:
        super().__init__(headers, stream)
        self.spool_max_size = spool_max_size


async def read_form(request: Request, max_upload_bytes: int) -> FormData:
    """
    Parse a multipart or urlencoded body without touching the filesystem.

    Args:
        request: Incoming request
        max_upload_bytes: Largest file accepted

    Returns:
        Parsed form; empty when the body is not a form

    Raises:
        UploadTooLargeError: If Content-Length already exceeds the cap
        FormValidationError: If the multipart body is malformed
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit():
        if int(content_length) > max_upload_bytes + FORM_OVERHEAD_BYTES:
            raise UploadTooLargeError(max_upload_bytes)

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        parser = InMemoryMultiPartParser(
            request.headers, request.stream(), spool_max_size=max_upload_bytes + 1
        )
        try:
            return await parser.parse()
        except MultiPartException as exc:
            raise FormValidationError("Invalid request body") from exc

    if content_type.startswith("application/x-www-form-urlencoded"):
        return await request.form()

    return FormData()
