"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from formrelay.services.mailer import Mailer


def get_mailer(request: Request) -> Mailer:
    """
    Dependency returning the process-wide mail transport.

    The handle is created by the application lifespan and kept on ``app.state``.
    """
    return request.app.state.mailer


MailerDep = Annotated[Mailer, Depends(get_mailer)]
