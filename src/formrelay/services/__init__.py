"""Services package."""

from formrelay.services.mailer import Mailer
from formrelay.services.templates import format_position

__all__ = ["Mailer", "format_position"]
