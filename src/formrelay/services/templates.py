"""Email composition for career applications and contact inquiries."""

from __future__ import annotations

import re
from email.message import EmailMessage
from email.utils import formataddr
from html import escape

from formrelay.schemas.forms import POSITION_LABELS, Attachment, CareerApplication, ContactMessage

DEFAULT_CONTACT_SUBJECT = "New Contact"
DEFAULT_PREFERRED_CONTACT = "Email"


def format_position(value: str) -> str:
    """
    Map a position code to its display label.

    Args:
        value: Position code from the careers form

    Returns:
        Human-readable label, or the code unchanged when it is not recognised

    Examples:
        >>> format_position("chartered_accountant")
        'Chartered Accountant'
        >>> format_position("intern")
        'intern'
    """
    return POSITION_LABELS.get(value, value)


def header_value(value: str) -> str:
    """Collapse line breaks so submitted text is safe in a mail header."""
    return re.sub(r"[\r\n]+", " ", value).strip()


def _row(label: str, value: str) -> str:
    return f"<p><strong>{escape(label)}:</strong> {escape(value)}</p>"


def _message_block(message: str | None) -> str:
    if not message:
        return "<p></p>"
    return "<p>" + escape(message).replace("\n", "<br>") + "</p>"


def career_subject(application: CareerApplication) -> str:
    subject = f"Job Application: {application.name} - {format_position(application.position)}"
    return header_value(subject)


def career_html(application: CareerApplication) -> str:
    """Render the HTML body for a job application."""
    return "\n".join(
        [
            _row("Name", application.name),
            _row("Email", application.email),
            _row("Phone", application.phone),
            _row("Position", format_position(application.position)),
            _message_block(application.message),
        ]
    )


def contact_html(contact: ContactMessage) -> str:
    """Render the HTML body for a contact inquiry, filling optional fields."""
    return "\n".join(
        [
            _row("Name", contact.name),
            _row("Email", contact.email),
            _row("Phone", contact.phone or "-"),
            _row("Subject", contact.subject or DEFAULT_CONTACT_SUBJECT),
            _row("Preferred", contact.preferred_contact or DEFAULT_PREFERRED_CONTACT),
            _message_block(contact.message),
        ]
    )


def build_career_email(
    application: CareerApplication,
    resume: Attachment,
    *,
    sender_name: str,
    sender: str,
    recipient: str,
) -> EmailMessage:
    """
    Build the outbound message for a job application.

    Args:
        application: Validated application fields
        resume: In-memory resume upload, attached with its original filename
        sender_name: Display name prefix for the From header
        sender: SMTP account address
        recipient: Destination mailbox

    Returns:
        EmailMessage ready for the transport
    """
    message = EmailMessage()
    message["Subject"] = career_subject(application)
    message["From"] = formataddr((f"{sender_name} Career Portal", sender))
    message["To"] = recipient
    message.set_content(career_html(application), subtype="html")

    maintype, _, subtype = resume.content_type.partition("/")
    if not maintype or not subtype:
        maintype, subtype = "application", "octet-stream"
    message.add_attachment(
        resume.content,
        maintype=maintype,
        subtype=subtype,
        filename=header_value(resume.filename),
    )
    return message


def build_contact_email(
    contact: ContactMessage,
    *,
    sender_name: str,
    sender: str,
    recipient: str,
) -> EmailMessage:
    """Build the outbound message for a contact inquiry, replying to the submitter."""
    message = EmailMessage()
    message["Subject"] = header_value(contact.subject or DEFAULT_CONTACT_SUBJECT)
    message["From"] = formataddr((f"{sender_name} Contact", sender))
    message["To"] = recipient
    message["Reply-To"] = header_value(contact.email)
    message.set_content(contact_html(contact), subtype="html")
    return message
