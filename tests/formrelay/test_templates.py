"""Tests for email composition."""

import pytest

from formrelay.schemas.forms import Attachment, CareerApplication, ContactMessage
from formrelay.services.templates import (
    DEFAULT_CONTACT_SUBJECT,
    build_career_email,
    build_contact_email,
    format_position,
    header_value,
)


@pytest.fixture
def application():
    return CareerApplication(
        name="Asha Rao",
        email="asha@example.com",
        phone="555-0100",
        position="chartered_accountant",
        message="Looking forward to hearing from you.",
    )


@pytest.fixture
def resume():
    return Attachment(filename="asha-cv.pdf", content_type="application/pdf", content=b"%PDF-1.4 test")


def _html(message) -> str:
    return message.get_body(preferencelist=("html",)).get_content()


class TestFormatPosition:
    """Tests for the position label formatter."""

    @pytest.mark.parametrize(
        "code,label",
        [
            ("chartered_accountant", "Chartered Accountant"),
            ("articleship", "Articleship"),
            ("others", "Others"),
        ],
    )
    def test_known_codes(self, code, label):
        assert format_position(code) == label

    def test_unknown_code_passes_through(self):
        assert format_position("tax_consultant") == "tax_consultant"


class TestHeaderValue:
    """Tests for header sanitising."""

    @pytest.mark.parametrize(
        "raw,clean",
        [
            ("Audit\nquery", "Audit query"),
            ("Audit\r\nquery", "Audit query"),
            ("a@x.com\r\n", "a@x.com"),
            ("plain", "plain"),
        ],
    )
    def test_line_breaks_collapsed(self, raw, clean):
        assert header_value(raw) == clean


class TestCareerEmail:
    """Tests for job application emails."""

    def test_headers(self, application, resume):
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        assert message["Subject"] == "Job Application: Asha Rao - Chartered Accountant"
        assert message["From"] == "RSN Career Portal <relay@example.com>"
        assert message["To"] == "hr@example.com"

    def test_body_contains_fields(self, application, resume):
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        html = _html(message)
        assert "Asha Rao" in html
        assert "asha@example.com" in html
        assert "555-0100" in html
        assert "Chartered Accountant" in html
        assert "Looking forward" in html

    def test_attachment(self, application, resume):
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        attachments = list(message.iter_attachments())
        assert len(attachments) == 1
        assert attachments[0].get_filename() == "asha-cv.pdf"
        assert attachments[0].get_content_type() == "application/pdf"
        assert attachments[0].get_content() == b"%PDF-1.4 test"

    def test_unknown_position_verbatim(self, application, resume):
        application.position = "tax_consultant"
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        assert message["Subject"].endswith("- tax_consultant")
        assert "tax_consultant" in _html(message)

    def test_html_is_escaped(self, resume):
        application = CareerApplication(
            name="<b>Eve</b>", email="eve@example.com", phone="1", position="others"
        )
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        assert "<b>Eve</b>" not in _html(message)
        assert "&lt;b&gt;Eve&lt;/b&gt;" in _html(message)

    def test_missing_content_type_falls_back(self, application):
        resume = Attachment(filename="cv", content_type="", content=b"data")
        message = build_career_email(
            application, resume, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        attachment = next(message.iter_attachments())
        assert attachment.get_content_type() == "application/octet-stream"


class TestContactEmail:
    """Tests for contact inquiry emails."""

    def test_defaults(self):
        contact = ContactMessage(name="A", email="a@x.com", message="hi")
        message = build_contact_email(
            contact, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        html = _html(message)
        assert message["Subject"] == DEFAULT_CONTACT_SUBJECT
        assert message["Reply-To"] == "a@x.com"
        assert message["From"] == "RSN Contact <relay@example.com>"
        assert "<strong>Preferred:</strong> Email" in html
        assert "<strong>Phone:</strong> -" in html

    def test_explicit_values(self):
        contact = ContactMessage(
            name="A",
            email="a@x.com",
            message="hi",
            phone="555-0100",
            subject="Audit enquiry",
            preferredContact="Phone",
        )
        message = build_contact_email(
            contact, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        html = _html(message)
        assert message["Subject"] == "Audit enquiry"
        assert "<strong>Preferred:</strong> Phone" in html
        assert "555-0100" in html

    def test_line_breaks_in_reply_to(self):
        contact = ContactMessage(name="A", email="a@x.com\r\n", message="hi", subject="Hi\r\nthere")
        message = build_contact_email(
            contact, sender_name="RSN", sender="relay@example.com", recipient="hr@example.com"
        )
        assert message["Subject"] == "Hi there"
        assert message["Reply-To"] == "a@x.com"
