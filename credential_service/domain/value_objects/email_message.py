"""Outbound email message value object.

Headers come from a fixed set of fields rather than a free-form mapping,
so the rendered header block is always in the same order.
"""

from dataclasses import dataclass

HTML_CONTENT_TYPE = "text/html; charset=UTF-8"


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailMessage:
    """A single-recipient HTML email.

    Attributes:
        from_address: Sender address.
        to_address: Recipient address.
        subject: Subject line.
        html_body: HTML body.
        content_type: MIME content type of the body.
    """

    from_address: str
    to_address: str
    subject: str
    html_body: str
    content_type: str = HTML_CONTENT_TYPE

    def headers(self) -> list[tuple[str, str]]:
        """Header name/value pairs in transmission order."""
        return [
            ("From", self.from_address),
            ("To", self.to_address),
            ("Subject", self.subject),
            ("MIME-Version", "1.0"),
            ("Content-Type", self.content_type),
        ]
