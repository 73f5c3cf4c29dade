"""Mail-message schema.

``EmailSummary`` carries what a list view needs. ``EmailDetail`` is the
result of fetching one message in full and is a strict superset of the
summary: every summary field is kept unchanged and four fields are added.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, StrictBool, StrictInt

from shared_types.models.base import WireModel


class EmailAttachment(WireModel):
    """Metadata for one attachment; the content itself is never embedded."""

    filename: str = Field(description="Attachment file name")
    mime_type: str = Field(alias="mimeType", description="MIME type")
    size: StrictInt = Field(ge=0, description="Size in bytes")


class EmailSummary(WireModel):
    """Metadata for one email message, sufficient for a list view."""

    id: str = Field(description="Provider message ID")
    thread_id: str = Field(alias="threadId", description="Provider thread ID")
    subject: str = Field(description="Subject header")
    from_: str = Field(alias="from", description="Raw From header")
    to: str = Field(description="Raw To header")
    date: str = Field(description="Raw Date header")
    snippet: str = Field(description="Short preview of the body")
    label_ids: tuple[str, ...] = Field(
        alias="labelIds",
        description="Provider label IDs, in provider order",
    )
    is_unread: StrictBool = Field(alias="isUnread", description="Whether message is unread")

    def with_detail(
        self,
        *,
        body: str,
        cc: str = "",
        bcc: str = "",
        attachments: Iterable[EmailAttachment] = (),
    ) -> EmailDetail:
        """Extend this summary into an ``EmailDetail``.

        Summary fields are carried over untouched.
        """
        return EmailDetail(
            **self._summary_values(),
            body=body,
            cc=cc,
            bcc=bcc,
            attachments=tuple(attachments),
        )

    def _summary_values(self) -> dict[str, object]:
        return {name: getattr(self, name) for name in EmailSummary.model_fields}


class EmailDetail(EmailSummary):
    """Full content of one email message."""

    body: str = Field(description="Message body, plain text or HTML")
    cc: str = Field(description="Raw Cc header")
    bcc: str = Field(description="Raw Bcc header")
    attachments: tuple[EmailAttachment, ...] = Field(
        description="Attachment descriptors; may be empty",
    )

    def to_summary(self) -> EmailSummary:
        """Project onto the summary fields only."""
        return EmailSummary(**self._summary_values())
