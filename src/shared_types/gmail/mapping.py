"""Helpers for mapping Gmail API message resources into the mail schema.

The input is a ``users.messages`` resource as returned by the Gmail API
(``format=metadata`` for summaries, ``format=full`` for details). Nothing here
talks to the network.

Malformed structure (a non-object payload, non-object parts, undecodable
body data) is skipped rather than raised. A field whose value cannot fit the
schema raises ``SchemaValidationError``.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any, TypeVar

import pydantic
import structlog

from shared_types.config import Settings, get_settings
from shared_types.models import EmailAttachment, EmailDetail, EmailSummary, WireModel
from shared_types.validation import schema_error

logger = structlog.get_logger()

M = TypeVar("M", bound=WireModel)

_NON_BASE64 = re.compile(r"[^A-Za-z0-9\-_+/]")


def _build(model: type[M], **values: Any) -> M:
    try:
        return model(**values)
    except pydantic.ValidationError as exc:
        raise schema_error(model, exc) from exc


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _parts(container: dict[str, Any]) -> list[dict[str, Any]]:
    parts = container.get("parts")
    if not isinstance(parts, list):
        return []
    return [p for p in parts if isinstance(p, dict)]


def _header(message: dict[str, Any], name: str) -> str:
    headers = _as_dict(message.get("payload")).get("headers")
    if not isinstance(headers, list):
        return ""
    wanted = name.lower()
    for h in headers:
        if not isinstance(h, dict):
            continue
        header_name = h.get("name")
        if isinstance(header_name, str) and header_name.lower() == wanted:
            # Gmail can include duplicates; the first one wins.
            value = h.get("value")
            return value if isinstance(value, str) else ""
    return ""


def _label_ids(message: dict[str, Any]) -> list[str]:
    label_ids = message.get("labelIds") or []
    if not isinstance(label_ids, list):
        return []
    return [x for x in label_ids if isinstance(x, str)]


def decode_base64url(data: str) -> str:
    """Decode base64url data as UTF-8 text, leniently.

    Padding is optional, characters outside the base64 alphabets are dropped
    and a dangling final character is ignored. Undecodable input yields an
    empty string.
    """
    cleaned = _NON_BASE64.sub("", data)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    padded = cleaned + "=" * (-len(cleaned) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        logger.warning("gmail_body_decode_failed", length=len(data), error=str(exc))
        return ""
    return raw.decode("utf-8", errors="replace")


def _part_data(part: dict[str, Any]) -> str | None:
    data = _as_dict(part.get("body")).get("data")
    return data if isinstance(data, str) and data else None


def extract_body(payload: dict[str, Any]) -> str:
    """Return the best text body of a message payload.

    Prefers the payload's own data, then the first ``text/plain`` part, then
    the first ``text/html`` part, then nested multiparts. Returns an empty
    string when no body is found.
    """

    data = _part_data(payload)
    if data is not None:
        return decode_base64url(data)

    parts = _parts(payload)
    for mime_type in ("text/plain", "text/html"):
        part = next((p for p in parts if p.get("mimeType") == mime_type), None)
        if part is not None:
            data = _part_data(part)
            if data is not None:
                return decode_base64url(data)

    for part in parts:
        if _parts(part):
            nested = extract_body(part)
            if nested:
                return nested

    return ""


def extract_attachments(
    payload: dict[str, Any],
    *,
    default_mime_type: str = "application/octet-stream",
) -> list[EmailAttachment]:
    """Collect attachment descriptors from a payload, depth first.

    Raises:
        SchemaValidationError: If a part's filename, MIME type or size has the
            wrong type.
    """

    attachments: list[EmailAttachment] = []

    def walk(parts: list[dict[str, Any]]) -> None:
        for part in parts:
            body = _as_dict(part.get("body"))
            if part.get("filename") and body.get("attachmentId"):
                attachments.append(
                    _build(
                        EmailAttachment,
                        filename=part["filename"],
                        mime_type=part.get("mimeType") or default_mime_type,
                        size=body.get("size") or 0,
                    )
                )
            walk(_parts(part))

    walk(_parts(payload))
    return attachments


def message_to_email_summary(
    message: dict[str, Any],
    settings: Settings | None = None,
) -> EmailSummary:
    """Convert a Gmail API message to EmailSummary.

    Args:
        message: Gmail API message dict.
        settings: Settings. If None, uses default settings.

    Returns:
        EmailSummary: Summary model; missing headers become empty strings.

    Raises:
        SchemaValidationError: If a present field has the wrong type.
    """

    settings = settings or get_settings()
    label_ids = _label_ids(message)

    return _build(
        EmailSummary,
        id=str(message.get("id") or ""),
        thread_id=str(message.get("threadId") or ""),
        subject=_header(message, "Subject"),
        from_=_header(message, "From"),
        to=_header(message, "To"),
        date=_header(message, "Date"),
        snippet=message.get("snippet") or "",
        label_ids=tuple(label_ids),
        is_unread=settings.gmail_unread_label in label_ids,
    )


def message_to_email_detail(
    message: dict[str, Any],
    settings: Settings | None = None,
) -> EmailDetail | None:
    """Convert a full Gmail API message to EmailDetail.

    Args:
        message: Gmail API message dict fetched with ``format=full``.
        settings: Settings. If None, uses default settings.

    Returns:
        EmailDetail, or None when the message carries no payload object.

    Raises:
        SchemaValidationError: If a present field has the wrong type.
    """

    settings = settings or get_settings()
    payload = message.get("payload")
    if not payload or not isinstance(payload, dict):
        logger.info("gmail_message_without_payload", message_id=message.get("id"))
        return None

    summary = message_to_email_summary(message, settings)
    attachments = extract_attachments(
        payload,
        default_mime_type=settings.attachment_default_mime_type,
    )
    try:
        return summary.with_detail(
            body=extract_body(payload),
            cc=_header(message, "Cc"),
            bcc=_header(message, "Bcc"),
            attachments=attachments,
        )
    except pydantic.ValidationError as exc:
        raise schema_error(EmailDetail, exc) from exc
