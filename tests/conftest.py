"""Pytest configuration and shared fixtures."""

import base64

import pytest
import structlog


def _b64url(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from shared_types.config import Settings

    return Settings(
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def sample_file_entry() -> dict:
    """Provide a valid file entry in wire form."""
    return {
        "name": "notes.txt",
        "type": "file",
        "size": 128,
        "mtime": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_listing(sample_file_entry) -> dict:
    """Provide a directory listing in wire form, unsorted."""
    return {
        "path": "/",
        "entries": [
            sample_file_entry,
            {"name": "src", "type": "directory", "size": 4096, "mtime": "2024-01-02T00:00:00Z"},
            {"name": "README.md", "type": "file", "size": 512, "mtime": "2024-01-03T00:00:00Z"},
            {"name": "Docs", "type": "directory", "size": 4096, "mtime": "2024-01-04T00:00:00Z"},
        ],
    }


@pytest.fixture
def sample_email_summary() -> dict:
    """Provide a valid email summary in wire form."""
    return {
        "id": "msg123456",
        "threadId": "thread789",
        "subject": "Weekly Newsletter - Python Tips",
        "from": "Python Weekly <newsletter@python.org>",
        "to": "user@example.com",
        "date": "Mon, 1 Jan 2024 09:00:00 +0000",
        "snippet": "Welcome to this week's Python tips!",
        "labelIds": ["INBOX", "UNREAD"],
        "isUnread": True,
    }


@pytest.fixture
def sample_email_data() -> dict:
    """Provide a Gmail API message fetched with format=metadata."""
    return {
        "id": "msg123456",
        "threadId": "thread789",
        "labelIds": ["INBOX", "UNREAD"],
        "snippet": "Welcome to this week's Python tips!",
        "payload": {
            "headers": [
                {"name": "Subject", "value": "Weekly Newsletter - Python Tips"},
                {"name": "From", "value": "Python Weekly <newsletter@python.org>"},
                {"name": "To", "value": "user@example.com"},
                {"name": "Date", "value": "Mon, 1 Jan 2024 09:00:00 +0000"},
            ],
        },
    }


@pytest.fixture
def sample_full_email_data(sample_email_data) -> dict:
    """Provide a Gmail API message fetched with format=full."""
    headers = sample_email_data["payload"]["headers"] + [
        {"name": "cc", "value": "team@example.com"},
        {"name": "Bcc", "value": "archive@example.com"},
    ]
    return {
        **sample_email_data,
        "labelIds": ["INBOX"],
        "payload": {
            "mimeType": "multipart/mixed",
            "headers": headers,
            "body": {"size": 0},
            "parts": [
                {
                    "mimeType": "multipart/alternative",
                    "filename": "",
                    "body": {"size": 0},
                    "parts": [
                        {
                            "mimeType": "text/plain",
                            "filename": "",
                            "body": {"size": 32, "data": _b64url("Hello from the plain part")},
                        },
                        {
                            "mimeType": "text/html",
                            "filename": "",
                            "body": {"size": 40, "data": _b64url("<p>Hello from the html part</p>")},
                        },
                    ],
                },
                {
                    "mimeType": "application/pdf",
                    "filename": "invoice.pdf",
                    "body": {"attachmentId": "att-1", "size": 2048},
                },
                {
                    "filename": "blob.bin",
                    "body": {"attachmentId": "att-2"},
                },
            ],
        },
    }


@pytest.fixture
def b64url():
    """Expose the base64url encoder used to build message fixtures."""
    return _b64url
