"""Mapping of Gmail API message resources onto the mail schema."""

from .mapping import message_to_email_detail, message_to_email_summary

__all__ = ["message_to_email_detail", "message_to_email_summary"]
