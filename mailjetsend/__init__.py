"""Asynchronous client for the Mailjet Send API v3: messages, recipients, attachments and sending."""

__version__ = "0.3.1"