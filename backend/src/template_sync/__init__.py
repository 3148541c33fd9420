"""Sync a single Amazon SES email template from local files."""

__version__ = "1.0.0"
