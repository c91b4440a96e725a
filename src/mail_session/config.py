"""Configuration module for mail sessions.

This module handles loading configuration values from environment
variables and exposes the ambient property snapshot used whenever a
session is created without explicit properties.
"""

import os
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

# Load environment variables from .env file for configuration
load_dotenv()

# Email Configuration - Global Constants
EMAIL_ADDRESS = os.getenv("EMAIL_ADDRESS", "")
SMTP_SERVER = os.getenv("SMTP_SERVER", "localhost")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))  # SMTP with STARTTLS
IMAP_SERVER = os.getenv("IMAP_SERVER", "localhost")
IMAP_PORT = int(os.getenv("IMAP_PORT", "993"))  # IMAP over SSL

# Environment variables with this prefix become ambient session properties
PROPERTY_PREFIX = "MAIL_"


def system_properties(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return a snapshot of the ambient system-wide session properties.

    Every variable named ``MAIL_*`` is turned into a dotted lower-case key,
    so ``MAIL_SMTP_HOST`` becomes ``mail.smtp.host``.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        A new dictionary; mutating it does not affect the environment
    """
    if environ is None:
        environ = os.environ

    return {
        name.lower().replace("_", "."): value
        for name, value in environ.items()
        if name.upper().startswith(PROPERTY_PREFIX)
    }
