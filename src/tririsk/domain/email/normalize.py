"""Canonical email form shared by cache keys and vendor lookups."""

from __future__ import annotations

import string

GMAIL_DOMAINS = ("gmail.com", "googlemail.com")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_email(raw: str) -> str:
    """Return the canonical form of an email address.

    Folds ASCII letters to lower case and trims, drops a ``+tag``
    sub-address (from the first ``+`` to the ``@``), and for Gmail removes dots from the local part and folds
    ``googlemail.com`` into ``gmail.com``. Input without ``@`` is only
    folded and trimmed. Non-ASCII characters keep their case. Never raises.
    """

    email = str(raw or "").strip().translate(_ASCII_LOWER)
    if not email or "@" not in email:
        return email

    local, _, domain = email.rpartition("@")
    tag_start = local.find("+")
    if tag_start > 0:
        local = local[:tag_start]
    if domain in GMAIL_DOMAINS:
        local = local.replace(".", "")
        domain = "gmail.com"
    return f"{local}@{domain}"
