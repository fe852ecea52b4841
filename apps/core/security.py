"""Encryption helpers for secrets stored in the database (the OpenAI key)."""
import base64
import hashlib
import logging

from cryptography.fernet import Fernet, InvalidToken
from django.conf import settings

logger = logging.getLogger("apps.core")


def _derive_key() -> bytes:
    if settings.LLM_ENCRYPTION_KEY:
        return settings.LLM_ENCRYPTION_KEY.encode()
    # No explicit key: derive one from SECRET_KEY
    digest = hashlib.sha256(settings.SECRET_KEY.encode()).digest()
    return base64.urlsafe_b64encode(digest)


def get_fernet() -> Fernet:
    return Fernet(_derive_key())


def encrypt_value(value: str) -> str:
    if not value:
        return ''
    return get_fernet().encrypt(value.encode()).decode()


def decrypt_value(value: str) -> str:
    """Return the plain text, or '' when the token was made with another key."""
    if not value:
        return ''
    try:
        return get_fernet().decrypt(value.encode()).decode()
    except InvalidToken:
        logger.warning("Stored secret could not be decrypted; was the encryption key rotated?")
        return ''


def mask_secret(value: str) -> str:
    if not value:
        return ''
    if len(value) <= 8:
        return '*' * len(value)
    return f"{value[:4]}...{value[-4:]}"
