"""
Secure API Key Wrapper

Prevents accidental logging or printing of the FMP API key while allowing
normal use when building request URLs.
"""
from typing import Optional
from urllib.parse import quote_plus


class SecureKey:
    """
    Wrapper for API keys that prevents them from being printed or logged.

    str() and repr() never reveal the actual key value.

    Usage:
        key = SecureKey("secret_api_key_123")

        print(key)  # Output: SecureKey(secr**********_123)
        logger.info(f"Using key: {key}")  # Safe

        url = build_url(url, params, key.get())
    """

    __slots__ = ('_key',)

    def __init__(self, key: Optional[str]):
        object.__setattr__(self, '_key', key)

    def get(self) -> Optional[str]:
        """Get the actual key value for use in API calls"""
        return self._key

    def exists(self) -> bool:
        """Check if key is set (not None and not empty)"""
        return bool(self._key)

    def masked(self) -> str:
        """
        Get a masked version showing only first 4 and last 4 characters.

        Returns:
            Masked key like "abcd****xyz9" or "****" if not set
        """
        if not self._key:
            return "****"
        if len(self._key) <= 8:
            return "*" * len(self._key)
        return f"{self._key[:4]}{'*' * (len(self._key) - 8)}{self._key[-4:]}"

    def mask_in(self, text: str) -> str:
        """Replace every occurrence of the key in text, raw or URL-encoded, with its masked form"""
        if not self._key:
            return text
        masked = self.masked()
        text = text.replace(self._key, masked)
        encoded = quote_plus(self._key)
        if encoded != self._key:
            text = text.replace(encoded, masked)
        return text

    def __str__(self) -> str:
        return f"SecureKey({self.masked()})"

    def __repr__(self) -> str:
        return f"SecureKey({self.masked()})"

    def __bool__(self) -> bool:
        return self.exists()

    def __eq__(self, other) -> bool:
        if isinstance(other, SecureKey):
            return self._key == other._key
        return False

    def __hash__(self) -> int:
        return hash(self._key) if self._key else hash(None)

    def __setattr__(self, name, value):
        raise AttributeError("SecureKey is immutable")

    def __delattr__(self, name):
        raise AttributeError("SecureKey is immutable")


def secure_key_or_none(value: Optional[str]) -> Optional[SecureKey]:
    """
    Helper to create SecureKey or return None if value is None/empty.

    Args:
        value: String value or None

    Returns:
        SecureKey wrapper if value exists, None otherwise
    """
    if not value:
        return None
    return SecureKey(value)
