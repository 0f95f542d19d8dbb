"""
Configuration settings for the FMP client
"""
import os
from typing import Optional

from dotenv import load_dotenv

from ._secure_key import SecureKey, secure_key_or_none

# Load environment variables from .env file
load_dotenv()


class Config:
    """Client configuration"""

    # Base URLs
    FMP_BASE_URL_V3 = os.getenv("FMP_BASE_URL_V3", "https://financialmodelingprep.com/api/v3")
    FMP_BASE_URL_V4 = os.getenv("FMP_BASE_URL_V4", "https://financialmodelingprep.com/api/v4")

    # Logging
    LOG_LEVEL = os.getenv("FMP_LOG_LEVEL", "INFO").upper()

    # Explicit API key set by the embedding application (takes precedence over FMP_API_KEY)
    _fmp_api_key: Optional[SecureKey] = None

    @classmethod
    def set_fmp_api_key(cls, api_key: Optional[str]) -> None:
        """
        Install a process-wide API key, or clear it with None.

        Args:
            api_key: FMP API key
        """
        cls._fmp_api_key = secure_key_or_none(api_key)

    @classmethod
    def get_fmp_api_key(cls) -> Optional[SecureKey]:
        """
        Get the FMP API key for the current call.

        The environment is read on every call so a key exported after import
        is still picked up.

        Returns:
            SecureKey wrapper or None if no key is configured
        """
        if cls._fmp_api_key:
            return cls._fmp_api_key
        return secure_key_or_none(os.getenv("FMP_API_KEY"))
