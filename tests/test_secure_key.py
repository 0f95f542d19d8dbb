"""
SecureKey and Config tests
"""
from urllib.parse import urlencode

import pytest

from fmp_client import Config
from fmp_client._secure_key import SecureKey, secure_key_or_none


class TestSecureKey:
    """The key never shows up in str/repr"""

    def test_masked_repr(self):
        key = SecureKey("abcd1234efgh5678")
        assert "1234efgh" not in repr(key)
        assert "1234efgh" not in str(key)
        assert str(key) == "SecureKey(abcd********5678)"

    def test_get_returns_raw_value(self):
        assert SecureKey("secret_api_key_123").get() == "secret_api_key_123"

    def test_short_key_fully_masked(self):
        assert SecureKey("short").masked() == "*****"

    def test_mask_in(self):
        key = SecureKey("abcd1234efgh5678")
        url = "https://financialmodelingprep.com/api/v3/profile/AAPL?apikey=abcd1234efgh5678"
        assert key.mask_in(url).endswith("apikey=abcd********5678")

    def test_mask_in_encoded_key(self):
        key = SecureKey("ab/cd+ef=gh&12")
        url = f"https://financialmodelingprep.com/api/v3/profile/AAPL?{urlencode({'apikey': key.get()})}"
        masked = key.mask_in(url)
        assert "ab%2Fcd%2Bef%3Dgh%2612" in url
        assert "ab%2Fcd%2Bef%3Dgh%2612" not in masked
        assert masked.endswith(f"apikey={key.masked()}")

    def test_bool_and_equality(self):
        assert SecureKey("k1")
        assert not SecureKey("")
        assert SecureKey("k1") == SecureKey("k1")
        assert SecureKey("k1") != SecureKey("k2")

    def test_immutable(self):
        key = SecureKey("k1")
        with pytest.raises(AttributeError):
            key._key = "other"

    def test_secure_key_or_none(self):
        assert secure_key_or_none(None) is None
        assert secure_key_or_none("") is None
        assert secure_key_or_none("k1").get() == "k1"


class TestConfig:
    """API key resolution"""

    def test_explicit_key(self, api_key):
        assert Config.get_fmp_api_key().get() == api_key

    def test_env_key(self, monkeypatch):
        Config.set_fmp_api_key(None)
        monkeypatch.setenv("FMP_API_KEY", "env-key")
        assert Config.get_fmp_api_key().get() == "env-key"

    def test_no_key(self, monkeypatch):
        Config.set_fmp_api_key(None)
        monkeypatch.delenv("FMP_API_KEY", raising=False)
        assert Config.get_fmp_api_key() is None

    def test_base_urls(self):
        assert Config.FMP_BASE_URL_V3.endswith("/api/v3")
        assert Config.FMP_BASE_URL_V4.endswith("/api/v4")
