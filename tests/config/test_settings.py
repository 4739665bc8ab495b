"""Tests for EtcdAuthSettings."""

import pytest
from pydantic import ValidationError

from etcd_auth.config import EtcdAuthSettings, get_settings


class TestEtcdAuthSettings:

    def test_defaults(self, monkeypatch):
        for name in ("ETCD_ENDPOINT", "ETCD_SECURE", "ETCD_CALL_TIMEOUT", "ETCD_AUTHORITY"):
            monkeypatch.delenv(name, raising=False)

        settings = EtcdAuthSettings(_env_file=None)

        assert settings.endpoint == "localhost:2379"
        assert settings.secure is False
        assert settings.call_timeout is None
        assert not settings.has_client_certificate

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ETCD_ENDPOINT", "etcd-1.internal:2379")
        monkeypatch.setenv("ETCD_SECURE", "true")
        monkeypatch.setenv("ETCD_CALL_TIMEOUT", "2.5")

        settings = EtcdAuthSettings(_env_file=None)

        assert settings.endpoint == "etcd-1.internal:2379"
        assert settings.secure is True
        assert settings.call_timeout == 2.5

    @pytest.mark.parametrize("endpoint", ["[::1]:2379", "10.0.0.1:2379", "etcd:1"])
    def test_accepts_endpoints(self, endpoint):
        assert EtcdAuthSettings(endpoint=endpoint).endpoint == endpoint

    @pytest.mark.parametrize("endpoint", ["localhost", "http://etcd:2379", "etcd:0", "etcd:70000", ""])
    def test_rejects_malformed_endpoints(self, endpoint):
        with pytest.raises(ValidationError):
            EtcdAuthSettings(endpoint=endpoint)

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValidationError, match="call_timeout must be positive"):
            EtcdAuthSettings(call_timeout=timeout)

    def test_client_certificate_needs_both_files(self):
        assert not EtcdAuthSettings(private_key_path="key.pem").has_client_certificate
        assert EtcdAuthSettings(
            private_key_path="key.pem", certificate_chain_path="chain.pem"
        ).has_client_certificate

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
