"""Tests for the httpx integration."""

import asyncio
import ssl

import httpx
import pytest

from host_trust import Configuration
from host_trust.integrations.httpx import (
    create_async_client,
    create_client,
    create_ssl_context,
)
from host_trust.trust import NullPlatformSource


@pytest.fixture
def ca_file(tmp_path, ca_cert, pem):
    path = tmp_path / "internal-ca.pem"
    path.write_bytes(pem(ca_cert))
    return str(path)


def test_ssl_context_trusts_only_configured_ca(ca_file):
    """A configured CA replaces the default roots."""
    config = Configuration(git={"http.sslcainfo": ca_file})

    context = create_ssl_context(config, "example.com", NullPlatformSource())

    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True
    ca_certs = context.get_ca_certs()
    assert len(ca_certs) == 1
    assert ca_certs[0]["subject"] == ((("commonName", "Internal Root CA"),),)


def test_ssl_context_verification_disabled(ca_file):
    """Disabled verification wins over any CA setting."""
    config = Configuration(
        git={"http.sslcainfo": ca_file},
        env={"GIT_SSL_NO_VERIFY": "true"},
    )

    context = create_ssl_context(config, "example.com", NullPlatformSource())

    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False


def test_ssl_context_defaults_without_override():
    """Without configuration the context verifies against default roots."""
    context = create_ssl_context(Configuration(), "example.com", NullPlatformSource())

    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True


def test_create_client(ca_file):
    """Clients are plain httpx clients."""
    config = Configuration(git={"http.sslcainfo": ca_file})

    with create_client(config, "example.com", NullPlatformSource(), timeout=5.0) as client:
        assert isinstance(client, httpx.Client)
        assert client.timeout.connect == 5.0


def test_create_async_client(ca_file):
    """Async clients are plain httpx async clients."""
    config = Configuration(git={"http.sslcainfo": ca_file})

    client = create_async_client(config, "example.com", NullPlatformSource())

    assert isinstance(client, httpx.AsyncClient)
    asyncio.run(client.aclose())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
