"""httpx integration for host-trust."""

import ssl
from typing import Any, Optional

import httpx

from ..core.config import ConfigSource
from ..resolver import CertPoolBuilder, VerificationPolicy
from ..trust.platform_source import PlatformCertSource


def create_ssl_context(
    config: ConfigSource,
    host: str,
    platform: Optional[PlatformCertSource] = None,
) -> ssl.SSLContext:
    """Build a client SSL context for a host.

    Args:
        config: Configuration to consult
        host: ``host`` or ``host:port``
        platform: Platform certificate source (default: per OS)

    Returns:
        Context that skips verification if it is disabled for the host,
        trusts only the resolved pool if there is one, and otherwise
        trusts the default system roots
    """
    if VerificationPolicy(config).is_disabled(host):
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    pool = CertPoolBuilder(config, platform=platform).resolve(host)
    if pool is None:
        return ssl.create_default_context()

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.load_verify_locations(cadata=pool.to_pem().decode("ascii"))
    return context


def create_client(
    config: ConfigSource,
    host: str,
    platform: Optional[PlatformCertSource] = None,
    **kwargs: Any,
) -> httpx.Client:
    """Create an httpx client whose TLS trust follows configuration for a host."""
    return httpx.Client(verify=create_ssl_context(config, host, platform), **kwargs)


def create_async_client(
    config: ConfigSource,
    host: str,
    platform: Optional[PlatformCertSource] = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Async counterpart of :func:`create_client`."""
    return httpx.AsyncClient(
        verify=create_ssl_context(config, host, platform), **kwargs
    )
