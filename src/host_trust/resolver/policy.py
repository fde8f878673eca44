"""Decide whether TLS certificate verification is disabled for a host."""

from ..core.config import ConfigSource


class VerificationPolicy:
    """Reads the sslverify settings for a host."""

    def __init__(self, config: ConfigSource):
        self.config = config

    def is_disabled(self, host: str) -> bool:
        """Check whether certificate verification is disabled for a host.

        A host-scoped ``http.https://<host>/.sslverify=false`` wins, then the
        global ``http.sslverify=false``, then the ``GIT_SSL_NO_VERIFY``
        environment variable.

        Args:
            host: ``host`` or ``host:port``

        Returns:
            True if verification should be skipped
        """
        host_value, _ = self.config.git_get(f"http.https://{host}/.sslverify")
        if host_value == "false":
            return True

        global_value, _ = self.config.git_get("http.sslverify")
        if global_value == "false":
            return True

        return self.config.env_bool("GIT_SSL_NO_VERIFY", False)


def is_verification_disabled(config: ConfigSource, host: str) -> bool:
    """Shorthand for ``VerificationPolicy(config).is_disabled(host)``."""
    return VerificationPolicy(config).is_disabled(host)
