"""Platform-specific sources of additional trusted certificates."""

import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional, Protocol

from ..core.diagnostics import DiagnosticSink, default_sink
from .pool import TrustPool, merge_pem

SYSTEM_KEYCHAIN = "/Library/Keychains/System.keychain"
SECURITY_TOOL = "/usr/bin/security"

CommandRunner = Callable[[Sequence[str]], bytes]


class PlatformCertSource(Protocol):
    """Appends certificates from an operating system trust store."""

    def append_roots(
        self, pool: Optional[TrustPool], host: str
    ) -> Optional[TrustPool]: ...


class NullPlatformSource:
    """Platform source that adds nothing."""

    def append_roots(
        self, pool: Optional[TrustPool], host: str
    ) -> Optional[TrustPool]:
        return pool


def _run_command(args: Sequence[str]) -> bytes:
    result = subprocess.run(list(args), capture_output=True, check=True)
    return result.stdout


def strip_port(host: str) -> str:
    """Return the hostname part of a ``host`` or ``host:port`` key."""
    if host.startswith("["):
        # [::1]:8443
        end = host.find("]")
        if end != -1:
            return host[1:end]
    name, sep, port = host.rpartition(":")
    if sep and port.isdigit() and ":" not in name:
        return name
    return host


class KeychainPlatformSource:
    """Certificates for a host found in the macOS System and login keychains.

    Internal CAs added to a keychain are not part of the system root store
    that OpenSSL sees. Certificates whose name matches the host are exported
    with ``security find-certificate``.
    """

    def __init__(
        self,
        keychains: Optional[Sequence[str]] = None,
        runner: Optional[CommandRunner] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        """Initialize keychain source.

        Args:
            keychains: Keychain files to search (default: System and login)
            runner: Runs a command and returns its stdout, raising on failure
            sink: Diagnostic sink (default: logging)
        """
        if keychains is None:
            login = Path.home() / "Library" / "Keychains" / "login.keychain"
            keychains = [SYSTEM_KEYCHAIN, str(login)]
        self.keychains = list(keychains)
        self._runner = runner or _run_command
        self._sink = sink or default_sink()

    def append_roots(
        self, pool: Optional[TrustPool], host: str
    ) -> Optional[TrustPool]:
        name = strip_port(host)
        for keychain in self.keychains:
            pool = self._append_from_keychain(pool, name, keychain)
        return pool

    def _append_from_keychain(
        self, pool: Optional[TrustPool], name: str, keychain: str
    ) -> Optional[TrustPool]:
        args = [SECURITY_TOOL, "find-certificate", "-a", "-p", "-c", name, keychain]
        try:
            data = self._runner(args)
        except (OSError, subprocess.CalledProcessError) as e:
            self._sink.record("Error reading keychain %r: %s", keychain, e)
            return pool
        return merge_pem(pool, data)


def default_platform_source() -> PlatformCertSource:
    """Return the platform source for the running operating system."""
    if sys.platform == "darwin":
        return KeychainPlatformSource()
    return NullPlatformSource()
