"""Resolve the CA trust pool for a host from configuration."""

from collections.abc import Callable, Sequence
from typing import Optional

from ..core.config import ConfigSource
from ..core.diagnostics import DiagnosticSink, default_sink
from ..core.models import LoadInstruction
from ..trust.loader import load_dir, load_file
from ..trust.platform_source import PlatformCertSource, default_platform_source
from ..trust.pool import TrustPool

Probe = Callable[[ConfigSource, str], Optional[LoadInstruction]]


def _env_probe(name: str, kind: str) -> Probe:
    # Environment variables only count when non-empty
    def probe(config: ConfigSource, host: str) -> Optional[LoadInstruction]:
        value, _ = config.env_get(name)
        if value:
            return LoadInstruction(kind=kind, path=value, source=name)
        return None

    return probe


def _git_probe(key_template: str, kind: str) -> Probe:
    # Git keys count when present, even with an empty value
    def probe(config: ConfigSource, host: str) -> Optional[LoadInstruction]:
        key = key_template.format(host=host)
        value, ok = config.git_get(key)
        if ok:
            return LoadInstruction(kind=kind, path=value, source=key)
        return None

    return probe


DEFAULT_PROBES: tuple[Probe, ...] = (
    _env_probe("GIT_SSL_CAINFO", "file"),
    _git_probe("http.https://{host}/.sslcainfo", "file"),
    _git_probe("http.https://{host}.sslcainfo", "file"),
    _git_probe("http.sslcainfo", "file"),
    _env_probe("GIT_SSL_CAPATH", "dir"),
    _git_probe("http.sslcapath", "dir"),
)


def find_instruction(
    config: ConfigSource, host: str, probes: Sequence[Probe] = DEFAULT_PROBES
) -> Optional[LoadInstruction]:
    """Return the first CA source configured for a host, if any.

    Args:
        config: Configuration to consult
        host: ``host`` or ``host:port``
        probes: Ordered probes, highest precedence first

    Returns:
        The instruction from the first matching probe, or None
    """
    for probe in probes:
        instruction = probe(config, host)
        if instruction is not None:
            return instruction
    return None


class CertPoolBuilder:
    """Builds the trust pool a TLS client should use for a host.

    Exactly one configured CA source is loaded: the highest-precedence one
    present in configuration. If loading it fails the result falls back to
    no override rather than to a lower-precedence source. Platform
    certificates are then appended.
    """

    def __init__(
        self,
        config: ConfigSource,
        platform: Optional[PlatformCertSource] = None,
        probes: Sequence[Probe] = DEFAULT_PROBES,
        sink: Optional[DiagnosticSink] = None,
    ):
        """Initialize builder.

        Args:
            config: Configuration to consult
            platform: Platform certificate source (default: per OS)
            probes: Ordered CA source probes
            sink: Diagnostic sink (default: logging)
        """
        self.config = config
        self.platform = platform or default_platform_source()
        self.probes = tuple(probes)
        self.sink = sink or default_sink()

    def resolve_configured(self, host: str) -> Optional[TrustPool]:
        """Load the configured CA source for a host, without platform certificates."""
        instruction = find_instruction(self.config, host, self.probes)
        if instruction is None:
            return None

        self.sink.record(
            "Loading CA %s %r from %s",
            instruction.kind,
            instruction.path,
            instruction.source,
        )
        if instruction.kind == "dir":
            return load_dir(None, instruction.path, self.sink)
        return load_file(None, instruction.path, self.sink)

    def resolve(self, host: str) -> Optional[TrustPool]:
        """Resolve the trust pool for a host.

        Args:
            host: ``host`` or ``host:port``

        Returns:
            Trust pool, or None to use the default system roots
        """
        pool = self.resolve_configured(host)
        return self.platform.append_roots(pool, host)
