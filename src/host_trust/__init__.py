"""host-trust - Per-host CA trust resolution for TLS clients."""

from .core import (
    ConfigSource,
    Configuration,
    HostTrustError,
)
from .resolver import CertPoolBuilder, VerificationPolicy, is_verification_disabled
from .trust import (
    TrustPool,
    load_dir,
    load_file,
    merge_certificates,
    merge_pem,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigSource",
    "Configuration",
    "HostTrustError",
    # Resolver
    "CertPoolBuilder",
    "VerificationPolicy",
    "is_verification_disabled",
    # Trust
    "TrustPool",
    "load_dir",
    "load_file",
    "merge_certificates",
    "merge_pem",
]
