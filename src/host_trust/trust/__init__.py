"""Trust pools and the loaders that fill them."""

from .loader import load_dir, load_file
from .platform_source import (
    KeychainPlatformSource,
    NullPlatformSource,
    PlatformCertSource,
    default_platform_source,
)
from .pool import TrustPool, merge_certificates, merge_pem

__all__ = [
    "TrustPool",
    "merge_certificates",
    "merge_pem",
    "load_file",
    "load_dir",
    "PlatformCertSource",
    "NullPlatformSource",
    "KeychainPlatformSource",
    "default_platform_source",
]
