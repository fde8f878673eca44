"""Core functionality for host-trust."""

from .certs import (
    certificate_to_der,
    certificate_to_pem,
    parse_der_certificates,
    parse_pem_certificates,
)
from .config import ConfigFile, ConfigSource, Configuration, parse_bool
from .diagnostics import DiagnosticSink, LoggingSink, default_sink
from .models import LoadInstruction
from .errors import (
    HostTrustError,
    CertificateError,
    CertificateParseError,
    ConfigurationError,
    ConfigFileError,
)

__all__ = [
    # Certificates
    "certificate_to_der",
    "certificate_to_pem",
    "parse_der_certificates",
    "parse_pem_certificates",
    # Configuration
    "ConfigFile",
    "ConfigSource",
    "Configuration",
    "parse_bool",
    # Diagnostics
    "DiagnosticSink",
    "LoggingSink",
    "default_sink",
    # Models
    "LoadInstruction",
    # Errors
    "HostTrustError",
    "CertificateError",
    "CertificateParseError",
    "ConfigurationError",
    "ConfigFileError",
]
