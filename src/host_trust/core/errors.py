"""Exception hierarchy for host-trust."""


class HostTrustError(Exception):
    """Base exception for all host-trust errors."""

    pass


# Certificate errors
class CertificateError(HostTrustError):
    """Base exception for certificate-related errors."""

    pass


class CertificateParseError(CertificateError):
    """Failed to parse certificate data."""

    pass


# Configuration errors
class ConfigurationError(HostTrustError):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigurationError):
    """Configuration file could not be loaded or parsed."""

    pass
