"""Per-host resolution of CA trust and verification settings."""

from .builder import DEFAULT_PROBES, CertPoolBuilder, Probe, find_instruction
from .policy import VerificationPolicy, is_verification_disabled

__all__ = [
    "CertPoolBuilder",
    "DEFAULT_PROBES",
    "Probe",
    "find_instruction",
    "VerificationPolicy",
    "is_verification_disabled",
]
