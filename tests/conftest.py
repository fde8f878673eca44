"""Shared fixtures for host-trust tests."""

from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID


def _make_ca_certificate(common_name: str) -> x509.Certificate:
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(timezone.utc)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=365))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )


class RecordingSink:
    """Diagnostic sink that keeps every message."""

    def __init__(self):
        self.messages: list[str] = []

    def record(self, message: str, *args: object) -> None:
        self.messages.append(message % args if args else message)


@pytest.fixture
def make_cert():
    """Factory for self-signed CA certificates."""
    return _make_ca_certificate


@pytest.fixture
def ca_cert():
    return _make_ca_certificate("Internal Root CA")


@pytest.fixture
def other_ca_cert():
    return _make_ca_certificate("Other Root CA")


@pytest.fixture
def sink():
    return RecordingSink()


def to_pem(*certs: x509.Certificate) -> bytes:
    return b"".join(c.public_bytes(serialization.Encoding.PEM) for c in certs)


def to_der(*certs: x509.Certificate) -> bytes:
    return b"".join(c.public_bytes(serialization.Encoding.DER) for c in certs)


@pytest.fixture
def pem():
    """Encode certificates as a PEM bundle."""
    return to_pem


@pytest.fixture
def der():
    """Encode certificates as concatenated DER."""
    return to_der
