"""X.509 certificate parsing for DER sequences and PEM bundles."""

import re

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from .errors import CertificateParseError

_SEQUENCE_TAG = 0x30

_PEM_CERTIFICATE_RE = re.compile(
    rb"-----BEGIN CERTIFICATE-----(?:(?!-----BEGIN ).)*?-----END CERTIFICATE-----",
    re.DOTALL,
)


def _split_der_sequence(data: bytes) -> list[bytes]:
    """Split concatenated DER structures into individual encodings.

    Raises:
        CertificateParseError: If the data is not a run of complete
            ASN.1 SEQUENCEs
    """
    chunks = []
    offset = 0
    size = len(data)

    while offset < size:
        if data[offset] != _SEQUENCE_TAG:
            raise CertificateParseError(
                f"Expected ASN.1 SEQUENCE at offset {offset}"
            )
        if offset + 2 > size:
            raise CertificateParseError("Truncated DER header")

        first = data[offset + 1]
        if first < 0x80:
            length = first
            header = 2
        else:
            # Long form; DER forbids the indefinite form (0x80)
            num_octets = first & 0x7F
            if num_octets == 0 or num_octets > 4:
                raise CertificateParseError(
                    f"Unsupported DER length encoding at offset {offset}"
                )
            if offset + 2 + num_octets > size:
                raise CertificateParseError("Truncated DER length")
            length = int.from_bytes(
                data[offset + 2 : offset + 2 + num_octets], "big"
            )
            header = 2 + num_octets

        end = offset + header + length
        if end > size:
            raise CertificateParseError("Truncated DER certificate")

        chunks.append(data[offset:end])
        offset = end

    return chunks


def parse_der_certificates(data: bytes) -> list[x509.Certificate]:
    """Parse one or more concatenated DER certificates.

    Empty input is a valid, empty sequence.

    Args:
        data: Raw certificate bytes

    Returns:
        Parsed certificates in input order

    Raises:
        CertificateParseError: If any part of the data is not a DER certificate
    """
    certs = []
    for chunk in _split_der_sequence(data):
        try:
            certs.append(x509.load_der_x509_certificate(chunk))
        except ValueError as e:
            raise CertificateParseError(f"Invalid DER certificate: {e}")
    return certs


def parse_pem_certificates(data: bytes) -> list[x509.Certificate]:
    """Extract every valid certificate from PEM-encoded data.

    Blocks that fail to parse are skipped, as is any text between blocks.
    A BEGIN line with no matching END does not swallow the next block.

    Args:
        data: PEM text, possibly holding several CERTIFICATE blocks

    Returns:
        Parsed certificates (empty if none were valid)
    """
    certs = []
    for match in _PEM_CERTIFICATE_RE.finditer(data):
        try:
            certs.append(x509.load_pem_x509_certificate(match.group(0)))
        except ValueError:
            continue
    return certs


def certificate_to_der(cert: x509.Certificate) -> bytes:
    return cert.public_bytes(serialization.Encoding.DER)


def certificate_to_pem(cert: x509.Certificate) -> bytes:
    return cert.public_bytes(serialization.Encoding.PEM)
