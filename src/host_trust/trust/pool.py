"""Trust pool of CA certificates and the merge primitives that grow it.

A pool reference is ``Optional[TrustPool]``: ``None`` means no override, so
the TLS client should use the platform's default roots. The merge functions
only ever turn ``None`` into a pool when at least one certificate is added.
"""

from collections.abc import Iterable, Iterator
from typing import Optional

from cryptography import x509

from ..core.certs import certificate_to_der, certificate_to_pem, parse_pem_certificates


class TrustPool:
    """Mutable, additive set of trusted certificates."""

    def __init__(self):
        """Initialize an empty trust pool."""
        self._certs: dict[bytes, x509.Certificate] = {}

    def add(self, cert: x509.Certificate) -> None:
        """Add a certificate. Adding an identical certificate again is a no-op.

        Args:
            cert: Parsed X.509 certificate
        """
        self._certs.setdefault(certificate_to_der(cert), cert)

    def certificates(self) -> list[x509.Certificate]:
        return list(self._certs.values())

    def to_pem(self) -> bytes:
        """Serialize the pool as a PEM bundle."""
        return b"".join(certificate_to_pem(cert) for cert in self._certs.values())

    def __contains__(self, cert: object) -> bool:
        if not isinstance(cert, x509.Certificate):
            return False
        return certificate_to_der(cert) in self._certs

    def __iter__(self) -> Iterator[x509.Certificate]:
        return iter(list(self._certs.values()))

    def __len__(self) -> int:
        return len(self._certs)

    def __repr__(self) -> str:
        return f"TrustPool({len(self)} certificates)"


def merge_certificates(
    pool: Optional[TrustPool], certs: Iterable[x509.Certificate]
) -> Optional[TrustPool]:
    """Add certificates to a pool, allocating one only if there is something to add.

    Args:
        pool: Existing pool or None
        certs: Certificates to add

    Returns:
        The input pool unchanged if certs is empty, otherwise the pool
        (newly allocated if the input was None) holding the certificates
    """
    certs = list(certs)
    if not certs:
        return pool

    if pool is None:
        pool = TrustPool()

    for cert in certs:
        pool.add(cert)

    return pool


def merge_pem(pool: Optional[TrustPool], data: bytes) -> Optional[TrustPool]:
    """Add every valid PEM certificate in data to a pool.

    Args:
        pool: Existing pool or None
        data: PEM-encoded certificate bundle

    Returns:
        The input pool unchanged (possibly None) if no certificate could be
        parsed, otherwise the pool holding the new certificates
    """
    if not data:
        return pool

    certs = parse_pem_certificates(data)
    if not certs:
        return pool

    return merge_certificates(pool, certs)
