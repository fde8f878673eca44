"""Load CA certificates from files and directories into a trust pool."""

import os
from pathlib import Path
from typing import Optional, Union

from ..core.certs import parse_der_certificates, parse_pem_certificates
from ..core.diagnostics import DiagnosticSink, default_sink
from ..core.errors import CertificateParseError
from .pool import TrustPool, merge_certificates

PathLike = Union[str, Path]


def load_file(
    pool: Optional[TrustPool],
    path: PathLike,
    sink: Optional[DiagnosticSink] = None,
) -> Optional[TrustPool]:
    """Merge the certificates held in a file into a pool.

    The file is parsed as concatenated DER first; only if that fails is it
    read as PEM. A DER parse that yields nothing (an empty file) does not
    fall back to PEM.

    Args:
        pool: Existing pool or None
        path: Certificate file
        sink: Diagnostic sink (default: logging)

    Returns:
        The pool with the file's certificates, or the input pool unchanged
        if the file could not be read or held no valid certificate
    """
    sink = sink or default_sink()

    try:
        data = Path(path).read_bytes()
    except (OSError, ValueError) as e:
        sink.record("Error reading cert file %r: %s", str(path), e)
        return pool

    try:
        certs = parse_der_certificates(data)
    except CertificateParseError:
        pass
    else:
        return merge_certificates(pool, certs)

    certs = parse_pem_certificates(data)
    if not certs:
        sink.record("No valid certificates found in %r", str(path))
        return pool
    return merge_certificates(pool, certs)


def load_dir(
    pool: Optional[TrustPool],
    dir_path: PathLike,
    sink: Optional[DiagnosticSink] = None,
) -> Optional[TrustPool]:
    """Merge the certificates of every entry in a directory into a pool.

    Entries are visited in name order and are not recursed into. Anything
    that cannot be read as a certificate file, including sub-directories,
    is skipped.

    Args:
        pool: Existing pool or None
        dir_path: Directory of certificate files
        sink: Diagnostic sink (default: logging)

    Returns:
        The pool with all loadable certificates, or the input pool unchanged
        if the directory could not be listed
    """
    sink = sink or default_sink()

    try:
        with os.scandir(dir_path) as it:
            names = sorted(entry.name for entry in it)
    except (OSError, ValueError) as e:
        sink.record("Error reading cert dir %r: %s", str(dir_path), e)
        return pool

    for name in names:
        pool = load_file(pool, os.path.join(dir_path, name), sink)
    return pool
