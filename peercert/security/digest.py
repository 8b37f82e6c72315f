"""
SHA-256 digests and HMAC-SHA256 MACs over byte buffers.

Both primitives come from the ``cryptography`` backend. Each call owns its
own hash context and drops it on return.
"""
from typing import Iterable, Union

from cryptography.hazmat.primitives import hashes, hmac

from .buffer import Buffer, BytesLike, as_bytes

SHA256_DIGEST_LENGTH = 32

DigestInput = Union[Buffer, bytes, bytearray, memoryview, str, Iterable[BytesLike]]


def _iter_chunks(buffer: DigestInput) -> Iterable[bytes]:
    if isinstance(buffer, Buffer):
        return buffer.slices()
    if isinstance(buffer, (bytes, bytearray, memoryview, str)):
        return [as_bytes(buffer)]
    return (as_bytes(chunk) for chunk in buffer)


def get_sha256_digest(buffer: DigestInput) -> bytes:
    """
    Compute the SHA-256 digest of a possibly fragmented buffer.

    Chunks are fed to one hash context in order, so the result equals the
    digest of their concatenation regardless of slice boundaries.

    Args:
        buffer: A Buffer, a bytes-like object, or an iterable of chunks

    Returns:
        32-byte digest

    Example:
        >>> to_hex(get_sha256_digest(Buffer("test data")))
        '916f0027a575074ce72a331777c3478d6513f786a591bd892da1a577bf2335f9'
    """
    context = hashes.Hash(hashes.SHA256())
    for chunk in _iter_chunks(buffer):
        context.update(chunk)
    return context.finalize()


def get_sha256_hmac(key: BytesLike, data: BytesLike) -> bytes:
    """
    Compute HMAC-SHA256 of ``data`` under ``key``.

    Empty keys and empty data are both accepted.
    """
    context = hmac.HMAC(as_bytes(key), hashes.SHA256())
    context.update(as_bytes(data))
    return context.finalize()


def to_hex(data: bytes) -> str:
    """Lowercase hex with no separators or prefix."""
    return bytes(data).hex()


def from_hex(text: str) -> bytes:
    """
    Decode a hex string.

    Odd-length or non-hex input decodes to ``b""`` rather than raising, so
    that a garbage fixture simply produces empty key material.
    """
    if len(text) % 2 != 0:
        return b""
    try:
        return bytes.fromhex(text)
    except ValueError:
        return b""
