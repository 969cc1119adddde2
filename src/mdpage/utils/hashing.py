"""Content fingerprinting for written pages.

Example:
    >>> from mdpage.utils.hashing import hash_bytes
    >>> hash_bytes(b"hello", truncate=16)
    '2cf24dba5fb0a30e'
"""

import hashlib


def hash_bytes(
    content: bytes,
    truncate: int | None = None,
    algorithm: str = "sha256",
) -> str:
    """Hash bytes content using specified algorithm.

    Args:
        content: Bytes content to hash
        truncate: Truncate result to N characters (None = full hash)
        algorithm: Hash algorithm ('sha256', 'md5')

    Returns:
        Hex digest of hash, optionally truncated
    """
    hasher = hashlib.new(algorithm)
    hasher.update(content)
    digest = hasher.hexdigest()
    return digest[:truncate] if truncate is not None else digest
