"""Catalog of supported hash algorithms.

Every algorithm is a member of the closed :class:`Algorithm` enumeration.
Members know their canonical name, their fixed output size and how to build
a fresh hasher exposing ``update(bytes)`` and ``digest() -> bytes``.  Name
strings are only matched here, in :func:`resolve_algorithm`; everything
downstream dispatches on the enum member.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any, Callable, Dict, List, Union

import blake3
from Crypto.Hash import MD4, RIPEMD160, SHA512, keccak

from .errors import UnsupportedAlgorithm


def _keccak(bits: int) -> Callable[[], Any]:
    return lambda: keccak.new(digest_bits=bits)


def _sha512_truncated(bits: str) -> Callable[[], Any]:
    return lambda: SHA512.new(truncate=bits)


class Algorithm(Enum):
    """Supported hash algorithms.

    Values are ``(canonical name, digest size in bytes, factory, description)``.
    """

    MD4 = ("md4", 16, MD4.new, "Designed for 32-bit machines - fast but insecure due to many collisions")
    MD5 = ("md5", 16, hashlib.md5, "Designed for 32-bit machines - no longer considered cryptographically secure")
    BLAKE2S256 = ("blake2s256", 32, hashlib.blake2s, "BLAKE2s with a 256 bit digest")
    BLAKE2B512 = ("blake2b512", 64, hashlib.blake2b, "Very fast and secure")
    BLAKE3 = ("blake3", 32, blake3.blake3, "Very fast and secure")
    RIPEMD160 = ("ripemd160", 20, RIPEMD160.new, "160 bit RACE integrity primitive")
    SHA1 = ("sha1", 20, hashlib.sha1, "No longer considered cryptographically secure")
    SHA224 = ("sha224", 28, hashlib.sha224, "SHA-2 with a 224 bit digest")
    SHA256 = ("sha256", 32, hashlib.sha256, "Not that fast, but secure")
    SHA384 = ("sha384", 48, hashlib.sha384, "SHA-2 with a 384 bit digest")
    SHA512 = ("sha512", 64, hashlib.sha512, "SHA-2 with a 512 bit digest")
    SHA512_224 = ("sha512_224", 28, _sha512_truncated("224"), "SHA-512 truncated to 224 bits")
    SHA512_256 = ("sha512_256", 32, _sha512_truncated("256"), "SHA-512 truncated to 256 bits")
    SHA3_224 = ("sha3_224", 28, hashlib.sha3_224, "SHA-3 with a 224 bit digest")
    SHA3_256 = ("sha3_256", 32, hashlib.sha3_256, "SHA-3 with a 256 bit digest")
    SHA3_384 = ("sha3_384", 48, hashlib.sha3_384, "SHA-3 with a 384 bit digest")
    SHA3_512 = ("sha3_512", 64, hashlib.sha3_512, "SHA-3 with a 512 bit digest")
    KECCAK224 = ("keccak224", 28, _keccak(224), "Original Keccak padding, 224 bit digest")
    KECCAK256 = ("keccak256", 32, _keccak(256), "Original Keccak padding, 256 bit digest")
    KECCAK384 = ("keccak384", 48, _keccak(384), "Original Keccak padding, 384 bit digest")
    KECCAK512 = ("keccak512", 64, _keccak(512), "Original Keccak padding, 512 bit digest")

    def __init__(self, canonical: str, digest_size: int, factory: Callable[[], Any], description: str):
        self.canonical = canonical
        self.digest_size = digest_size
        self._factory = factory
        self.description = description

    def new(self) -> Any:
        """Return a fresh hasher for this algorithm."""

        return self._factory()

    def __str__(self) -> str:
        return self.canonical


DEFAULT_ALGORITHM = Algorithm.BLAKE3

ALIASES: Dict[str, Algorithm] = {
    "sha2": Algorithm.SHA256,
    "sha3": Algorithm.SHA3_256,
}

_BY_NAME: Dict[str, Algorithm] = {algo.canonical: algo for algo in Algorithm}


def algorithm_names(include_aliases: bool = True) -> List[str]:
    names = [algo.canonical for algo in Algorithm]
    if include_aliases:
        names.extend(ALIASES)
    return names


def aliases_for(algorithm: Algorithm) -> List[str]:
    return [alias for alias, target in ALIASES.items() if target is algorithm]


def resolve_algorithm(name: Union[str, Algorithm, None]) -> Algorithm:
    """Resolve ``name`` (canonical or alias) to an :class:`Algorithm`.

    ``None`` selects :data:`DEFAULT_ALGORITHM`.  Matching is case-sensitive.
    """

    if name is None:
        return DEFAULT_ALGORITHM
    if isinstance(name, Algorithm):
        return name
    algo = _BY_NAME.get(name) or ALIASES.get(name)
    if algo is None:
        raise UnsupportedAlgorithm(name, algorithm_names())
    return algo


__all__ = [
    "ALIASES",
    "Algorithm",
    "DEFAULT_ALGORITHM",
    "algorithm_names",
    "aliases_for",
    "resolve_algorithm",
]
