from __future__ import annotations

import pytest

from hashblocks.catalog import (
    ALIASES,
    DEFAULT_ALGORITHM,
    Algorithm,
    algorithm_names,
    aliases_for,
    resolve_algorithm,
)
from hashblocks.errors import UnsupportedAlgorithm

EXPECTED_SIZES = {
    "md4": 16,
    "md5": 16,
    "blake2s256": 32,
    "blake2b512": 64,
    "blake3": 32,
    "ripemd160": 20,
    "sha1": 20,
    "sha224": 28,
    "sha256": 32,
    "sha384": 48,
    "sha512": 64,
    "sha512_224": 28,
    "sha512_256": 32,
    "sha3_224": 28,
    "sha3_256": 32,
    "sha3_384": 48,
    "sha3_512": 64,
    "keccak224": 28,
    "keccak256": 32,
    "keccak384": 48,
    "keccak512": 64,
}


def test_catalog_declares_expected_members_and_sizes() -> None:
    assert {algo.canonical: algo.digest_size for algo in Algorithm} == EXPECTED_SIZES


@pytest.mark.parametrize("algo", list(Algorithm), ids=lambda a: a.canonical)
def test_canonical_names_round_trip(algo: Algorithm) -> None:
    assert resolve_algorithm(algo.canonical) is algo
    assert str(algo) == algo.canonical


def test_aliases_resolve_to_their_targets() -> None:
    assert resolve_algorithm("sha2") is resolve_algorithm("sha256")
    assert resolve_algorithm("sha3") is resolve_algorithm("sha3_256")
    assert aliases_for(Algorithm.SHA256) == ["sha2"]
    assert aliases_for(Algorithm.MD5) == []


def test_default_is_blake3() -> None:
    assert DEFAULT_ALGORITHM is Algorithm.BLAKE3
    assert resolve_algorithm(None) is Algorithm.BLAKE3


def test_resolution_accepts_members() -> None:
    assert resolve_algorithm(Algorithm.KECCAK256) is Algorithm.KECCAK256


@pytest.mark.parametrize("name", ["notahash", "SHA256", "Sha512_224", "", "sha-256"])
def test_unknown_names_are_rejected(name: str) -> None:
    with pytest.raises(UnsupportedAlgorithm) as excinfo:
        resolve_algorithm(name)
    assert excinfo.value.name == name
    assert "sha256" in excinfo.value.choices
    assert isinstance(excinfo.value, ValueError)


def test_algorithm_names_lists_aliases_last() -> None:
    names = algorithm_names()
    canonical = algorithm_names(include_aliases=False)
    assert names[: len(canonical)] == canonical
    assert names[len(canonical):] == list(ALIASES)
    assert len(set(names)) == len(names)


def test_each_member_builds_a_fresh_hasher() -> None:
    for algo in Algorithm:
        first = algo.new()
        second = algo.new()
        assert first is not second
        first.update(b"x")
        assert first.digest() != second.digest()
