"""Shared helpers for hashblocks."""

from .hash import DEFAULT_CHUNK_SIZE, compute_digest, hash_file

__all__ = ["DEFAULT_CHUNK_SIZE", "compute_digest", "hash_file"]
