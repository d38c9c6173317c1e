"""Streaming digest computation with a consistent BLAKE3 default."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Optional, Union

from ..catalog import Algorithm, resolve_algorithm
from ..errors import SourceUnreadable

DEFAULT_CHUNK_SIZE = 1024

ChunkObserver = Callable[[int], None]


def _source_name(handle: BinaryIO) -> Union[str, Path, None]:
    name = getattr(handle, "name", None)
    return name if isinstance(name, (str, Path)) else None


def _iter_chunks(handle: BinaryIO, chunk_size: int) -> Iterable[bytes]:
    while True:
        try:
            chunk = handle.read(chunk_size)
        except OSError as exc:
            raise SourceUnreadable(_source_name(handle), exc.strerror or str(exc)) from exc
        if not chunk:
            break
        yield chunk


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")


def compute_digest(
    algorithm: Algorithm,
    source: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    observer: Optional[ChunkObserver] = None,
) -> bytes:
    """Return the digest of everything readable from ``source``.

    ``source`` is consumed in ``chunk_size`` reads until a zero-length read,
    so memory use stays bounded by the chunk size.  ``observer`` is called
    with the length of each chunk once it has been hashed.
    """

    _check_chunk_size(chunk_size)
    hasher = algorithm.new()
    for chunk in _iter_chunks(source, chunk_size):
        hasher.update(chunk)
        if observer is not None:
            observer(len(chunk))
    return hasher.digest()


def hash_file(
    path: Union[str, Path],
    *,
    algorithm: Union[str, Algorithm, None] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    observer: Optional[ChunkObserver] = None,
) -> bytes:
    """Return the digest of ``path`` using ``algorithm``.

    The default algorithm is **BLAKE3**.  ``algorithm`` may be an
    :class:`~hashblocks.catalog.Algorithm` or any name or alias accepted by
    :func:`~hashblocks.catalog.resolve_algorithm`; it is resolved before the
    file is opened.
    """

    algo = resolve_algorithm(algorithm)
    _check_chunk_size(chunk_size)

    file_path = Path(path)
    try:
        handle = file_path.open("rb")
    except OSError as exc:
        raise SourceUnreadable(file_path, exc.strerror or str(exc)) from exc

    with handle:
        return compute_digest(algo, handle, chunk_size=chunk_size, observer=observer)


__all__ = ["DEFAULT_CHUNK_SIZE", "ChunkObserver", "compute_digest", "hash_file"]
