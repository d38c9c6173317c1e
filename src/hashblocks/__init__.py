"""Visual block fingerprints for file digests."""

from .catalog import ALIASES, DEFAULT_ALGORITHM, Algorithm, algorithm_names, resolve_algorithm
from .errors import HashblocksError, SourceUnreadable, UnsupportedAlgorithm
from .render.fingerprint import Fingerprint, render
from .utils.hash import compute_digest, hash_file

__version__ = "0.3.0"

__all__ = [
    "ALIASES",
    "Algorithm",
    "DEFAULT_ALGORITHM",
    "Fingerprint",
    "HashblocksError",
    "SourceUnreadable",
    "UnsupportedAlgorithm",
    "__version__",
    "algorithm_names",
    "compute_digest",
    "hash_file",
    "render",
    "resolve_algorithm",
]
