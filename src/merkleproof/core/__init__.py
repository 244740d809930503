"""Core subpackage for merkleproof constants and error types."""
from .errors import EmptyTreeError, MerkleError, NotFoundError, ProofFormatError

__all__ = [
    "MerkleError",
    "EmptyTreeError",
    "NotFoundError",
    "ProofFormatError",
]
