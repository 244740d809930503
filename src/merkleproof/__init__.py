"""
merkleproof - Merkle trees with compact inclusion proofs.

Build a tree once from ordered payloads, hand out proofs, and let anyone
check a payload against the root with nothing but (payload, proof, root).

Public API:
- Tree: MerkleTree, build_next_layer, Node, digest
- Proof: get_proof, find_proof, Proof, ProofStep, Side
- Verify: verify, fold_proof
- Errors: MerkleError, EmptyTreeError, NotFoundError, ProofFormatError
"""

__version__ = "1.0.0"

from merkleproof.anchor import (
    MerkleTree,
    Node,
    Proof,
    ProofResult,
    ProofStep,
    Side,
    build_next_layer,
    digest,
    find_proof,
    fold_proof,
    get_proof,
    hex_digest,
    verify,
)
from merkleproof.config import DEFAULT_CONFIG, MerkleConfig
from merkleproof.core.errors import EmptyTreeError, MerkleError, NotFoundError, ProofFormatError

__all__ = [
    # Tree
    "MerkleTree",
    "build_next_layer",
    "Node",
    "digest",
    "hex_digest",
    # Proof
    "get_proof",
    "find_proof",
    "Proof",
    "ProofResult",
    "ProofStep",
    "Side",
    # Verify
    "verify",
    "fold_proof",
    # Config
    "MerkleConfig",
    "DEFAULT_CONFIG",
    # Errors
    "MerkleError",
    "EmptyTreeError",
    "NotFoundError",
    "ProofFormatError",
    "__version__",
]
