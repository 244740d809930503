"""Anchor subpackage for Merkle trees and inclusion proofs.

Provides tree construction, proof generation and proof verification.
"""
from .hash import Node, digest, hex_digest, to_bytes
from .merkle import MerkleTree, build_next_layer
from .prove import Proof, ProofResult, ProofStep, Side, find_proof, get_proof
from .verify import fold_proof, verify

__all__ = [
    "Node",
    "digest",
    "hex_digest",
    "to_bytes",
    "MerkleTree",
    "build_next_layer",
    "Side",
    "ProofStep",
    "Proof",
    "ProofResult",
    "get_proof",
    "find_proof",
    "fold_proof",
    "verify",
]
