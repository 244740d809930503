"""Proof verification.

Independent of any MerkleTree: only (payload, proof, root) is needed.

    [  x  ]
    [  x  ]     [e]
    [f]     [x]   [ ]
    [ ] [ ] [c] [d] [ ]

To show [c] is included, the proof carries d, f and e; every [x] is
recomputed from them.
"""
import hashlib
import logging

from ..core.constants import DEFAULT_ENCODING, DIGEST_SIZE, HASH_NAME, HEX_DIGEST_SIZE
from ..core.errors import MerkleError, ProofFormatError
from .hash import Payload, digest
from .prove import Proof, Side

logger = logging.getLogger("merkleproof.anchor")


def fold_proof(payload: Payload, proof: Proof | list[dict],
               encoding: str = DEFAULT_ENCODING) -> bytes:
    """Recompute the root implied by payload and proof.

    Returns:
        Raw 32-byte root digest

    Raises:
        ProofFormatError: If the proof is malformed
    """
    if not isinstance(proof, Proof):
        proof = Proof.from_list(proof)

    current = digest(payload, encoding)
    for step in proof:
        if step.side is Side.LEFT:
            if step.sibling is None:
                raise ProofFormatError("LEFT proof step requires a sibling")
            current = hashlib.new(HASH_NAME, step.sibling + current).digest()
        elif step.sibling is None:
            # Lonely node carried over, nothing to hash
            continue
        else:
            current = hashlib.new(HASH_NAME, current + step.sibling).digest()
    return current


def _root_bytes(root: str | bytes) -> bytes | None:
    if isinstance(root, str):
        if len(root) != HEX_DIGEST_SIZE:
            return None
        try:
            root = bytes.fromhex(root)
        except ValueError:
            return None
    if isinstance(root, (bytes, bytearray, memoryview)) and len(root) == DIGEST_SIZE:
        return bytes(root)
    return None


def verify(payload: Payload, proof: Proof | list[dict], root: str | bytes,
           encoding: str = DEFAULT_ENCODING) -> bool:
    """Verify that payload is included under root.

    Never raises: a malformed proof, bad root, or tampered payload
    yields False.

    Args:
        payload: Leaf payload (bytes or str)
        proof: Proof or its wire form (list of step dicts)
        root: Expected root as 64 hex chars or 32 raw bytes

    Returns:
        True if folding the proof reproduces root
    """
    expected = _root_bytes(root)
    if expected is None:
        return False

    try:
        computed = fold_proof(payload, proof, encoding)
    except (MerkleError, AttributeError, TypeError, ValueError) as e:
        logger.debug("Rejecting malformed proof: %s", e)
        return False

    return computed == expected
