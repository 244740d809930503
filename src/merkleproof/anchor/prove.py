"""Proof path generation for Merkle tree inclusion.

A proof is one step per non-root layer, bottom-up. Each step names the
sibling digest and the side it sits on relative to the node being folded.
A step with no sibling marks a lonely node carried over unchanged.

Wire form:
    [{"side": "LEFT" | "RIGHT", "sibling": "<64 hex>" | null}, ...]
"""
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from ..core.constants import DIGEST_SIZE, HEX_DIGEST_SIZE, SIDE_LEFT, SIDE_RIGHT
from ..core.errors import MerkleError, NotFoundError, ProofFormatError
from .hash import Payload, hex_digest, to_bytes
from .merkle import MerkleTree

logger = logging.getLogger("merkleproof.anchor")


class Side(Enum):
    """Side the sibling occupies relative to the folded node."""
    LEFT = SIDE_LEFT
    RIGHT = SIDE_RIGHT


@dataclass(frozen=True)
class ProofStep:
    """One fold step. side accepts a Side or its wire label ("LEFT"/"RIGHT")."""
    side: Side
    sibling: bytes | None = None

    def __post_init__(self):
        object.__setattr__(self, "side", Side(self.side))

    @property
    def is_lonely(self) -> bool:
        return self.sibling is None

    def to_dict(self) -> dict:
        return {
            "side": self.side.value,
            "sibling": None if self.sibling is None else self.sibling.hex(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ProofStep":
        """Decode one wire step.

        Raises:
            ProofFormatError: Unknown side, bad sibling, or LEFT without sibling
        """
        if not isinstance(data, dict):
            raise ProofFormatError(f"Proof step must be an object, got {type(data).__name__}")
        try:
            side = Side(data.get("side"))
        except ValueError:
            raise ProofFormatError(f"Unknown proof side: {data.get('side')!r}") from None

        raw = data.get("sibling")
        if raw is None:
            if side is Side.LEFT:
                raise ProofFormatError("LEFT proof step requires a sibling")
            return cls(side=side)

        if not isinstance(raw, str):
            raise ProofFormatError(f"Sibling must be a hex string, got {type(raw).__name__}")
        if len(raw) != HEX_DIGEST_SIZE:
            raise ProofFormatError(f"Sibling must be {HEX_DIGEST_SIZE} hex chars, got {len(raw)}")
        try:
            sibling = bytes.fromhex(raw)
        except ValueError:
            raise ProofFormatError(f"Sibling is not valid hex: {raw!r}") from None
        if len(sibling) != DIGEST_SIZE:
            raise ProofFormatError(f"Sibling must be {DIGEST_SIZE} bytes, got {len(sibling)}")
        return cls(side=side, sibling=sibling)


@dataclass(frozen=True)
class Proof:
    """Ordered, bottom-up inclusion proof. Self-contained and tree-independent."""
    steps: tuple[ProofStep, ...] = ()

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> ProofStep:
        return self.steps[index]

    def to_list(self) -> list[dict]:
        return [step.to_dict() for step in self.steps]

    def to_json(self) -> str:
        return json.dumps(self.to_list())

    @classmethod
    def from_list(cls, data: Any) -> "Proof":
        if not isinstance(data, list):
            raise ProofFormatError(f"Proof must be a list, got {type(data).__name__}")
        return cls(tuple(ProofStep.from_dict(step) for step in data))

    @classmethod
    def from_json(cls, text: str) -> "Proof":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProofFormatError(f"Proof is not valid JSON: {e}") from e
        return cls.from_list(data)


@dataclass(frozen=True)
class ProofResult:
    """Tagged outcome of a proof lookup: exactly one of proof or error is set."""
    proof: Proof | None = None
    error: MerkleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_proof(tree: MerkleTree, payload: Payload) -> Proof:
    """Generate the inclusion proof for payload.

    Lookup is by digest equality; with duplicate payloads the lowest
    index wins.

    Args:
        tree: Built MerkleTree
        payload: Original leaf payload

    Returns:
        Proof with one step per non-root layer

    Raises:
        NotFoundError: If no leaf digest matches digest(payload)
    """
    index = tree.index_of(payload)
    if index == -1:
        data = to_bytes(payload, tree.encoding)
        error = NotFoundError(data, hex_digest(data))
        logger.debug("Proof lookup failed: %s", error)
        raise error

    steps = []
    for layer in tree.layers[:-1]:
        if index % 2 == 0:
            # We're on the left, sibling sits to the right (may be absent)
            sibling_index = index + 1
            side = Side.RIGHT
        else:
            sibling_index = index - 1
            side = Side.LEFT

        sibling = layer[sibling_index].digest() if sibling_index < len(layer) else None
        steps.append(ProofStep(side=side, sibling=sibling))

        index //= 2

    return Proof(tuple(steps))


def find_proof(tree: MerkleTree, payload: Payload) -> ProofResult:
    """Like get_proof, but returns a ProofResult instead of raising NotFoundError."""
    try:
        return ProofResult(proof=get_proof(tree, payload))
    except NotFoundError as e:
        return ProofResult(error=e)

