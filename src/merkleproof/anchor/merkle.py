"""Merkle tree construction.

The tree is a ladder of layers, leaves first. Each layer is built from the
one below by hashing consecutive pairs (left digest first). A trailing node
with no partner is carried up unchanged, without rehashing, and may be
carried again on later layers.

    [  i  ]
    [  h  ]     [e]
    [f]     [g]   [e]
    [a] [b] [c] [d] [e]

A single leaf yields layers [[leaf], [leaf]]: the root is the leaf digest.

For n > 1 leaves the ladder always has ceil(n / 2) + 1 layers. Once the
root is reached, the remaining layers repeat it as a carried-over node, so
proofs end in lonely steps that fold to nothing.

MerkleTree.get_proof delegates to anchor.prove, which imports this module;
the method imports prove at call time.
"""
import logging
from typing import Iterable, Sequence

from ..core.constants import DEFAULT_ENCODING, RENDER_BAR, RENDER_DASH
from ..core.errors import EmptyTreeError
from .hash import Node, Payload, digest, to_bytes

logger = logging.getLogger("merkleproof.anchor")


def build_next_layer(layer: Sequence[Node]) -> list[Node]:
    """Build the layer above `layer` by pairwise hashing.

    Args:
        layer: Ordered nodes of the current layer

    Returns:
        Ordered nodes of the next layer, len == ceil(len(layer) / 2)
    """
    next_layer = []
    for i in range(0, len(layer), 2):
        left = layer[i]
        if i + 1 == len(layer):
            logger.debug("Carrying lonely node %s at index %d", left.hex[:16], i)
            next_layer.append(left)
            continue
        next_layer.append(Node.join(left, layer[i + 1]))
    return next_layer


class MerkleTree:
    """Immutable Merkle tree over an ordered sequence of payloads.

    Args:
        leaves: Ordered payloads (bytes or str) or prebuilt leaf Nodes
        encoding: Encoding used for str payloads
        index_lookup: Build a digest -> first index map for proof lookup

    Raises:
        EmptyTreeError: If leaves is empty
        TypeError: If leaves is a single str or bytes payload
    """

    def __init__(self, leaves: Iterable[Payload | Node],
                 encoding: str = DEFAULT_ENCODING, index_lookup: bool = True):
        if isinstance(leaves, (str, bytes, bytearray, memoryview)):
            raise TypeError("leaves must be a sequence of payloads, not a single payload")
        self.encoding = encoding
        self._leaves = tuple(
            leaf if isinstance(leaf, Node) else Node(to_bytes(leaf, encoding))
            for leaf in leaves
        )
        if not self._leaves:
            raise EmptyTreeError()

        self._layers = self._build_layers(self._leaves)

        self._index: dict[bytes, int] | None = None
        if index_lookup:
            self._index = {}
            for i, leaf in enumerate(self._leaves):
                self._index.setdefault(leaf.digest(), i)

        logger.debug("Built tree: %d leaves, %d layers, root %s",
                     len(self._leaves), len(self._layers), self.get_root())

    @staticmethod
    def _build_layers(leaves: tuple[Node, ...]) -> tuple[tuple[Node, ...], ...]:
        layers = [leaves]
        current = leaves
        # A single leaf still gets a carried-over root layer
        target = max(2, (len(leaves) + 1) // 2 + 1)
        while len(layers) < target:
            current = tuple(build_next_layer(current))
            layers.append(current)
        return tuple(layers)

    @property
    def leaves(self) -> tuple[Node, ...]:
        return self._leaves

    @property
    def layers(self) -> tuple[tuple[Node, ...], ...]:
        return self._layers

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def depth(self) -> int:
        """Number of non-root layers, equal to the length of every proof."""
        return len(self._layers) - 1

    @property
    def root(self) -> bytes:
        """Raw 32-byte root digest."""
        return self._layers[-1][0].digest()

    def get_root(self) -> str:
        """Root digest as 64 lowercase hex chars."""
        return self.root.hex()

    def index_of(self, payload: Payload) -> int:
        """Lowest leaf index whose digest equals digest(payload), or -1."""
        target = digest(payload, self.encoding)
        if self._index is not None:
            return self._index.get(target, -1)

        for i, leaf in enumerate(self._leaves):
            if leaf.digest() == target:
                return i
        return -1

    def get_proof(self, payload: Payload):
        """Inclusion proof for payload. See anchor.prove.get_proof."""
        from .prove import get_proof
        return get_proof(self, payload)

    def render(self) -> list[str]:
        """Layers top-down, one hex digest per line, dashes growing with depth."""
        lines = []
        total = len(self._layers)
        for level in range(total - 1, -1, -1):
            prefix = RENDER_BAR + RENDER_DASH * (total - level)
            for node in self._layers[level]:
                lines.append(f"{prefix} {node.hex}")
        return lines

    def __len__(self) -> int:
        return len(self._leaves)

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self._leaves)}, root={self.get_root()})"
