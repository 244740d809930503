"""Digest primitives for Merkle tree nodes.

Functions:
    digest: SHA256 of a byte payload (32 bytes)
    hex_digest: Same digest as a 64-char lowercase hex string
    to_bytes: Coerce str/bytes-like payloads to bytes
    Node: Immutable payload wrapper with its digest computed once
"""
import hashlib
from dataclasses import dataclass, field

from ..core.constants import DEFAULT_ENCODING, HASH_NAME

Payload = bytes | bytearray | memoryview | str


def to_bytes(payload: Payload, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Coerce a payload to bytes.

    Strings are encoded with `encoding`; bytes-like objects are copied.

    Raises:
        TypeError: If payload is not str or bytes-like
    """
    if isinstance(payload, str):
        return payload.encode(encoding)
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise TypeError(f"Payload must be bytes or str, not {type(payload).__name__}")


def digest(payload: Payload, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Compute the 32-byte SHA256 digest of a payload.

    Pure function with no side effects. Empty payloads are valid.
    """
    return hashlib.new(HASH_NAME, to_bytes(payload, encoding)).digest()


def hex_digest(payload: Payload, encoding: str = DEFAULT_ENCODING) -> str:
    """Compute the SHA256 digest of a payload as lowercase hex."""
    return digest(payload, encoding).hex()


@dataclass(frozen=True)
class Node:
    """A byte payload and its digest.

    Leaves wrap caller data; interior nodes wrap the concatenation
    left.digest() || right.digest().
    """
    payload: bytes
    _digest: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        payload = to_bytes(self.payload)
        object.__setattr__(self, "payload", payload)
        object.__setattr__(self, "_digest", digest(payload))

    @classmethod
    def join(cls, left: "Node", right: "Node") -> "Node":
        """Parent node of two siblings, left digest first."""
        return cls(left.digest() + right.digest())

    def digest(self) -> bytes:
        return self._digest

    @property
    def hex(self) -> str:
        return self._digest.hex()
