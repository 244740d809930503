"""Error types raised by merkleproof.

Verification never raises; everything here comes from tree construction,
proof lookup, or decoding a proof from its wire form.
"""


class MerkleError(Exception):
    """Base class for all merkleproof errors."""
    pass


class EmptyTreeError(MerkleError, ValueError):
    """Raised when a tree is built from an empty leaf sequence."""

    def __init__(self, message: str = "Cannot build a Merkle tree from zero leaves"):
        super().__init__(message)


class NotFoundError(MerkleError, LookupError):
    """Raised when no leaf digest matches the requested payload."""

    def __init__(self, payload: bytes, digest_hex: str):
        self.payload = payload
        self.digest_hex = digest_hex
        super().__init__(f"Element not found: {payload!r} (digest {digest_hex})")


class ProofFormatError(MerkleError, ValueError):
    """Raised when a proof cannot be decoded from its wire form."""
    pass
