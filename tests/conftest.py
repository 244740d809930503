"""Pytest fixtures for merkleproof tests."""
import hashlib
import logging

import pytest

from merkleproof.anchor import MerkleTree


def sha(data: bytes) -> bytes:
    """Reference SHA256 used to check trees by hand."""
    return hashlib.sha256(data).digest()


@pytest.fixture
def abcd_tree():
    """Even tree over a, b, c, d."""
    return MerkleTree(["a", "b", "c", "d"])


@pytest.fixture
def abcde_tree():
    """Odd tree over a..e; e is carried over twice."""
    return MerkleTree(["a", "b", "c", "d", "e"])


@pytest.fixture
def single_tree():
    """One-leaf tree over a."""
    return MerkleTree(["a"])


@pytest.fixture
def payloads():
    """Provide 37 distinct byte payloads (odd, so several carries happen)."""
    return [f"payload_{i}".encode() for i in range(37)]


@pytest.fixture(autouse=True)
def reset_merkleproof_logger():
    """Drop handlers the CLI attaches so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("merkleproof")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
