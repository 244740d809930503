"""Benchmark: Merkle tree throughput.

Target SLO: build 1000 leaves in <1000ms; prove + verify in <10ms.
"""
import time

from merkleproof.anchor import MerkleTree, get_proof, verify


def _payloads(n: int) -> list[bytes]:
    return [f"bench-{i}".encode() for i in range(n)]


class TestMerkleAnchorPerformance:
    """Benchmark Merkle tree operations."""

    def test_build_1000_leaves(self, benchmark):
        """Build a 1000-leaf tree."""
        payloads = _payloads(1000)

        tree = benchmark(MerkleTree, payloads)
        assert len(tree.get_root()) == 64

    def test_build_10000_leaves(self, benchmark):
        """Build a 10000-leaf tree - stress test."""
        payloads = _payloads(10000)

        tree = benchmark(MerkleTree, payloads)
        assert tree.leaf_count == 10000

    def test_prove_and_verify_10000(self, benchmark):
        """Prove and verify one leaf of a 10000-leaf tree."""
        payloads = _payloads(10000)
        tree = MerkleTree(payloads)
        root = tree.get_root()
        item = payloads[7777]

        def prove_and_verify():
            return verify(item, get_proof(tree, item), root)

        assert benchmark(prove_and_verify) is True

    def test_linear_scan_lookup_10000(self, benchmark):
        """Proof lookup without the digest index."""
        payloads = _payloads(10000)
        tree = MerkleTree(payloads, index_lookup=False)

        proof = benchmark(get_proof, tree, payloads[-1])
        assert len(proof) == tree.depth


def manual_benchmark():
    """Manual benchmark for verification."""
    sizes = [100, 1000, 10000, 100000]

    print("Merkle Tree Benchmark")
    print("=" * 50)

    for size in sizes:
        payloads = _payloads(size)

        start = time.perf_counter()
        tree = MerkleTree(payloads)
        build_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        ok = verify(payloads[size // 2], get_proof(tree, payloads[size // 2]), tree.root)
        verify_ms = (time.perf_counter() - start) * 1000

        print(f"{size:>7} leaves: build {build_ms:8.2f}ms  prove+verify {verify_ms:6.3f}ms  ok={ok}")


if __name__ == "__main__":
    manual_benchmark()
