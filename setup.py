"""merkleproof setup - Merkle trees with inclusion proofs."""
from setuptools import setup, find_packages

setup(
    name="merkleproof",
    version="1.0.0",
    description="merkleproof: Merkle tree construction, inclusion proofs and verification",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-benchmark>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "merkleproof=merkleproof.cli.main:cli",
        ],
    },
)
