"""
Entry point for running merkleproof as a module.

Usage:
    python -m merkleproof [command] [options]

Example:
    python -m merkleproof root a b c d
    python -m merkleproof prove c a b c d --out proof.json
    python -m merkleproof verify c --root <hex> --proof proof.json
"""

from merkleproof.cli.main import cli

if __name__ == "__main__":
    cli()
