"""Proof commands: prove, verify."""
import json
import sys

import click

from merkleproof.anchor import Proof, get_proof
from merkleproof.anchor import verify as verify_proof
from merkleproof.config import MerkleConfig
from merkleproof.core.errors import NotFoundError, ProofFormatError

from .output import error_box, print_json, success_box
from .tree_cmd import build_tree, file_option, items_argument, load_items


@click.command()
@click.argument('item')
@items_argument
@file_option
@click.option('--out', '-o', type=click.File('w'), help='Also write the proof JSON here')
@click.pass_obj
def prove(config: MerkleConfig, item: str, items: tuple, file, out):
    """Generate the inclusion proof of ITEM in the tree built from ITEMS."""
    tree = build_tree(config, load_items(items, file))

    try:
        proof = get_proof(tree, item)
    except NotFoundError as e:
        error_box("Prove: NOT FOUND", str(e), "merkleproof show ITEMS...")
        sys.exit(2)

    document = {
        "item": item,
        "root": tree.get_root(),
        "proof": proof.to_list(),
    }
    if out is not None:
        json.dump(document, out, indent=2, sort_keys=True)
    print_json(document)


def _read_proof(file) -> Proof:
    """Accept either a bare step list or the document written by prove."""
    try:
        data = json.load(file)
    except json.JSONDecodeError as e:
        raise ProofFormatError(f"Proof is not valid JSON: {e}") from e
    if isinstance(data, dict) and "proof" in data:
        data = data["proof"]
    return Proof.from_list(data)


@click.command()
@click.argument('item')
@click.option('--root', 'root_hex', required=True, help='Expected Merkle root (hex)')
@click.option('--proof', 'proof_file', required=True, type=click.File('r'),
              help="Proof JSON file, '-' for stdin")
@click.pass_obj
def verify(config: MerkleConfig, item: str, root_hex: str, proof_file):
    """Verify ITEM against ROOT using a proof produced by prove."""
    try:
        proof = _read_proof(proof_file)
    except ProofFormatError as e:
        error_box("Verify: BAD PROOF", str(e), "merkleproof prove ITEM ITEMS... --out proof.json")
        sys.exit(2)

    if verify_proof(item, proof, root_hex, encoding=config.encoding):
        success_box("Verify: VALID", [
            ("Item", item),
            ("Root", root_hex),
            ("Proof depth", str(len(proof))),
        ])
        sys.exit(0)

    error_box("Verify: INVALID", "Proof path does not lead to root")
    sys.exit(1)
