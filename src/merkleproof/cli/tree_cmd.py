"""Tree commands: root, show."""
import sys

import click

from merkleproof.anchor import MerkleTree
from merkleproof.config import MerkleConfig
from merkleproof.core.errors import EmptyTreeError

from .output import error_box, print_json


def load_items(items: tuple[str, ...], file) -> list[str]:
    """Inline items followed by the non-empty lines of file."""
    item_list = list(items)
    if file is not None:
        for line in file:
            line = line.rstrip("\r\n")
            if line:
                item_list.append(line)
    return item_list


def build_tree(config: MerkleConfig, item_list: list[str]) -> MerkleTree:
    """Build a tree or exit 2 when there is nothing to build from."""
    try:
        return MerkleTree(item_list, encoding=config.encoding,
                          index_lookup=config.index_lookup)
    except EmptyTreeError as e:
        error_box("Merkle: NO DATA", str(e), "merkleproof root ITEM... or --file items.txt")
        sys.exit(2)


items_argument = click.argument('items', nargs=-1)
file_option = click.option('--file', '-f', type=click.File('r'), help='One item per line')


@click.command()
@items_argument
@file_option
@click.option('--json', 'as_json', is_flag=True, help='Emit root, leaf count and depth as JSON')
@click.pass_obj
def root(config: MerkleConfig, items: tuple, file, as_json: bool):
    """Compute the Merkle root of ITEMS."""
    tree = build_tree(config, load_items(items, file))

    if as_json:
        print_json({
            "root": tree.get_root(),
            "leaves": tree.leaf_count,
            "depth": tree.depth,
        })
    else:
        click.echo(tree.get_root())


@click.command()
@items_argument
@file_option
@click.pass_obj
def show(config: MerkleConfig, items: tuple, file):
    """Print every layer of the tree built from ITEMS, root first."""
    tree = build_tree(config, load_items(items, file))
    for line in tree.render():
        click.echo(line)
