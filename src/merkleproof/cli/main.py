"""merkleproof CLI entry point - assembles all commands."""
import sys

import click

from merkleproof.config import MerkleConfig

from . import __version__
from .proof_cmd import prove, verify
from .tree_cmd import root, show


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Debug logging to stderr')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """merkleproof: Merkle roots and inclusion proofs."""
    config = MerkleConfig.from_env()
    errors = config.validate()
    if errors:
        for error in errors:
            click.echo(click.style(f"Config error: {error}", fg="red"), err=True)
        sys.exit(2)

    config.configure_logging(verbose)
    ctx.obj = config


cli.add_command(root)
cli.add_command(show)
cli.add_command(prove)
cli.add_command(verify)


if __name__ == "__main__":
    cli()
