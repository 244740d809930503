"""merkleproof command line interface."""
from merkleproof import __version__

__all__ = ["__version__"]
