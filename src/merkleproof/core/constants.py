"""merkleproof constants.

All magic numbers live here. No exceptions.
"""

# Digest
HASH_NAME = "sha256"
DIGEST_SIZE = 32              # bytes
HEX_DIGEST_SIZE = DIGEST_SIZE * 2

# Proof step sides (wire labels)
SIDE_LEFT = "LEFT"
SIDE_RIGHT = "RIGHT"

# Payload coercion
DEFAULT_ENCODING = "utf-8"

# Configuration
ENV_PREFIX = "MERKLEPROOF_"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Rendering
RENDER_BAR = "|"
RENDER_DASH = "-"
