"""randid constants and configuration defaults."""

import string

# BASE62 alphabet: digits, then lowercase, then uppercase
BASE62: str = string.digits + string.ascii_lowercase + string.ascii_uppercase

# Numeral alphabet, every digit reachable at every position
DIGITS: str = string.digits

# Environment variables read by GeneratorConfig.from_env()
ENV_CONFIG_PATH = "RANDID_CONFIG"
ENV_SECURE = "RANDID_SECURE"
ENV_SEED = "RANDID_SEED"
ENV_MAX_LENGTH = "RANDID_MAX_LENGTH"

# Default separator between a prefix and its random part
DEFAULT_SEPARATOR = "_"

# Characters allowed in a separator: unreserved URL characters (RFC 3986)
SEPARATOR_CHARS: str = BASE62 + "-_.~"
