"""
randid: minimal web-safe random identifiers.

Generates fixed-length BASE62 strings and fixed-length numeral strings.
The generated IDs are not guaranteed to be unique.
"""

from .config import GeneratorConfig, load_config
from .constants import BASE62, DIGITS
from .exceptions import (
    ConfigError,
    InvalidLengthError,
    InvalidPrefixError,
    RandidError,
)
from .id_generator import (
    IdGenerator,
    get_default_generator,
    prefixed_id,
    random_numeral_string,
    random_string,
    reset_default_generator,
    set_default_generator,
)

__version__ = '1.0.0'

__all__ = [
    'BASE62',
    'DIGITS',
    'ConfigError',
    'GeneratorConfig',
    'IdGenerator',
    'InvalidLengthError',
    'InvalidPrefixError',
    'RandidError',
    'get_default_generator',
    'load_config',
    'prefixed_id',
    'random_numeral_string',
    'random_string',
    'reset_default_generator',
    'set_default_generator',
]
