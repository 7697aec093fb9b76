"""
ID generation utilities for randid.

Provides fixed-length BASE62 strings and fixed-length numeral strings for
web identifiers. Generated IDs are random, not guaranteed unique.
"""

import random
import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Optional

from .config import GeneratorConfig
from .constants import BASE62, DEFAULT_SEPARATOR, DIGITS, SEPARATOR_CHARS
from .exceptions import InvalidLengthError, InvalidPrefixError
from .logging import generator_logger


class IdGenerator:
    """
    Random identifier generator over an injected random source.

    The source is anything with a random.Random compatible choice(). The
    default is random.SystemRandom, which reads os.urandom and needs no
    locking. Any other source is guarded by a lock owned by this generator.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_length: Optional[int] = None,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source (default random.SystemRandom())
            max_length: Optional upper bound on requested lengths
        """
        if max_length is not None and (
            isinstance(max_length, bool)
            or not isinstance(max_length, int)
            or max_length < 0
        ):
            raise InvalidLengthError(
                f"max_length must be a non-negative integer, got {max_length!r}"
            )

        self._rng = rng if rng is not None else random.SystemRandom()
        self.max_length = max_length
        self._lock: ContextManager[Any]
        if isinstance(self._rng, random.SystemRandom):
            self._lock = nullcontext()
        else:
            self._lock = threading.Lock()

        generator_logger().debug(
            "Generator created",
            rng=type(self._rng).__name__,
            max_length=max_length,
        )

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "IdGenerator":
        """Create a generator from a GeneratorConfig."""
        return cls(rng=config.create_rng(), max_length=config.max_length)

    @property
    def rng(self) -> random.Random:
        """The random source draws are taken from."""
        return self._rng

    def random_string(self, length: int) -> str:
        """
        Generate a random BASE62 string of exactly ``length`` characters.

        Args:
            length: Number of characters (0 returns "")

        Returns:
            A random BASE62 string
            Example: "bWk9D"
        """
        return self._draw(BASE62, length)

    def random_numeral_string(self, length: int) -> str:
        """
        Generate a random digit string of exactly ``length`` characters.

        Each position is an independent digit, so leading zeros occur.
        For a length of 4 the result is anything from "0000" to "9999".

        Args:
            length: Number of digits (0 returns "")

        Returns:
            A random numeral string
            Example: "00396"
        """
        return self._draw(DIGITS, length)

    def prefixed(
        self,
        prefix: str,
        length: int,
        separator: str = DEFAULT_SEPARATOR,
    ) -> str:
        """
        Generate a prefixed BASE62 ID.

        Args:
            prefix: Non-empty BASE62 prefix, e.g. "pub"
            length: Length of the random portion
            separator: Placed between prefix and random part (default "_").
                May be empty; otherwise limited to BASE62 and "-_.~"

        Returns:
            An ID in format: {prefix}{separator}{random_base62}
            Example: "pub_a7b3X9k2"
        """
        if not isinstance(prefix, str) or not prefix or any(c not in BASE62 for c in prefix):
            generator_logger().warning("Rejected prefix", prefix=repr(prefix)[:64])
            raise InvalidPrefixError(
                f"prefix must be a non-empty BASE62 string, got {prefix!r}"
            )
        if not isinstance(separator, str) or any(c not in SEPARATOR_CHARS for c in separator):
            generator_logger().warning(
                "Rejected separator", separator=repr(separator)[:64]
            )
            raise InvalidPrefixError(
                f"separator must use only BASE62 or \"-_.~\" characters, got {separator!r}"
            )
        return f"{prefix}{separator}{self.random_string(length)}"

    def _draw(self, alphabet: str, length: int) -> str:
        self._check_length(length)
        choice = self._rng.choice
        with self._lock:
            return "".join(choice(alphabet) for _ in range(length))

    def _check_length(self, length: Any) -> None:
        if isinstance(length, bool) or not isinstance(length, int):
            generator_logger().warning("Rejected length", length=repr(length)[:64], reason="not_int")
            raise InvalidLengthError(f"length must be an integer, got {length!r}")
        if length < 0:
            generator_logger().warning("Rejected length", length=length, reason="negative")
            raise InvalidLengthError(f"length must be non-negative, got {length}")
        if self.max_length is not None and length > self.max_length:
            generator_logger().warning(
                "Rejected length",
                length=length,
                max_length=self.max_length,
                reason="too_long",
            )
            raise InvalidLengthError(
                f"length {length} exceeds max_length {self.max_length}"
            )


# Global instance for easy access
_default_generator: IdGenerator | None = None
_default_lock = threading.Lock()


def get_default_generator() -> IdGenerator:
    """Get the process-wide generator, building it from the environment on first use."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = IdGenerator.from_config(GeneratorConfig.from_env())
        return _default_generator


def set_default_generator(generator: IdGenerator) -> None:
    """Replace the process-wide generator."""
    global _default_generator
    with _default_lock:
        _default_generator = generator


def reset_default_generator() -> None:
    """Discard the process-wide generator so the next call rebuilds it."""
    global _default_generator
    with _default_lock:
        _default_generator = None


def random_string(length: int) -> str:
    """
    Generate a random BASE62 string of exactly ``length`` characters.

    Args:
        length: Number of characters

    Returns:
        A random string over 0-9, a-z, A-Z
        Example: "bWk9D"
    """
    return get_default_generator().random_string(length)


def random_numeral_string(length: int) -> str:
    """
    Generate a random digit string of exactly ``length`` characters.

    Args:
        length: Number of digits

    Returns:
        A random numeral string with possible leading zeros
        Example: "00396"
    """
    return get_default_generator().random_numeral_string(length)


def prefixed_id(prefix: str, length: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """Generate ``{prefix}{separator}{random_base62}`` with the default generator."""
    return get_default_generator().prefixed(prefix, length, separator)
