"""Commit id generation for the sandbox.

Commit ids are opaque strings, not content hashes. The repository takes
an id factory (any zero-argument callable returning a str) so tests can
swap in deterministic ids.
"""

import itertools
import random
import string
from typing import Callable, Iterator, Optional

from gitsandbox.core.errors import SandboxError

IdFactory = Callable[[], str]

BASE36_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_ID_LENGTH = 7


def random_id(length: int = DEFAULT_ID_LENGTH, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random base-36 id.

    Args:
        length: Number of characters
        rng: Random source (module-level generator if omitted)

    Returns:
        Lowercase alphanumeric string of the given length
    """
    choice = (rng or random).choice
    return ''.join(choice(BASE36_ALPHABET) for _ in range(length))


def sequential_ids(prefix: str = 'c', width: int = 6) -> IdFactory:
    """
    Build a deterministic id factory: c000001, c000002, ...

    Args:
        prefix: Leading text for every id
        width: Zero-padded width of the counter

    Returns:
        Callable producing the next id on each call
    """
    counter: Iterator[int] = itertools.count(1)

    def next_id() -> str:
        return f"{prefix}{next(counter):0{width}d}"

    return next_id


def draw_unique_id(factory: IdFactory, taken: Callable[[str], bool], attempts: int = 32) -> str:
    """
    Draw ids from a factory until one is not already taken.

    Raises:
        SandboxError: If no free id was produced within `attempts` draws
    """
    for _ in range(attempts):
        candidate = factory()
        if not taken(candidate):
            return candidate
    raise SandboxError(f"Could not generate a unique commit id after {attempts} attempts")
