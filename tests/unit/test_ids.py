"""Tests for commit id generation."""

import random

import pytest

from gitsandbox.core.errors import SandboxError
from gitsandbox.core.ids import (
    BASE36_ALPHABET,
    DEFAULT_ID_LENGTH,
    draw_unique_id,
    random_id,
    sequential_ids,
)


def test_random_id_shape():
    sha = random_id()
    assert len(sha) == DEFAULT_ID_LENGTH
    assert all(ch in BASE36_ALPHABET for ch in sha)


def test_random_id_is_reproducible_with_seeded_rng():
    assert random_id(rng=random.Random(42)) == random_id(rng=random.Random(42))


def test_random_id_custom_length():
    assert len(random_id(12)) == 12


def test_sequential_ids():
    next_id = sequential_ids()
    assert [next_id(), next_id(), next_id()] == ['c000001', 'c000002', 'c000003']


def test_sequential_ids_are_independent():
    first = sequential_ids(prefix='a', width=2)
    second = sequential_ids(prefix='a', width=2)
    first()
    assert second() == 'a01'


def test_draw_unique_id_skips_taken():
    next_id = sequential_ids()
    assert draw_unique_id(next_id, lambda sha: sha in {'c000001', 'c000002'}) == 'c000003'


def test_draw_unique_id_gives_up():
    with pytest.raises(SandboxError):
        draw_unique_id(lambda: 'same', lambda sha: True, attempts=3)
