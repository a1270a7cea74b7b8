"""Unit tests for id generation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from smartbill.domain.value_objects import Id, SequentialIdGenerator
from tests.fakes import FakeIdGenerator

pytestmark = pytest.mark.unit


def test_sequential_generator_starts_after_start_value():
    generator = SequentialIdGenerator(start=10)

    assert generator.next_id() == Id(11)
    assert generator.next_id() == Id(12)
    assert generator.last_value == 12


def test_sequential_generator_rejects_negative_start():
    with pytest.raises(ValueError):
        SequentialIdGenerator(start=-1)


def test_generate_uses_supplied_generator():
    """Test that Id.generate delegates to an injected generator."""
    generator = FakeIdGenerator([500])

    assert Id.generate(generator) == Id(500)
    assert generator.issued == [500]


def test_default_generator_is_monotonic():
    first = Id.generate()
    second = Id.generate()

    assert second.value > first.value


def test_concurrent_generation_yields_distinct_ids():
    """Test that N ids generated from many threads are all distinct."""
    generator = SequentialIdGenerator()
    n = 5000

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda _: generator.next_id(), range(n)))

    assert len(set(ids)) == n
    assert generator.last_value == n
