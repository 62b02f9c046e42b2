import random

import pytest
from packages.pools import PoolGenerator, generate_pool, MAX_POOL_LENGTH


@pytest.mark.parametrize("n", [4, 8, 20, 50, 100, 200])
def test_generate_pool_length(n):
    out = generate_pool(n)
    assert sum(1 for ch in out if ch.isalpha()) == n
    assert out == out.lower()


def test_generate_pool_none_is_all_letters():
    out = generate_pool(None)
    assert sum(1 for ch in out if ch.isalpha()) == len(out)
    assert 1 <= len(out) <= MAX_POOL_LENGTH


def test_generate_pool_seeded_is_reproducible():
    assert PoolGenerator(7).generate(30) == PoolGenerator(7).generate(30)
    assert generate_pool(12, rng=random.Random(1)) == generate_pool(12, rng=random.Random(1))


@pytest.mark.parametrize("n", [0, -1, 201])
def test_generate_pool_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        generate_pool(n)


class _FixedRng:
    """Stands in for random.Random: always picks the first option."""

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return b


def test_generate_pool_uses_injected_rng():
    assert generate_pool(3, rng=_FixedRng()) == "aaa"
    assert generate_pool(rng=_FixedRng()) == "a" * MAX_POOL_LENGTH
