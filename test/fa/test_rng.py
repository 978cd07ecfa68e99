import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from algorithms.FA.rng import SEED_LENGTH, UniformRNG, derive_agent_seeds, normalize_seed
from SwarmCore.errors import ConfigurationError
from SwarmCore.problem import Bounds

SEED = bytes(range(16))


def test_bounds_reject_lower_above_upper():
    with pytest.raises(ConfigurationError):
        Bounds(1.0, -1.0)


def test_bounds_allow_degenerate_interval():
    bounds = Bounds(2.0, 2.0)
    assert bounds.width == 0.0
    np.testing.assert_array_equal(bounds.clip([1.0, 3.0]), [2.0, 2.0])


def test_bounds_clip_and_contains():
    bounds = Bounds(-5.0, 5.0)
    clipped = bounds.clip([-7.0, 0.5, 12.0])
    np.testing.assert_array_equal(clipped, [-5.0, 0.5, 5.0])
    assert bounds.contains(clipped)
    assert not bounds.contains([5.5])


def test_sampler_is_reproducible_from_seed():
    first = UniformRNG(Bounds(-5.0, 5.0), SEED)
    second = UniformRNG(Bounds(-5.0, 5.0), SEED)

    assert first.sample() == second.sample()
    np.testing.assert_array_equal(first.sample_multiple(8), second.sample_multiple(8))


def test_sampler_differs_for_different_seeds():
    first = UniformRNG(Bounds(-5.0, 5.0), SEED)
    second = UniformRNG(Bounds(-5.0, 5.0), bytes(16))
    assert not np.array_equal(first.sample_multiple(8), second.sample_multiple(8))


def test_sampler_stays_in_bounds():
    sampler = UniformRNG(Bounds(-0.5, 2.0), SEED)
    values = sampler.sample_multiple(1000)
    assert values.shape == (1000,)
    assert np.all(values >= -0.5)
    assert np.all(values <= 2.0)
    assert -0.5 <= sampler.sample() <= 2.0


@pytest.mark.parametrize(
    "seed",
    [
        SEED,
        bytearray(SEED),
        list(range(16)),
        SEED.hex(),
    ],
)
def test_normalize_seed_accepts_equivalent_forms(seed):
    assert normalize_seed(seed) == SEED


@pytest.mark.parametrize("seed", [b"short", bytes(17), "zz" * 16, [0] * 15 + [256]])
def test_normalize_seed_rejects_malformed_seeds(seed):
    with pytest.raises(ConfigurationError):
        normalize_seed(seed)


class TestAgentSeedDerivation:
    def test_one_seed_per_agent(self):
        seeds = derive_agent_seeds(SEED, 5)
        assert len(seeds) == 5
        assert all(isinstance(seed, bytes) and len(seed) == SEED_LENGTH for seed in seeds)
        assert len(set(seeds)) == 5

    def test_derivation_is_deterministic(self):
        assert derive_agent_seeds(SEED, 10) == derive_agent_seeds(SEED, 10)

    def test_index_mapping_does_not_depend_on_swarm_size(self):
        assert derive_agent_seeds(SEED, 10)[:4] == derive_agent_seeds(SEED, 4)

    def test_different_top_level_seed_changes_sub_seeds(self):
        assert derive_agent_seeds(SEED, 3) != derive_agent_seeds(bytes(16), 3)

    def test_sub_seeds_give_independent_streams(self):
        first, second = derive_agent_seeds(SEED, 2)
        unit = Bounds(0.0, 1.0)
        assert not np.array_equal(
            UniformRNG(unit, first).sample_multiple(4),
            UniformRNG(unit, second).sample_multiple(4),
        )
