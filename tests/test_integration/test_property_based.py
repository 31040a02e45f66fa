"""
Property-Based Tests for the Belief-Update Engines.

Uses Hypothesis to test invariants that must hold for ALL inputs:
- Discrete: posterior normalization, evidence bounds, Gibbs' inequality
- Continuous: density normalization, trapezoid on constants
- Interpolation: monotonicity, non-negativity, range preservation
- Samplers: sparse prior is always a distribution
"""

import random

from hypothesis import given, settings
from hypothesis import strategies as st

from bayeslens.engine import continuous, discrete
from bayeslens.engine.interpolation import interpolate_monotone
from bayeslens.engine.quadrature import grid_spacing, normalize, normalize_density, trapz
from bayeslens.engine.samplers import iid_bernoulli

# Values on a 1/1000 lattice keep products away from underflow
unit_values = st.integers(min_value=0, max_value=1000).map(lambda k: k / 1000)


def paired_arrays(min_size=1, max_size=30):
    """(prior, likelihood) of equal length with entries in [0, 1]."""
    return st.integers(min_value=min_size, max_value=max_size).flatmap(
        lambda n: st.tuples(
            st.lists(unit_values, min_size=n, max_size=n),
            st.lists(unit_values, min_size=n, max_size=n),
        )
    )


def _dense(lo, hi, n=200):
    return [lo + (hi - lo) * i / (n - 1) for i in range(n)]


# ── Discrete Properties ───────────────────────────────────────────────


class TestDiscreteProperties:
    @given(arrays=paired_arrays())
    @settings(max_examples=100)
    def test_posterior_defined_iff_evidence_positive(self, arrays):
        prior, likelihood = arrays
        posterior = discrete.compute_posterior(prior, likelihood)
        marginal = discrete.compute_marginal_likelihood(prior, likelihood)
        assert (posterior is None) == (marginal == 0)

    @given(arrays=paired_arrays())
    @settings(max_examples=100)
    def test_posterior_is_distribution(self, arrays):
        prior, likelihood = arrays
        posterior = discrete.compute_posterior(prior, likelihood)
        if posterior is not None:
            assert abs(sum(posterior) - 1.0) < 1e-9
            assert all(p >= 0 for p in posterior)

    @given(arrays=paired_arrays())
    @settings(max_examples=100)
    def test_evidence_bounded_for_normalized_prior(self, arrays):
        """E_prior[likelihood] ∈ [0, 1] when likelihood ∈ [0, 1]."""
        raw_prior, likelihood = arrays
        prior = normalize(raw_prior)
        if prior is None:
            return
        marginal = discrete.compute_marginal_likelihood(prior, likelihood)
        assert -1e-12 <= marginal <= 1.0 + 1e-12
        assert discrete.compute_surprisal(prior, likelihood) >= -1e-9

    @given(arrays=paired_arrays())
    @settings(max_examples=100)
    def test_kl_non_negative(self, arrays):
        """Gibbs' inequality: D_KL(P ‖ Q) ≥ 0."""
        p, q = (normalize(a) for a in arrays)
        if p is None or q is None:
            return
        assert discrete.compute_kl(p, q) >= -1e-9

    @given(values=st.lists(unit_values, min_size=1, max_size=30))
    @settings(max_examples=50)
    def test_kl_self_is_zero(self, values):
        p = normalize(values)
        if p is None:
            return
        assert abs(discrete.compute_kl(p, list(p))) < 1e-9


# ── Continuous Properties ─────────────────────────────────────────────


class TestContinuousProperties:
    @given(values=st.lists(unit_values, min_size=2, max_size=60))
    @settings(max_examples=50)
    def test_density_integrates_to_one(self, values):
        dz = grid_spacing(len(values), (0.0, 1.0))
        density = normalize_density(values, dz)
        if density is not None:
            assert abs(trapz(density, dz) - 1.0) < 1e-9

    @given(
        c=unit_values,
        n=st.integers(min_value=2, max_value=500),
        width=st.integers(min_value=1, max_value=10),
    )
    @settings(max_examples=50)
    def test_trapz_constant(self, c, n, width):
        dz = grid_spacing(n, (0.0, float(width)))
        assert abs(trapz([c] * n, dz) - c * width) < 1e-9

    @given(arrays=paired_arrays(min_size=2, max_size=60))
    @settings(max_examples=50)
    def test_posterior_density_normalized(self, arrays):
        prior, likelihood = arrays
        dz = grid_spacing(len(prior), (0.0, 1.0))
        result = continuous.compute_all(prior, likelihood, dz)
        if result.posterior is not None:
            assert abs(trapz(result.posterior, dz) - 1.0) < 1e-9


# ── Interpolation Properties ──────────────────────────────────────────


class TestInterpolationProperties:
    @given(increments=st.lists(unit_values, min_size=2, max_size=20))
    @settings(max_examples=50)
    def test_monotone_data_monotone_output(self, increments):
        xs = list(range(len(increments)))
        ys = []
        total = 0.0
        for inc in increments:
            total += inc
            ys.append(total)
        values = interpolate_monotone(xs, ys, _dense(0, len(xs) - 1))
        assert all(b >= a - 1e-9 for a, b in zip(values, values[1:]))

    @given(ys=st.lists(unit_values, min_size=2, max_size=20))
    @settings(max_examples=50)
    def test_output_within_data_range(self, ys):
        """No overshoot: non-negative control values give non-negative output."""
        xs = list(range(len(ys)))
        values = interpolate_monotone(xs, ys, _dense(-1, len(ys)))
        assert min(values) >= min(ys) - 1e-9
        assert max(values) <= max(ys) + 1e-9

    @given(ys=st.lists(unit_values, min_size=1, max_size=20))
    @settings(max_examples=30)
    def test_clamped_outside(self, ys):
        xs = list(range(len(ys)))
        left, right = interpolate_monotone(xs, ys, [-10.0, len(ys) + 10.0])
        assert left == ys[0]
        assert right == ys[-1]


# ── Sampler Properties ────────────────────────────────────────────────


class TestSamplerProperties:
    @given(
        n=st.integers(min_value=1, max_value=50),
        seed=st.integers(min_value=0, max_value=2**32),
        p=unit_values,
    )
    @settings(max_examples=50)
    def test_sparse_prior_always_distribution(self, n, seed, p):
        values = iid_bernoulli(n, random.Random(seed), p)
        assert abs(sum(values) - 1.0) < 1e-9
        assert any(v > 0 for v in values)
