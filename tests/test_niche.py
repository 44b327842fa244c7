"""Tests for the niche model (econet.generators.niche)."""

import numpy as np
import pytest

from econet import ParameterError, UnipartiteNetwork
from econet.generators import (
    NicheTraits,
    draw_niche_traits,
    niche_interactions,
    niche_model,
    niche_model_from_connectance,
    niche_model_from_links,
    niche_model_from_network,
)
from econet.metrics import richness


class TestParameters:
    def test_zero_links(self):
        with pytest.raises(ParameterError):
            niche_model(10, 0)

    def test_too_many_links(self):
        with pytest.raises(ParameterError):
            niche_model(10, 101)

    def test_links_equal_to_s_squared(self):
        with pytest.raises(ParameterError):
            niche_model_from_links(10, 100)

    def test_connectance_half(self):
        with pytest.raises(ParameterError):
            niche_model(10, 0.5)

    def test_links_implying_high_connectance(self):
        with pytest.raises(ParameterError):
            niche_model(10, 60)

    def test_non_positive_connectance(self):
        with pytest.raises(ParameterError):
            niche_model_from_connectance(10, 0.0)

    def test_bad_richness(self):
        with pytest.raises(ParameterError):
            niche_model(0, 0.2)
        with pytest.raises(ParameterError):
            niche_model(10.5, 0.2)

    def test_bool_is_not_a_link_count(self):
        with pytest.raises(ParameterError):
            niche_model(10, True)

    def test_no_randomness_used_on_failure(self):
        rng = np.random.default_rng(3)
        with pytest.raises(ParameterError):
            niche_model(10, 0.7, rng=rng)
        assert rng.random() == np.random.default_rng(3).random()

    @pytest.mark.parametrize("C", [float("nan"), float("inf")])
    def test_non_finite_connectance(self, C):
        rng = np.random.default_rng(3)
        with pytest.raises(ParameterError):
            niche_model(10, C, rng=rng)
        assert rng.random() == np.random.default_rng(3).random()

    def test_non_finite_connectance_from_metrics(self):
        class NanMetrics:
            def connectance(self, network):
                return float("nan")

            def richness(self, network):
                return len(network.S)

        web = UnipartiteNetwork(np.eye(4, dtype=bool))
        with pytest.raises(ParameterError):
            niche_model_from_network(web, rng=1, metrics=NanMetrics())

    def test_fractional_link_count(self):
        with pytest.raises(ParameterError):
            niche_model_from_links(10, 20.5, rng=1)
        with pytest.raises(ParameterError):
            niche_model_from_links(10, True, rng=1)


class TestNicheModel:
    def test_connectance_form(self):
        web = niche_model(10, 0.49, rng=1)
        assert isinstance(web, UnipartiteNetwork)
        assert web.shape == (10, 10)
        assert web.S[0] == "s1"

    def test_links_form(self):
        web = niche_model(50, 220, rng=42)
        assert isinstance(web, UnipartiteNetwork)
        assert richness(web) == 50

    def test_same_seed_same_web(self):
        first = niche_model(50, 220, rng=42)
        second = niche_model(50, 220, rng=42)
        assert (first.edges != second.edges).nnz == 0

    def test_tuple_form(self):
        web = niche_model((12, 0.15), rng=5)
        assert web.shape == (12, 12)
        assert niche_model((12, 20), rng=5).shape == (12, 12)

    def test_tuple_with_extra_argument(self):
        with pytest.raises(ParameterError):
            niche_model((12, 0.15), 0.2)

    def test_from_empirical_network(self):
        # 10 species, 20 links: connectance 0.2
        A = np.zeros((10, 10), dtype=bool)
        for i in range(10):
            A[i, (i + 1) % 10] = True
            A[i, (i + 2) % 10] = True
        web = niche_model(UnipartiteNetwork(A), rng=9)
        assert isinstance(web, UnipartiteNetwork)
        assert web.shape == (10, 10)

    @pytest.mark.parametrize("seed", range(10))
    def test_basal_species_eats_nothing(self, seed):
        web = niche_model(30, 0.2, rng=seed)
        assert web.edges[0].nnz == 0


class TestNicheTraits:
    def test_niche_values_sorted(self):
        traits = draw_niche_traits(25, 0.15, rng=11)
        assert np.all(np.diff(traits.niche) >= 0)
        assert traits.richness == 25

    def test_basal_species_zeroed(self):
        traits = draw_niche_traits(25, 0.15, rng=11)
        assert traits.niche[0] == 0.0
        assert traits.ranges[0] == 0.0

    def test_ranges_and_centroids(self):
        traits = draw_niche_traits(40, 0.3, rng=2)
        rest = slice(1, None)
        assert np.all(traits.ranges[rest] >= 0)
        assert np.all(traits.ranges[rest] <= traits.niche[rest])
        assert np.all(traits.centroids[rest] >= traits.ranges[rest] / 2)
        assert np.all(traits.centroids[rest] <= traits.niche[rest])

    def test_feeding_rule_is_strict(self):
        traits = NicheTraits(
            niche=np.array([0.0, 0.3, 0.6]),
            ranges=np.array([0.0, 0.4, 0.2]),
            centroids=np.array([0.1, 0.2, 0.6]),
        )
        # the second species feeds on (0.0, 0.4): its own niche 0.3, not the 0.0 boundary
        expected = np.array(
            [
                [False, False, False],
                [False, True, False],
                [False, False, True],
            ]
        )
        np.testing.assert_array_equal(niche_interactions(traits), expected)
