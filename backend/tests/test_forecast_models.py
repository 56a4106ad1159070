"""Tests for the forecast models: regression, Monte Carlo, blend, confidence, accuracy."""

import numpy as np
import pytest

from stockcast.services.forecast.models import (
    accuracy_score,
    blend_predictions,
    confidence_decay,
    flat_outputs,
    linear_regression_fit,
    linear_regression_predict,
    monte_carlo_predict,
    run_models,
)


class TestLinearRegression:
    def test_perfect_line(self):
        slope, intercept = linear_regression_fit(np.arange(100.0, 130.0))
        assert slope == pytest.approx(1.0)
        assert intercept == pytest.approx(100.0)

    def test_predicts_past_end_of_series(self):
        predictions = linear_regression_predict(np.arange(100.0, 130.0), 7)
        assert len(predictions) == 7
        assert predictions[0] == pytest.approx(130.0)
        assert predictions[-1] == pytest.approx(136.0)

    def test_flat_series(self):
        predictions = linear_regression_predict(np.full(20, 55.0), 7)
        assert predictions == pytest.approx(np.full(7, 55.0))

    def test_clamped_non_negative(self):
        predictions = linear_regression_predict(np.arange(100.0, 0.0, -10.0), 7)
        assert np.all(predictions >= 0)
        assert predictions[-1] == 0.0

    def test_deterministic(self):
        prices = 100 + np.cumsum(np.random.default_rng(5).normal(0, 1, 40))
        first = linear_regression_predict(prices, 7)
        second = linear_regression_predict(prices.copy(), 7)
        assert np.array_equal(first, second)

    def test_single_point_has_no_trend(self):
        slope, intercept = linear_regression_fit(np.array([42.0]))
        assert slope == 0.0
        assert intercept == 42.0


class TestMonteCarlo:
    def test_shape(self):
        predictions = monte_carlo_predict(100.0, 0.3, days=7, rng=np.random.default_rng(1))
        assert predictions.shape == (7,)

    def test_seeded_runs_are_reproducible(self):
        first = monte_carlo_predict(100.0, 0.3, rng=np.random.default_rng(11))
        second = monte_carlo_predict(100.0, 0.3, rng=np.random.default_rng(11))
        assert np.array_equal(first, second)

    def test_zero_volatility_holds_price(self):
        predictions = monte_carlo_predict(100.0, 0.0, rng=np.random.default_rng(3))
        assert np.all(predictions == 100.0)

    def test_day_values_within_shock_envelope(self):
        volatility = 0.5
        daily = volatility / np.sqrt(252)
        predictions = monte_carlo_predict(100.0, volatility, rng=np.random.default_rng(8))
        for day, price in enumerate(predictions, start=1):
            assert 100.0 * (1 - daily) ** day <= price <= 100.0 * (1 + daily) ** day

    def test_never_negative_under_extreme_volatility(self):
        predictions = monte_carlo_predict(10.0, 100.0, rng=np.random.default_rng(4))
        assert np.all(predictions >= 0)

    def test_day_one_median_converges_to_current_price(self):
        rng = np.random.default_rng(2024)
        large = monte_carlo_predict(100.0, 0.3, days=1, simulations=20_001, rng=rng)
        assert large[0] == pytest.approx(100.0, abs=0.1)

        runs = [
            monte_carlo_predict(100.0, 0.3, days=1, simulations=1000, rng=rng)[0]
            for _ in range(30)
        ]
        assert float(np.mean(runs)) == pytest.approx(100.0, abs=0.1)

    def test_unseeded_calls_differ(self):
        first = monte_carlo_predict(100.0, 0.3)
        second = monte_carlo_predict(100.0, 0.3)
        assert not np.array_equal(first, second)


class TestEnsemble:
    def test_blend_weights(self):
        linear = np.array([100.0, 110.0])
        monte_carlo = np.array([90.0, 100.0])
        assert blend_predictions(linear, monte_carlo) == pytest.approx([96.0, 106.0])

    def test_run_models_blend_is_exact(self):
        prices = np.arange(100.0, 130.0)
        outputs = run_models(prices, 0.25, rng=np.random.default_rng(42))
        for i in range(7):
            assert outputs.blended[i] == 0.6 * outputs.linear[i] + 0.4 * outputs.monte_carlo[i]

    def test_flat_outputs(self):
        outputs = flat_outputs(0.0)
        assert np.all(outputs.blended == 0.0)
        assert np.all(outputs.confidence == 50.0)


class TestConfidence:
    @pytest.mark.parametrize("volatility", [0.0, 0.05, 0.15, 0.3, 1.5])
    def test_non_increasing_and_bounded(self, volatility):
        confidence = confidence_decay(volatility)
        assert len(confidence) == 7
        assert np.all(np.diff(confidence) <= 0)
        assert np.all(confidence >= 50)
        assert np.all(confidence <= 85)

    def test_values(self):
        assert list(confidence_decay(0.05)) == pytest.approx([80, 77, 74, 71, 68, 65, 62])

    def test_volatility_penalty_capped(self):
        assert confidence_decay(0.5)[0] == 65.0
        assert confidence_decay(5.0)[0] == 65.0
        assert list(confidence_decay(5.0)[-2:]) == [50.0, 50.0]

    def test_zero_volatility_starts_at_max(self):
        assert confidence_decay(0.0)[0] == 85.0


class TestAccuracy:
    def test_low_volatility_bonus(self):
        assert accuracy_score(0.1) == 85.0

    def test_normal_volatility(self):
        assert accuracy_score(0.2) == 75.0
        assert accuracy_score(0.4) == 75.0

    def test_high_volatility_penalty(self):
        assert accuracy_score(0.9) == 65.0
