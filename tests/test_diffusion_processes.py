"""
Tests for per-asset diffusion processes
"""
import pytest
import numpy as np

from multipath_engine.monte_carlo_engine.diffusion_processes import (
    BlackScholesProcess,
    LocalVolatilityProcess,
    OrnsteinUhlenbeckProcess,
)

class TestBlackScholesProcess:
    """Test constant-parameter log-price process"""

    def test_drift_and_variance(self):
        """Test log-drift and Euler variance"""
        process = BlackScholesProcess(100.0, risk_free_rate=0.05, dividend_yield=0.01, volatility=0.2)

        assert process.initial_value == 100.0
        assert process.drift(0.5, 120.0) == pytest.approx(0.05 - 0.01 - 0.02)
        assert process.variance(0.5, 120.0, 0.25) == pytest.approx(0.04 * 0.25)
        assert process.std_deviation(0.5, 120.0, 0.25) == pytest.approx(0.1)

    def test_expectation(self):
        """Test Euler expectation"""
        process = BlackScholesProcess(100.0, 0.05, 0.0, 0.2)

        assert process.expectation(0.0, 1.0, 0.5) == pytest.approx(1.0 + 0.03 * 0.5)

    def test_parameter_validation(self):
        """Test invalid parameters"""
        with pytest.raises(ValueError):
            BlackScholesProcess(0.0, 0.05, 0.0, 0.2)

        with pytest.raises(ValueError):
            BlackScholesProcess(100.0, 0.05, 0.0, -0.2)

class TestLocalVolatilityProcess:
    """Test level-dependent volatility"""

    def test_volatility_follows_level(self):
        """Test that the surface is evaluated at the given level"""
        process = LocalVolatilityProcess(
            100.0, risk_free_rate=0.0, dividend_yield=0.0,
            local_volatility=lambda t, s: 0.1 if s < 100.0 else 0.3
        )

        assert process.diffusion(0.0, 90.0) == pytest.approx(0.1)
        assert process.diffusion(0.0, 110.0) == pytest.approx(0.3)
        assert process.variance(0.0, 110.0, 1.0) == pytest.approx(0.09)
        assert process.drift(0.0, 90.0) == pytest.approx(-0.005)

    def test_cev_surface(self):
        """Test a CEV-style surface"""
        process = LocalVolatilityProcess(
            100.0, 0.02, 0.0,
            local_volatility=lambda t, s: 0.2 * (s / 100.0) ** -0.5
        )

        assert process.diffusion(1.0, 25.0) == pytest.approx(0.4)

    def test_negative_surface_value_raises(self):
        """Test that an invalid surface value surfaces as an error"""
        process = LocalVolatilityProcess(100.0, 0.0, 0.0, local_volatility=lambda t, s: -0.1)

        with pytest.raises(ValueError, match="local volatility"):
            process.variance(0.0, 100.0, 0.1)

class TestOrnsteinUhlenbeckProcess:
    """Test mean-reverting process"""

    def test_exact_variance(self):
        """Test exact O-U variance"""
        process = OrnsteinUhlenbeckProcess(0.0, speed=2.0, volatility=0.3)
        expected = 0.09 * (1 - np.exp(-4.0 * 0.5)) / 4.0

        assert process.variance(0.0, 1.0, 0.5) == pytest.approx(expected)

    def test_zero_speed_is_brownian(self):
        """Test degenerate mean reversion"""
        process = OrnsteinUhlenbeckProcess(0.0, speed=0.0, volatility=0.3)

        assert process.variance(0.0, 1.0, 0.5) == pytest.approx(0.045)

    def test_drift_and_expectation(self):
        """Test pull towards the long-term level"""
        process = OrnsteinUhlenbeckProcess(1.0, speed=1.5, volatility=0.1, level=0.5)

        assert process.drift(0.0, 1.0) == pytest.approx(-0.75)
        assert process.expectation(0.0, 1.0, 1.0) == pytest.approx(0.5 + 0.5 * np.exp(-1.5))
