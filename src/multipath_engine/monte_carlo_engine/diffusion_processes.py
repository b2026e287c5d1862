"""
Diffusion processes driving each simulated asset
"""
import numpy as np
from typing import Callable
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)

class DiffusionProcess(ABC):
    """
    Abstract base class for one-dimensional diffusion processes

    dx = μ(t, x) dt + σ(t, x) dW

    Processes used with the multi-path generator describe the log of the
    asset level: the generator multiplies the level by
    exp(μ dt + σ √dt z) at every step.
    """

    def __init__(self, initial_value: float):
        self._initial_value = float(initial_value)

    @property
    def initial_value(self) -> float:
        """Level of the process at the first grid time"""
        return self._initial_value

    @abstractmethod
    def drift(self, t: float, x: float) -> float:
        """Instantaneous drift rate μ(t, x)"""
        pass

    @abstractmethod
    def diffusion(self, t: float, x: float) -> float:
        """Instantaneous volatility σ(t, x)"""
        pass

    def expectation(self, t: float, x: float, dt: float) -> float:
        """Expected value after dt (Euler approximation)"""
        return x + self.drift(t, x) * dt

    def variance(self, t: float, x: float, dt: float) -> float:
        """Variance of the increment over dt (Euler approximation)"""
        sigma = self.diffusion(t, x)
        return sigma * sigma * dt

    def std_deviation(self, t: float, x: float, dt: float) -> float:
        return float(np.sqrt(self.variance(t, x, dt)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(initial_value={self._initial_value})"

class BlackScholesProcess(DiffusionProcess):
    """
    Black-Scholes log-price process:
    d ln S = (r - q - σ²/2) dt + σ dW
    """

    def __init__(
        self,
        initial_value: float,
        risk_free_rate: float,
        dividend_yield: float,
        volatility: float
    ):
        if initial_value <= 0:
            raise ValueError("Initial value must be positive")
        if volatility < 0:
            raise ValueError("Volatility cannot be negative")
        super().__init__(initial_value)
        self.risk_free_rate = float(risk_free_rate)
        self.dividend_yield = float(dividend_yield)
        self.volatility = float(volatility)

    def drift(self, t: float, x: float) -> float:
        return self.risk_free_rate - self.dividend_yield - 0.5 * self.volatility**2

    def diffusion(self, t: float, x: float) -> float:
        return self.volatility

class LocalVolatilityProcess(DiffusionProcess):
    """
    Log-price process with a level-dependent volatility surface:
    d ln S = (r - q - σ(t, S)²/2) dt + σ(t, S) dW

    The surface is any callable (t, S) -> σ, e.g. a CEV-style
    ``lambda t, s: sigma0 * (s / s0) ** (beta - 1)``.
    """

    def __init__(
        self,
        initial_value: float,
        risk_free_rate: float,
        dividend_yield: float,
        local_volatility: Callable[[float, float], float]
    ):
        if initial_value <= 0:
            raise ValueError("Initial value must be positive")
        super().__init__(initial_value)
        self.risk_free_rate = float(risk_free_rate)
        self.dividend_yield = float(dividend_yield)
        self.local_volatility = local_volatility

    def _sigma(self, t: float, x: float) -> float:
        sigma = float(self.local_volatility(t, x))
        if not np.isfinite(sigma) or sigma < 0:
            raise ValueError(f"local volatility at t={t}, x={x} is {sigma}")
        return sigma

    def drift(self, t: float, x: float) -> float:
        sigma = self._sigma(t, x)
        return self.risk_free_rate - self.dividend_yield - 0.5 * sigma * sigma

    def diffusion(self, t: float, x: float) -> float:
        return self._sigma(t, x)

class OrnsteinUhlenbeckProcess(DiffusionProcess):
    """
    Ornstein-Uhlenbeck process (mean-reverting):
    dX = a(θ - X) dt + σ dW

    The variance over dt is exact rather than Euler.
    """

    def __init__(self, initial_value: float, speed: float, volatility: float, level: float = 0.0):
        if speed < 0:
            raise ValueError("Mean reversion speed cannot be negative")
        if volatility < 0:
            raise ValueError("Volatility cannot be negative")
        super().__init__(initial_value)
        self.speed = float(speed)
        self.volatility = float(volatility)
        self.level = float(level)

    def drift(self, t: float, x: float) -> float:
        return self.speed * (self.level - x)

    def diffusion(self, t: float, x: float) -> float:
        return self.volatility

    def expectation(self, t: float, x: float, dt: float) -> float:
        return self.level + (x - self.level) * np.exp(-self.speed * dt)

    def variance(self, t: float, x: float, dt: float) -> float:
        # Var[X(t+dt)] = σ²(1 - e^(-2a dt))/(2a)
        if self.speed > 0:
            return self.volatility**2 * (1 - np.exp(-2 * self.speed * dt)) / (2 * self.speed)
        return self.volatility**2 * dt
