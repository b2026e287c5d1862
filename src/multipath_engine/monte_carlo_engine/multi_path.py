"""
Path containers filled by the path generators
"""
import numpy as np
import pandas as pd
from typing import Iterator, List
import logging

from .time_grid import TimeGrid

logger = logging.getLogger(__name__)

class Path:
    """
    Single-asset path stored as per-step log-increments

    ``drift[i]`` and ``diffusion[i]`` are the deterministic and random
    parts of the log-return over grid interval i.
    """

    __slots__ = ("_time_grid", "drift", "diffusion")

    def __init__(self, time_grid: TimeGrid):
        self._time_grid = time_grid
        n_steps = len(time_grid) - 1
        self.drift = np.zeros(n_steps)
        self.diffusion = np.zeros(n_steps)

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    def __len__(self) -> int:
        return len(self.drift)

    def __getitem__(self, i: int) -> float:
        return float(self.drift[i] + self.diffusion[i])

    def log_increments(self) -> np.ndarray:
        return self.drift + self.diffusion

    def levels(self, initial_value: float) -> np.ndarray:
        """Asset levels on the full grid, starting from ``initial_value``"""
        log_levels = np.concatenate(([0.0], np.cumsum(self.log_increments())))
        return initial_value * np.exp(log_levels)

    def __repr__(self) -> str:
        return f"Path(n_steps={len(self)})"

class MultiPath:
    """Correlated paths, one per asset, sharing a single time grid"""

    def __init__(self, n_assets: int, time_grid: TimeGrid):
        if n_assets <= 0:
            raise ValueError("Number of assets must be positive")
        self._time_grid = time_grid
        self._paths: List[Path] = [Path(time_grid) for _ in range(n_assets)]

    @property
    def time_grid(self) -> TimeGrid:
        return self._time_grid

    @property
    def asset_number(self) -> int:
        return len(self._paths)

    @property
    def path_size(self) -> int:
        return len(self._paths[0])

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, j: int) -> Path:
        return self._paths[j]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def log_increments(self) -> np.ndarray:
        """Array of shape (n_assets, n_steps)"""
        return np.vstack([path.log_increments() for path in self._paths])

    def copy(self) -> "MultiPath":
        """Independent snapshot of the current increments"""
        clone = MultiPath(self.asset_number, self._time_grid)
        for source, target in zip(self._paths, clone._paths):
            target.drift[:] = source.drift
            target.diffusion[:] = source.diffusion
        return clone

    def to_frame(self) -> pd.DataFrame:
        """Long-format frame with one row per asset and step"""
        n_steps = self.path_size
        times = self._time_grid.times[1:]
        dts = self._time_grid.dts
        return pd.DataFrame({
            "asset": np.repeat(np.arange(self.asset_number), n_steps),
            "step": np.tile(np.arange(n_steps), self.asset_number),
            "time": np.tile(times, self.asset_number),
            "dt": np.tile(dts, self.asset_number),
            "drift": np.concatenate([path.drift for path in self._paths]),
            "diffusion": np.concatenate([path.diffusion for path in self._paths]),
        })

    def __repr__(self) -> str:
        return f"MultiPath(n_assets={self.asset_number}, n_steps={self.path_size})"
