"""
Discrete time grids for path simulation
"""
import numpy as np
from typing import Iterable, Iterator, Sequence, Union
import logging

from ..utils.constants import TIME_TOLERANCE
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class TimeGrid:
    """
    Ordered, strictly increasing sequence of times t[0..n]

    t[0] is "now". The grid is immutable once built and is shared
    read-only by a generator and every path it fills.
    """

    __slots__ = ("_times", "_dts")

    def __init__(self, times: Union[Sequence[float], np.ndarray]):
        values = np.array(times, dtype=float).ravel()

        if values.size == 0:
            raise ConfigurationError("TimeGrid: no times given")
        if not np.all(np.isfinite(values)):
            raise ConfigurationError("TimeGrid: times must be finite")
        if values[0] < 0.0:
            raise ConfigurationError(f"TimeGrid: first time ({values[0]}) must be non negative")

        steps = np.diff(values)
        bad = np.flatnonzero(steps <= 0.0)
        if bad.size:
            i = int(bad[0])
            raise ConfigurationError(
                f"TimeGrid: time({i})={values[i]} is not earlier than time({i + 1})={values[i + 1]}"
            )

        values.setflags(write=False)
        steps.setflags(write=False)
        self._times = values
        self._dts = steps

    @classmethod
    def uniform(cls, end: float, steps: int) -> "TimeGrid":
        """Equally spaced grid on [0, end] with ``steps`` intervals"""
        if steps <= 0:
            raise ConfigurationError(f"TimeGrid: steps ({steps}) must be greater than zero")
        if end <= 0.0:
            raise ConfigurationError(f"TimeGrid: end time ({end}) must be positive")
        return cls(np.linspace(0.0, end, steps + 1))

    @classmethod
    def from_mandatory_times(cls, times: Iterable[float], steps: int) -> "TimeGrid":
        """
        Grid that hits every mandatory time

        Each interval between consecutive mandatory times is split evenly so
        that no step is longer than last_time / steps.

        Args:
            times: Mandatory (non-negative) times, in any order
            steps: Number of steps the full horizon would be split into

        Returns:
            TimeGrid starting at 0 and containing every mandatory time
        """
        if steps <= 0:
            raise ConfigurationError(f"TimeGrid: steps ({steps}) must be greater than zero")

        mandatory = np.unique(np.asarray(list(times), dtype=float))
        if mandatory.size == 0:
            raise ConfigurationError("TimeGrid: no mandatory times given")
        if mandatory[0] < 0.0:
            raise ConfigurationError("TimeGrid: negative times not allowed")
        if mandatory[-1] <= 0.0:
            raise ConfigurationError("TimeGrid: last mandatory time must be positive")

        if mandatory[0] > 0.0:
            mandatory = np.concatenate(([0.0], mandatory))

        max_dt = mandatory[-1] / steps
        points = [0.0]
        for start, end in zip(mandatory[:-1], mandatory[1:]):
            n_sub = max(int(np.ceil((end - start) / max_dt - TIME_TOLERANCE)), 1)
            points.extend(np.linspace(start, end, n_sub + 1)[1:])

        logger.debug(f"Built grid with {len(points)} points from {mandatory.size} mandatory times")
        return cls(points)

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def dts(self) -> np.ndarray:
        return self._dts

    @property
    def start(self) -> float:
        return float(self._times[0])

    @property
    def end(self) -> float:
        return float(self._times[-1])

    @property
    def n_steps(self) -> int:
        return len(self._times) - 1

    def dt(self, i: int) -> float:
        """Length of interval i, i.e. t[i+1] - t[i]"""
        return float(self._dts[i])

    def index(self, t: float) -> int:
        """Index of a time that lies on the grid"""
        i = self.closest_index(t)
        if abs(self._times[i] - t) > TIME_TOLERANCE:
            raise ValueError(
                f"using inadequate time grid: {t} is not on the grid "
                f"(closest point {self._times[i]} at index {i})"
            )
        return i

    def closest_index(self, t: float) -> int:
        """Index of the grid point nearest to t"""
        i = int(np.searchsorted(self._times, t))
        if i == 0:
            return 0
        if i >= len(self._times):
            return len(self._times) - 1
        left, right = self._times[i - 1], self._times[i]
        return i - 1 if t - left <= right - t else i

    def closest_time(self, t: float) -> float:
        return float(self._times[self.closest_index(t)])

    def __len__(self) -> int:
        return len(self._times)

    def __getitem__(self, i: int) -> float:
        return float(self._times[i])

    def __iter__(self) -> Iterator[float]:
        return (float(t) for t in self._times)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeGrid):
            return NotImplemented
        return self._times.shape == other._times.shape and bool(np.all(self._times == other._times))

    def __hash__(self) -> int:
        return hash(self._times.tobytes())

    def __repr__(self) -> str:
        return f"TimeGrid(n_points={len(self)}, start={self.start}, end={self.end})"
