"""
Tests for path containers
"""
import pytest
import numpy as np

from multipath_engine.monte_carlo_engine.multi_path import MultiPath, Path
from multipath_engine.monte_carlo_engine.time_grid import TimeGrid

class TestPath:
    """Test single-asset path accessors"""

    def test_zero_initialised(self, quarterly_grid):
        """Test a new path has zero increments"""
        path = Path(quarterly_grid)

        assert len(path) == 4
        np.testing.assert_array_equal(path.drift, 0.0)
        np.testing.assert_array_equal(path.diffusion, 0.0)
        assert path.time_grid is quarterly_grid

    def test_increments_and_levels(self, quarterly_grid):
        """Test levels rebuilt from log-increments"""
        path = Path(quarterly_grid)
        path.drift[:] = [0.01, 0.01, 0.01, 0.01]
        path.diffusion[:] = [0.1, -0.2, 0.0, 0.05]

        assert path[1] == pytest.approx(-0.19)
        levels = path.levels(100.0)

        assert len(levels) == 5
        assert levels[0] == 100.0
        assert levels[-1] == pytest.approx(100.0 * np.exp(0.04 - 0.05))

class TestMultiPath:
    """Test multi-asset container"""

    def test_shape(self, quarterly_grid):
        """Test asset and step counts"""
        multi_path = MultiPath(3, quarterly_grid)

        assert multi_path.asset_number == 3
        assert multi_path.path_size == 4
        assert len(multi_path) == 3
        assert multi_path.log_increments().shape == (3, 4)
        assert all(isinstance(path, Path) for path in multi_path)

    def test_invalid_asset_count(self, quarterly_grid):
        """Test non-positive asset count"""
        with pytest.raises(ValueError):
            MultiPath(0, quarterly_grid)

    def test_copy_is_independent(self, quarterly_grid):
        """Test snapshot semantics"""
        multi_path = MultiPath(2, quarterly_grid)
        multi_path[0].diffusion[:] = 0.3
        snapshot = multi_path.copy()
        multi_path[0].diffusion[:] = -1.0

        np.testing.assert_array_equal(snapshot[0].diffusion, 0.3)
        assert snapshot.time_grid is quarterly_grid

    def test_to_frame(self):
        """Test long-format export"""
        grid = TimeGrid([0.0, 0.5, 1.5])
        multi_path = MultiPath(2, grid)
        multi_path[1].drift[:] = [0.1, 0.2]
        multi_path[1].diffusion[:] = [-0.3, 0.4]

        frame = multi_path.to_frame()

        assert list(frame.columns) == ["asset", "step", "time", "dt", "drift", "diffusion"]
        assert len(frame) == 4
        second = frame[frame["asset"] == 1]
        np.testing.assert_allclose(second["time"], [0.5, 1.5])
        np.testing.assert_allclose(second["dt"], [0.5, 1.0])
        np.testing.assert_allclose(second["drift"], [0.1, 0.2])
        np.testing.assert_allclose(second["diffusion"], [-0.3, 0.4])
