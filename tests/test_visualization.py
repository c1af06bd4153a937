import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np
import pytest

from mac_navstokes import new_simulation, step
from mac_navstokes.visualization import GridVisualizer, DiagnosticRecorder


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_cell_colors_paint_solids_red_and_shade_density(grid):
    grid.d2d[5, 5] = 0.75
    image = GridVisualizer().cell_colors(grid)

    assert image.shape == (20, 20, 3)
    np.testing.assert_array_equal(image[0, 0], [1.0, 0.0, 0.0])
    np.testing.assert_array_equal(image[10, 6], [1.0, 0.0, 0.0])
    np.testing.assert_allclose(image[5, 5], [0.25, 0.25, 0.25])
    np.testing.assert_array_equal(image[5, 6], [1.0, 1.0, 1.0])


def test_cell_colors_without_layers_is_white(grid):
    image = GridVisualizer().cell_colors(grid, show_occupancy=False, show_density=False)
    assert np.all(image == 1.0)


def test_plots_render(grid):
    step(grid, grid.dt)
    visualizer = GridVisualizer(figsize=(4, 4))

    assert isinstance(visualizer.plot_grid(grid, show_velocity=True), plt.Figure)
    assert isinstance(visualizer.plot_divergence(grid), plt.Figure)


def test_recorder_tracks_steps_and_round_trips(tmp_path):
    grid = new_simulation(16, 16, 0.4, 1.0 / 30)
    recorder = DiagnosticRecorder()
    for _ in range(3):
        step(grid, grid.dt)
        recorder.update(grid)

    assert len(recorder) == 3
    assert recorder.history['step'] == [1, 2, 3]
    assert all(s >= 1 for s in recorder.history['projection_sweeps'])
    assert recorder.history['max_speed'][-1] > 0.0

    path = tmp_path / "diagnostics.json"
    recorder.save(str(path))
    loaded = DiagnosticRecorder()
    loaded.load(str(path))
    assert loaded.history['time'] == pytest.approx(recorder.history['time'])
    assert len(loaded) == 3

    assert isinstance(recorder.plot_time_series(), plt.Figure)


def test_animation_over_snapshots(grid):
    frames = [grid.copy()]
    for _ in range(2):
        step(grid, grid.dt)
        frames.append(grid.copy())

    anim = GridVisualizer(figsize=(3, 3)).animate(frames)
    assert isinstance(anim, animation.FuncAnimation)


def test_saved_animation_closes_its_figure(grid, tmp_path):
    frames = [grid.copy()]
    step(grid, grid.dt)
    frames.append(grid.copy())

    open_before = len(plt.get_fignums())
    path = tmp_path / "tunnel.gif"
    GridVisualizer(figsize=(2, 2)).animate(frames, filename=str(path), interval=100)

    assert path.exists()
    assert len(plt.get_fignums()) == open_before
