"""
Headless wind tunnel run: inlet jet, density pipe and a dragged obstacle
"""

import argparse
import logging
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from mac_navstokes.core import SimulationConfig
from mac_navstokes.numerics import compute_divergence
from mac_navstokes.utils import SimulationController, PointerInput, canvas_width_for
from mac_navstokes.visualization import GridVisualizer, DiagnosticRecorder


def parse_args():
    parser = argparse.ArgumentParser(description="2D staggered-grid wind tunnel")
    parser.add_argument("--size", type=int, default=80, help="cells along each axis")
    parser.add_argument("--cell-size", type=float, default=0.4, help="physical cell size")
    parser.add_argument("--steps", type=int, default=120, help="number of steps to run")
    parser.add_argument("--drag-every", type=int, default=20,
                        help="move the obstacle every N steps (0 disables)")
    parser.add_argument("--output", default="wind_tunnel", help="prefix for saved files")
    parser.add_argument("--verbose", action="store_true", help="log solver details")
    return parser.parse_args()


def run_wind_tunnel(args):
    """Run the tunnel for a fixed number of frames and save plots"""

    print("=" * 70)
    print("STAGGERED-GRID WIND TUNNEL")
    print("=" * 70)

    config = SimulationConfig(num_x=args.size, num_y=args.size, h=args.cell_size)
    controller = SimulationController(config)
    grid = controller.grid

    pixels_per_cell = 5.0
    pointer = PointerInput(grid, canvas_width_for(config, pixels_per_cell))

    print(f"Grid: {grid.num_x} x {grid.num_y} cells, h={grid.h}, dt={grid.dt:.4f}")
    print(f"Obstacle: center=({grid.obstacle.x}, {grid.obstacle.y}), r={grid.obstacle.r}")

    recorder = DiagnosticRecorder()
    snapshots = [grid.copy()]

    print("\nStep    Time    Density   Max|u|     Max|div|   Sweeps  Elapsed")
    print("-" * 70)

    controller.play()
    start_time = time.time()

    try:
        for frame in range(1, args.steps + 1):
            # emulate a mouse drag of the obstacle, a few cells down and right
            if args.drag_every and frame % args.drag_every == 0:
                px = grid.obstacle.x * pixels_per_cell
                py = grid.obstacle.y * pixels_per_cell
                if pointer.press(px, py):
                    pointer.move(px + 2 * pixels_per_cell, py + pixels_per_cell)
                pointer.release()

            controller.tick()
            recorder.update(grid)

            if frame % 10 == 0 or frame == args.steps:
                h = recorder.history
                print(f"{frame:4d}  {h['time'][-1]:6.3f}  {h['total_density'][-1]:8.3f}  "
                      f"{h['max_speed'][-1]:8.3f}  {h['max_divergence'][-1]:10.6f}  "
                      f"{h['projection_sweeps'][-1]:6d}  {time.time() - start_time:6.1f}s")
                snapshots.append(grid.copy())

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    controller.pause()

    print("\n" + "=" * 70)
    print("SIMULATION COMPLETE")
    print(f"Total steps: {controller.frames}")
    elapsed = time.time() - start_time
    if elapsed > 0:
        print(f"Performance: {controller.frames / elapsed:.1f} steps/second")
    print(f"Final max |div|: {np.max(np.abs(compute_divergence(grid))):.6f}")

    visualizer = GridVisualizer()

    fig = visualizer.plot_grid(grid, show_velocity=True)
    fig.savefig(f"{args.output}_state.png", dpi=150)
    plt.close(fig)

    fig = recorder.plot_time_series()
    fig.savefig(f"{args.output}_diagnostics.png", dpi=150)
    plt.close(fig)

    recorder.save(f"{args.output}_diagnostics.json")
    visualizer.animate(snapshots, filename=f"{args.output}.gif", interval=200)

    print(f"\nPlots saved to {args.output}_state.png and {args.output}_diagnostics.png")
    print(f"Animation saved to {args.output}.gif")


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    run_wind_tunnel(args)
