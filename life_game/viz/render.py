"""Dense numpy conversion and matplotlib renderers for environments."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage

from life_game.domain.environment import Environment, Status, new
from life_game.viz.theme import DEFAULT_THEME, Theme

# ---------------------------------------------------------------------------
# Dense conversion
# ---------------------------------------------------------------------------


def to_array(env: Environment) -> np.ndarray:
    """Return (H, W) int8 array with ``array[y, x]`` set to the cell status."""
    grid = np.zeros((env.height, env.width), dtype=np.int8)
    for x, y in env.cells:
        grid[y, x] = int(Status.ALIVE)
    return grid


def from_array(array: np.ndarray) -> Environment:
    """Build an environment from a (H, W) array of 0/1 values."""
    grid = np.asarray(array)
    if grid.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {grid.shape}")
    if not np.isin(grid, (int(Status.DEAD), int(Status.ALIVE))).all():
        raise ValueError("Array values must be 0 or 1")
    height, width = grid.shape
    ys, xs = np.nonzero(grid)
    return new(height, width, [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)])


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _status_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (dead, alive)."""
    cmap = ListedColormap([theme.dead_color, theme.alive_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def draw_environment(ax: plt.Axes, env: Environment, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    cmap, norm = _status_cmap(theme)
    img = ax.imshow(to_array(env), cmap=cmap, norm=norm, origin="upper", aspect="equal")
    for x in range(env.width + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(env.height + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.dead_color)
    return img


# ---------------------------------------------------------------------------
# render_filmstrip
# ---------------------------------------------------------------------------


def render_filmstrip(
    frames: Sequence[Environment],
    output_path: Path,
    n_frames: int = 6,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render a horizontal filmstrip of evenly sampled generations."""
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if not frames:
        raise ValueError("frames must not be empty")
    actual_n = max(1, min(n_frames, len(frames)))
    indices = [int(i * (len(frames) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    fig.patch.set_facecolor(theme.background_color)

    for col_idx, generation in enumerate(indices):
        ax = axes[0, col_idx]
        draw_environment(ax, frames[generation], theme=theme)
        ax.set_title(f"Generation {generation}", fontsize=9, color=theme.title_color)

    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=100, facecolor=fig.get_facecolor())
    plt.close(fig)
