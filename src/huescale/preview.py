from __future__ import annotations

"""Render generated palettes as PNG swatch strips (matplotlib, headless).

One row per palette, one square per stop, labelled with the stop position
and the hex value. Rendering uses the Agg backend and never opens a window.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from util.paths import ensure_parent_dir  # noqa: E402

from .api import GeneratedPaletteOutput  # noqa: E402
from .convert import oklch_to_hex  # noqa: E402
from .errors import ExportError  # noqa: E402

logger = logging.getLogger(__name__)

SWATCH_SIZE_IN = 0.9
LABEL_LIGHTNESS_SPLIT = 0.6


def render_swatches(
    palettes: Sequence[GeneratedPaletteOutput], out_path: str | Path, *, dpi: int = 100
) -> Path:
    """Write a PNG with one swatch row per palette and return its path.

    Parameters
    ----------
    palettes:
        Palettes to draw, top to bottom.
    out_path:
        Destination PNG; parent directories are created.
    dpi:
        Output resolution.

    Raises
    ------
    ExportError
        When ``palettes`` is empty or the file cannot be written.
    """
    if not palettes:
        raise ExportError(str(out_path), "nothing to render")

    rows = len(palettes)
    cols = max(len(p.stops) for p in palettes)
    fig = plt.figure(figsize=(cols * SWATCH_SIZE_IN + 1.6, rows * SWATCH_SIZE_IN + 0.2), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(-1.8, cols)
    ax.set_ylim(rows, 0)
    ax.axis("off")

    for row, palette in enumerate(palettes):
        ax.text(-0.1, row + 0.5, palette.name, ha="right", va="center", fontsize=8)
        for col, stop in enumerate(palette.stops):
            hex_value = oklch_to_hex(replace(stop.color, alpha=1.0))
            ax.add_patch(Rectangle((col, row), 1.0, 1.0, facecolor=hex_value, edgecolor="none"))
            ink = "black" if stop.color.l > LABEL_LIGHTNESS_SPLIT else "white"
            ax.text(col + 0.5, row + 0.4, str(stop.position), ha="center", va="center", fontsize=7, color=ink)
            ax.text(col + 0.5, row + 0.65, hex_value, ha="center", va="center", fontsize=6, color=ink)

    try:
        out = ensure_parent_dir(out_path)
        fig.savefig(os.fspath(out), dpi=dpi, facecolor=(1, 1, 1, 1))
    except OSError as exc:
        raise ExportError(str(out_path), str(exc)) from exc
    finally:
        plt.close(fig)
    logger.info("rendered %d palette(s) to %s", rows, out)
    return out


__all__ = ["render_swatches"]
