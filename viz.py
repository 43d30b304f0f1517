# viz.py
from __future__ import annotations
from typing import Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from grid import Cell
from scenario import Scenario


def draw_scenario(
    scenario: Scenario,
    out_path: str | Path,
    path: Optional[Sequence[Cell]] = None,
    title: str = "Grid A* planner",
) -> None:
    """
    Draw a snapshot of the scenario:
      - free cells: light background
      - walls: dark gray
      - path cells (excluding start and goals): soft amber
      - start: purple star
      - goals: green crosses

    Row 0 is drawn at the top, matching the text layout.
    """
    grid = scenario.grid
    rows, cols = grid.height, grid.width
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # --- Color palette (RGB in 0–1) ---
    bgcolor    = np.array([0.96, 0.96, 0.96])  # light gray background
    wall_color = np.array([0.30, 0.30, 0.30])  # dark gray
    path_color = np.array([1.00, 0.78, 0.37])  # soft amber

    img = np.zeros((rows, cols, 3), dtype=float)
    img[:, :, :] = bgcolor
    img[~grid.walkable_mask()] = wall_color

    endpoints = {scenario.start.pos} | {g.pos for g in scenario.goals}
    for cell in path or []:
        if cell.pos not in endpoints:
            img[cell.y, cell.x] = path_color

    fig, ax = plt.subplots(figsize=(max(cols / 2.0, 3.0), max(rows / 2.0, 3.0)))
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    sx, sy = scenario.start.pos
    h_start = ax.scatter(
        [sx],
        [sy],
        marker="*",
        s=150,
        c="#9467bd",          # purple
        edgecolors="white",
        linewidths=1.0,
        label="start",
    )

    h_goals = None
    if scenario.goals:
        h_goals = ax.scatter(
            [g.x for g in scenario.goals],
            [g.y for g in scenario.goals],
            marker="x",
            s=80,
            c="#2ca02c",       # green
            linewidths=1.5,
            label="goals",
        )

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=14, y=0.98)

    handles = [h_start]
    if h_goals is not None:
        handles.append(h_goals)
    handles.extend(
        [
            Patch(facecolor=wall_color, edgecolor="black", label="wall"),
            Patch(facecolor=path_color, edgecolor="black", label="path"),
        ]
    )

    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.93),
        ncol=len(handles),
        fontsize=8,
        frameon=False,
    )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
