# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
from typing import Any
from config import Config
import uuid


def make_run_dir(
    cfg: Config,
    base: str = "outputs",
    path_algo_name: str | None = None,
    width: int | None = None,
    height: int | None = None,
    n_goals: int | None = None,
) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (grid size, goals, seed, etc.).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".
    path_algo_name : str | None, optional
        Name of the pathfinding algorithm; appended to the folder name when given.
    width, height, n_goals : int | None, optional
        Grid size and goal count of the scenario actually planned on. When
        omitted they are taken from cfg (an empty cfg.goals counts as one
        corner goal). Pass them when the scenario came from a layout file.

    Folder naming
    -------------
    The folder name encodes grid size, number of goals, random seed and
    a timestamp + short UUID suffix to guarantee uniqueness.

    Example:
        outputs/run_W10xH10_Goals1_seed0_AStar_20251216-213012-ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    if width is None:
        width = cfg.width
    if height is None:
        height = cfg.height
    if n_goals is None:
        n_goals = max(len(cfg.goals), 1)

    parts = [
        f"W{width}xH{height}",
        f"Goals{n_goals}",
        f"seed{cfg.seed}",
    ]
    if path_algo_name:
        parts.append(path_algo_name)

    base_name = "run_" + "_".join(parts)

    # repeated runs with the same config must not overwrite each other
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    suffix = f"{ts}-{uid}"

    run_dir = base_path / f"{base_name}_{suffix}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """
    Serialize the Config object for this run into JSON.
    Tuples (start, goals, walls) are written as JSON lists.
    """
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_config(path: str | Path) -> Config:
    """Inverse of save_config(); list coordinates are turned back into tuples."""
    with Path(path).open("r", encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    data["start"] = tuple(data.get("start", (0, 0)))
    data["goals"] = [tuple(p) for p in data.get("goals", [])]
    data["walls"] = [tuple(p) for p in data.get("walls", [])]
    return Config(**data)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the summary metrics for a run as a JSON file.

    The structure is nested ("grid.width", "pathfinding.total_runtime", ...)
    and comes from PlannerSession.summary().
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)


def load_layout(path: str | Path) -> str:
    with Path(path).open("r", encoding="utf-8") as f:
        return f.read()


def save_layout(layout: str, run_dir: Path, filename: str = "path.txt") -> Path:
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        f.write(layout)
    return out_path
