# config.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Pos = Tuple[int, int]


@dataclass
class Config:
    width: int = 10
    height: int = 10

    start: Pos = (0, 0)
    # empty list => single goal in the bottom-right corner
    goals: List[Pos] = field(default_factory=list)

    # explicit walls plus a random fill (fraction of the remaining cells)
    walls: List[Pos] = field(default_factory=list)
    wall_density: float = 0.0
    seed: int = 0

    # optional text layout ('.', '#', 'S', 'G'); overrides the fields above
    layout_file: Optional[str] = None

    path_algo_name: str = "AStar"  # AStar | BFS

    # terminal logging + output location
    log_events: bool = True
    output_base: str = "outputs"
