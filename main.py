from config import Config
from scenario import Scenario
from session import PlannerSession
from viz import draw_scenario
from io_utils import load_layout, make_run_dir, save_config, save_layout, save_summary


def main() -> None:
    """
    Single-run entry point for the grid planner.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (grid size, start, goals, walls, algorithm name, ...),
         or point layout_file at a text layout.
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (PNGs, path.txt, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Configuration and scenario: a text layout wins over the grid fields
    # ------------------------------------------------------------------
    cfg = Config()

    if cfg.layout_file:
        scenario = Scenario.from_layout(load_layout(cfg.layout_file))
    else:
        scenario = Scenario.from_config(cfg)

    # ------------------------------------------------------------------
    # 2) Output directory, named after the scenario actually planned on
    # ------------------------------------------------------------------
    run_dir = make_run_dir(
        cfg,
        base=cfg.output_base,
        path_algo_name=cfg.path_algo_name,
        width=scenario.grid.width,
        height=scenario.grid.height,
        n_goals=len(scenario.goals),
    )
    save_config(cfg, run_dir)

    draw_scenario(scenario, out_path=run_dir / "grid_initial.png")

    # ------------------------------------------------------------------
    # 3) Plan once
    # ------------------------------------------------------------------
    # algorithm name and logging flag come from cfg
    session = PlannerSession(cfg=cfg, scenario=scenario)
    session.path_algo.reset_stats()

    path = session.solve()

    # ------------------------------------------------------------------
    # 4) Outputs
    # ------------------------------------------------------------------
    draw_scenario(scenario, out_path=run_dir / "grid_path.png", path=path)
    save_layout(scenario.to_layout(path), run_dir)

    summary = session.summary()
    save_summary(summary, run_dir)

    print(f"Run directory: {run_dir}")
    if path:
        print(
            f"Path found: {summary['path']['length']} steps "
            f"to {tuple(summary['path']['reached_goal'])}"
        )
    else:
        print("No path: every goal is unreachable from the start cell.")


if __name__ == "__main__":
    main()
