from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from hypercube_engine import Cube, MalformedRotation, parse_rotations  # noqa: E402
from hypercube_engine.viz.plot import plot_energy_trace, plot_points  # noqa: E402

logger = logging.getLogger("solve_report")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    ap = argparse.ArgumentParser(description="Scramble and solve N-dimensional cubes with the randomized solver.")
    ap.add_argument("--dims", type=int, default=3)
    ap.add_argument("--trials", type=int, default=5)
    ap.add_argument("--scramble", type=int, default=1, help="random rotations applied before solving")
    ap.add_argument("--moves", type=str, default=None, help="explicit scramble, e.g. 1202,0120")
    ap.add_argument("--max-steps", type=int, default=20_000)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--outdir", type=Path, default=Path("artifacts/solve"))
    ap.add_argument("--verbose", "-v", action="store_true", help="log every solver step")
    args = ap.parse_args()

    _setup_logging(args.verbose)

    try:
        explicit = parse_rotations(args.moves, args.dims) if args.moves else None
    except MalformedRotation as e:
        ap.error(str(e))

    args.outdir.mkdir(parents=True, exist_ok=True)

    results = []
    fig, ax = plt.subplots(figsize=(8, 4.5))
    last_cube: Cube | None = None

    for t in range(args.trials):
        rng = random.Random(args.seed + t)
        cube = Cube(args.dims)
        if explicit is not None:
            for r in explicit:
                cube.rotate(r)
            scramble = [r.digits() for r in explicit]
        else:
            scramble = [r.digits() for r in cube.shuffle(args.scramble, rng)]

        E0 = cube.unsolvedness()
        res = cube.solve(rng, max_steps=args.max_steps)
        last_cube = cube

        logger.info(
            "trial %d: E0=%d solved=%s moves=%d steps=%d",
            t,
            E0,
            res.solved,
            res.move_count,
            res.steps_run,
        )
        plot_energy_trace(res.energies, ax=ax, label=f"trial {t}")
        results.append(
            {
                "trial": t,
                "scramble": scramble,
                "E0": E0,
                "solved": res.solved,
                "moves": [r.digits() for r in res.moves],
                "steps_run": res.steps_run,
                "accepted": res.accepted,
                "rejected": res.rejected,
                "E_final": res.energies[-1],
                "final_hash": cube.hash(),
            }
        )

    ax.set_title("Solver traces")
    fig.tight_layout()
    fig.savefig(args.outdir / "solve_traces.png")
    plt.close(fig)

    if last_cube is not None:
        plot_points(last_cube)
        plt.tight_layout()
        plt.savefig(args.outdir / "final_points.png")
        plt.close()

    summary = {
        "dims": args.dims,
        "trials": args.trials,
        "scramble": args.scramble,
        "max_steps": args.max_steps,
        "seed": args.seed,
        "solved_rate": sum(1 for r in results if r["solved"]) / len(results) if results else 0.0,
        "results": results,
    }
    (args.outdir / "solve_summary.json").write_text(json.dumps(summary, indent=2))

    print(f"Wrote: {args.outdir}/solve_summary.json")
    print(f"Wrote: {args.outdir}/solve_traces.png")
    if last_cube is not None:
        print(f"Wrote: {args.outdir}/final_points.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
