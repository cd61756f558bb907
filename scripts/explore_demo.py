from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from hypercube_engine import explore_random  # noqa: E402


def main() -> None:
    for dims in (3, 4):
        out = explore_random(dims, 10_000, seed=0, scramble=20)
        out.pop("energies")
        print(out)


if __name__ == "__main__":
    main()
