from __future__ import annotations

import argparse
import logging
from pathlib import Path

from linegraph import GraphValue, LineGraphView


WEIGHT_LOG = [
    GraphValue(58, "4.12"),
    GraphValue(54.6, "4.17"),
    GraphValue(53.7, "4.21"),
    GraphValue(52.5, "4.22"),
    GraphValue(53.8, "4.25"),
    GraphValue(57, "4.27"),
    GraphValue(60, "4.28"),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the sample weight log as a PNG line graph.")
    parser.add_argument("--out", type=Path, default=Path("artifacts/weight_log.png"))
    parser.add_argument("--width", type=int, default=390)
    parser.add_argument("--height", type=int, default=240)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    view = LineGraphView(values=WEIGHT_LOG, width=args.width, graph_height=args.height)
    view.save_png(args.out)


if __name__ == "__main__":
    main()
