"""Command line entry point: induce an ID3 decision tree from a CSV file.

The first CSV row is the header. By default the first column holds the class label; use
``--class-column`` to pick another one. Without a CSV path the bundled PlayTennis dataset is used.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from id3_tlbx.data import Entries


logger = logging.getLogger("id3_tlbx")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="id3-tlbx",
        description="Induce an ID3 decision tree from categorical CSV data.",
    )
    parser.add_argument("csv_path", nargs="?", type=Path, help="CSV file (default: bundled PlayTennis data)")
    parser.add_argument("--class-column", default=None, help="Name of the class column (default: first column)")
    parser.add_argument("--gains", action="store_true", help="Print the information gain of every attribute")
    parser.add_argument("--plot", type=Path, default=None, help="Save a bar plot of the information gains")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    try:
        entries = Entries.from_csv(args.csv_path, class_column=args.class_column)
    except (ValueError, FileNotFoundError) as err:
        logger.error("Cannot load dataset: %s", err)
        return 1
    logger.info("Loaded %d entries with attributes %s", len(entries), entries.attribute_names)
    if entries.is_empty():
        logger.error("Dataset is empty, nothing to learn from: %s", args.csv_path)
        return 1

    if args.gains or args.plot is not None:
        if entries.num_attributes == 0:
            logger.error("Dataset has no attribute columns")
            return 1
        gain_res = entries.make_information_gain_analyzer().fit().result()
        if args.gains:
            print(f"E(S) = {gain_res.dataset_entropy:.4f}")
            print(gain_res.gains.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
            print(f"Best attribute: {gain_res.best_attribute} (id {gain_res.best_attribute_id})")
        if args.plot is not None:
            fig = gain_res.plot_gains()
            fig.savefig(args.plot)
            logger.info("Saved information gain plot to %s", args.plot)

    tree_res = entries.make_tree_builder().fit().result()
    print(tree_res.render())
    logger.info("Tree depth %d with %d leaves", tree_res.depth, tree_res.n_leaves)
    return 0


if __name__ == "__main__":
    sys.exit(main())
