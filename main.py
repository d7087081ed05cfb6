import argparse
import os
import sys

import numpy as np
import pandas as pd

from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from mincut.errors import MinCutError
from mincut.loader import read_edge_list
from mincut.trials import TrialRunner

# None means fresh entropy on every run
RNG_SEED = None

# default generator parameters for --random
ER_P = 0.1
BA_M = 3

TABLE_HEADER = (
    "|            name |          (n, m) |       opt | avg. runs |\n"
    "|-----------------|-----------------|-----------|-----------|"
)


def format_row(name, n, m, opt, avg_runs):
    return f"|{name:>16} | {f'({n},{m})':>15} |{opt:10} |{avg_runs:10.2f} |"


def split_files(values):
    """--files accepts both `a,b` and `a b`."""
    return [part for value in values for part in value.split(",") if part]


def iter_graphs(args):
    """Yields (name, graph) for every input requested on the command line."""
    if args.random is not None:
        rng = np.random.default_rng(args.seed)
        if args.random == "ER":
            yield f"ER(n={args.nodes})", generate_er(args.nodes, args.p, rng)
        else:
            yield f"BA(n={args.nodes})", generate_ba(args.nodes, args.m, rng)
        return

    for path in split_files(args.files):
        yield os.path.basename(path), read_edge_list(path)


def run(args) -> pd.DataFrame:
    runner = TrialRunner(workers=args.workers, seed=args.seed,
                         chunk_size=args.chunk_size, progress=args.progress)

    print(TABLE_HEADER)
    rows = []
    for name, graph in iter_graphs(args):
        estimate = runner.estimate(graph, args.iters)
        print(format_row(name, estimate.n, estimate.m, estimate.minimum, estimate.mean_gap))
        rows.append({
            'name': name,
            'n': estimate.n,
            'm': estimate.m,
            'opt': estimate.minimum,
            'avg_runs': estimate.mean_gap,
        })

    return pd.DataFrame(rows, columns=['name', 'n', 'm', 'opt', 'avg_runs'])


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the minimum cut of graphs with repeated Karger contraction")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--files", nargs="+",
                        help="Edge list files (comma or space separated)")
    source.add_argument("--random", type=str.upper, choices=["ER", "BA"],
                        help="Run on a generated ER or BA graph instead of files")

    parser.add_argument("-i", "--iters", type=int, required=True,
                        help="Number of contraction trials per graph")
    parser.add_argument("--seed", type=int, default=RNG_SEED,
                        help="Root random seed, for reproducible runs")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker processes (default: all cores but one)")
    parser.add_argument("--chunk-size", type=int, default=None,
                        help="Trials per task sent to a worker")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Also save the results table as CSV")

    parser.add_argument("--nodes", type=int, default=100,
                        help="Number of nodes for --random")
    parser.add_argument("--p", type=float, default=ER_P,
                        help="Edge probability for --random ER")
    parser.add_argument("--m", type=int, default=BA_M,
                        help="Edges per new node for --random BA")
    return parser


def check_args(parser, args):
    """Rejects option values the runner or the generators would refuse."""
    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be >= 1, got {args.workers}")
    if args.chunk_size is not None and args.chunk_size < 1:
        parser.error(f"--chunk-size must be >= 1, got {args.chunk_size}")

    if args.random is None:
        return
    if args.nodes < 1:
        parser.error(f"--nodes must be >= 1, got {args.nodes}")
    if args.random == "ER" and not 0.0 <= args.p <= 1.0:
        parser.error(f"--p must be in [0, 1], got {args.p}")
    if args.random == "BA" and not 1 <= args.m <= args.nodes:
        parser.error(f"--m must be in [1, --nodes], got {args.m} with --nodes {args.nodes}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    check_args(parser, args)

    try:
        results_df = run(args)
    except (MinCutError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        results_df.to_csv(args.output, index=False)
        print(f"\nResults saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
