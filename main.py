import argparse
import sys

import pandas as pd

from benchmarking import BenchmarkRunner

from graph_generators.erdos_renyi import generate_er
from graph_generators.barabasi_albert import generate_ba
from graph_generators.planted_cut import generate_planted_cut

from mincut.exceptions import GraphFormatError, InvalidGraphError
from mincut import graph_io
from mincut.stoer_wagner import stoer_wagner_wrapper

RNG_SEED = 42
OUTPUT_CSV = "benchmark_results.csv"

# Stoer-Wagner on a dense matrix is O(n^3); keep n moderate
N_VALUES = [20, 40, 60, 80, 100]

# this is for each (model, n) pair
TRIALS = 10

MODEL_PARAMS = {
    'ER': {'p': 0.1, 'max_weight': 9},  # G(n, p) with weights 1..9
    'BA': {'m': 3, 'max_weight': 9},    # G(n, m) with m=3 new edges per node
    'PLANTED': {'cut_edges': 3, 'p_in': 0.5},
}


def solve(args):
    try:
        cut_weight, product = graph_io.solve(args.path, expected_cut=args.expected_cut)
    except (GraphFormatError, InvalidGraphError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Minimum cut weight: {cut_weight}")
    print(f"Product: {product}")
    return 0


def benchmark(args):
    algorithms_to_test = {
        'stoer_wagner': stoer_wagner_wrapper,
    }
    if args.expected_cut is not None:
        algorithms_to_test['stoer_wagner_hinted'] = \
            lambda m: stoer_wagner_wrapper(m, expected_cut=args.expected_cut)

    graph_generators = {
        'ER': generate_er,
        'BA': generate_ba,
        'PLANTED': generate_planted_cut,
    }

    runner = BenchmarkRunner(algorithms_to_test, graph_generators, seed=args.seed)
    results_df = runner.run(
        models=args.models,
        n_values=args.n_values,
        trials=args.trials,
        model_params=MODEL_PARAMS
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic global minimum cut")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Split a connection list along its minimum cut")
    p_solve.add_argument("path", type=str,
                         help="File with lines of the form '<label>: <neighbour> ...'")
    p_solve.add_argument("--expected-cut", type=int, default=None,
                         help="Stop once a cut of exactly this weight is found (opt-in shortcut)")
    p_solve.set_defaults(func=solve)

    p_bench = sub.add_parser("benchmark", help="Benchmark on generated graphs")
    p_bench.add_argument("--models", type=str, nargs="+", default=list(MODEL_PARAMS),
                         help="Graph models to run")
    p_bench.add_argument("--n-values", type=int, nargs="+", default=N_VALUES,
                         help="Graph sizes")
    p_bench.add_argument("--trials", type=int, default=TRIALS,
                         help="Trials per (model, n) pair")
    p_bench.add_argument("--seed", type=int, default=RNG_SEED,
                         help="Base seed for the generated graphs")
    p_bench.add_argument("--expected-cut", type=int, default=None,
                         help="Also time a run with this early-exit hint")
    p_bench.add_argument("--output", type=str, default=OUTPUT_CSV,
                         help="CSV file for the results")
    p_bench.set_defaults(func=benchmark)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
