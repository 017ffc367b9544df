"""
Command line entry point.

    python -m entropy_wordle --dictionary words.txt solve crane jazzy
    python -m entropy_wordle --dictionary words.txt bench --answers answers.txt --limit 500
    python -m entropy_wordle --dictionary words.txt assist
"""

import argparse
import random
import sys

from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_OPENER, MAX_TURNS, SolverConfig
from .context import SolverContext
from .dictionary import load_dictionary, load_words
from .display import assist, print_results, show_guess
from .game import benchmark, solve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="entropy_wordle",
                                     description="Entropy-based Wordle solver")
    parser.add_argument("--dictionary", required=True,
                        help="File with one 'word count' pair per line")
    parser.add_argument("--opener", default=DEFAULT_OPENER,
                        help=f"First guess (default: {DEFAULT_OPENER})")
    parser.add_argument("--weighting", choices=["sigmoid", "raw"], default="sigmoid",
                        help="How frequencies become priors")
    parser.add_argument("--threshold", type=int, default=500,
                        help="Candidate count above which only a prefix is scored "
                             "(0 scores everything)")
    parser.add_argument("--fraction", type=float, default=0.25,
                        help="Share of candidates scored above the threshold")
    parser.add_argument("--floor", type=int, default=20,
                        help="Minimum number of candidates scored")
    parser.add_argument("--precompute", action="store_true",
                        help="Fill the full feedback matrix before playing")
    parser.add_argument("--max-turns", type=int, default=MAX_TURNS)
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Play the given answers")
    p_solve.add_argument("words", nargs="+")

    p_bench = sub.add_parser("bench", help="Benchmark over many answers")
    p_bench.add_argument("--answers", help="One answer per line (default: whole dictionary)")
    p_bench.add_argument("--limit", type=int, help="Random sample of this many answers")
    p_bench.add_argument("--seed", type=int, default=42)

    sub.add_parser("assist", help="Suggest guesses for a game played elsewhere")
    return parser


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig(
        opener=args.opener.lower(),
        weighting=args.weighting,
        evaluation_threshold=args.threshold or None,
        evaluation_fraction=args.fraction,
        evaluation_floor=args.floor,
        precompute=args.precompute,
        verbose=args.verbose,
    )


def run(args: argparse.Namespace, console: Console) -> None:
    config = config_from_args(args).validate()
    context = SolverContext(load_dictionary(args.dictionary, weighting=config.weighting), config)

    if args.command == "solve":
        for word in args.words:
            guesses = solve(context, word, max_turns=args.max_turns)
            for record in guesses:
                show_guess(record, console)
            if guesses and guesses[-1].solved:
                console.print(f"  -> Solved in {len(guesses)} guesses\n")
            else:
                console.print(f"  -> Gave up after {len(guesses)} guesses\n")

    elif args.command == "bench":
        words = load_words(args.answers) if args.answers else list(context.dictionary.words)
        if args.limit is not None and args.limit < len(words):
            random.seed(args.seed)
            words = random.sample(words, args.limit)
        results = benchmark(context, words, max_turns=args.max_turns, verbose=args.verbose)
        print_results(results, console)

    elif args.command == "assist":
        assist(context, console)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        run(args, console)
    except (ValueError, RuntimeError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
