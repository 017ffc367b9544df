"""
Terminal output and interactive feedback entry.
"""

from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.text import Text

from .config import MAX_TURNS, WORD_LENGTH
from .context import SolverContext
from .feedback import Correctness, Guess, Mask
from .solver import Solver

STYLES = {
    Correctness.CORRECT: "bold white on green",
    Correctness.MISPLACED: "bold black on yellow",
    Correctness.WRONG: "bold white on grey23",
}

SYMBOLS = {
    'g': Correctness.CORRECT, 'c': Correctness.CORRECT, '0': Correctness.CORRECT,
    'y': Correctness.MISPLACED, 'm': Correctness.MISPLACED, '1': Correctness.MISPLACED,
    'b': Correctness.WRONG, 'x': Correctness.WRONG, 'w': Correctness.WRONG,
    '.': Correctness.WRONG, '2': Correctness.WRONG,
}


def render_guess(record: Guess) -> Text:
    text = Text()
    for c, correctness in zip(record.word, record.mask):
        text.append(f" {c.upper()} ", style=STYLES[correctness])
    return text


def show_guess(record: Guess, console: Optional[Console] = None) -> None:
    (console or Console()).print(render_guess(record))


def parse_mask(text: str) -> Mask:
    """
    Turn typed feedback like "gybbg" or "01220" into a mask.

    g/c/0 = correct, y/m/1 = misplaced, b/x/w/./2 = wrong. Case and
    whitespace are ignored.
    """
    symbols = ''.join(text.split()).lower()
    if len(symbols) != WORD_LENGTH:
        raise ValueError(f"Expected {WORD_LENGTH} symbols, got {len(symbols)}")
    mask = []
    for s in symbols:
        if s not in SYMBOLS:
            raise ValueError(f"Unknown symbol '{s}' (use g/y/b)")
        mask.append(SYMBOLS[s])
    return tuple(mask)


def prompt_mask(guess: str, console: Console,
                ask: Optional[Callable[[str], str]] = None) -> Mask:
    """Ask until the user types a valid mask for `guess`."""
    ask = ask or console.input
    while True:
        try:
            return parse_mask(ask(f"Feedback for {guess.upper()} (g/y/b): "))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")


def assist(context: SolverContext, console: Optional[Console] = None,
           ask: Optional[Callable[[str], str]] = None) -> List[Guess]:
    """
    Interactive helper for a game played elsewhere.

    Suggests a word, reads back the colors the game showed, and repeats until
    the word is found.
    """
    console = console or Console()
    solver = Solver(context)
    history: List[Guess] = []
    for turn in range(1, MAX_TURNS + 1):
        guess = solver.guess(history)
        console.print(f"Turn {turn}: try [bold]{guess.upper()}[/bold] "
                      f"({len(solver.candidates)} candidates)")
        record = Guess(guess, prompt_mask(guess, console, ask))
        console.print(render_guess(record))
        history.append(record)
        if record.solved:
            console.print(f"[green]Solved in {turn} guesses![/green]")
            break
    return history


def print_results(results: Dict, console: Optional[Console] = None) -> None:
    """Pretty print benchmark results."""
    console = console or Console()
    console.print("\n" + "=" * 60)
    console.print("BENCHMARK RESULTS")
    console.print("=" * 60)
    console.print(f"Words tested: {results['total']}")
    console.print(f"Total guesses: {results['total_guesses']}")
    console.print(f"Average: {results['average']:.4f}")
    console.print(f"Failures: {results['failures']}")
    console.print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    console.print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        console.print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['failed_words']:
        console.print(f"\nFailed: {results['failed_words'][:10]}", markup=False)
    console.print("=" * 60)
