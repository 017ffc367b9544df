"""
Game driver and benchmark.
"""

import time
from collections import Counter
from typing import Callable, Dict, List, Optional

from .config import MAX_TURNS
from .context import SolverContext
from .feedback import Guess
from .solver import Solver

WORDLE_TURNS = 6


def play(answer: str, solver: Solver, max_turns: Optional[int] = MAX_TURNS,
         on_guess: Optional[Callable[[Guess], None]] = None) -> Optional[int]:
    """
    Play one game against `answer`.

    The solver never sees the answer, only the history of masks.

    Args:
        answer: The hidden word
        solver: A fresh Solver
        max_turns: Give up after this many guesses (None plays until solved)
        on_guess: Called with every scored guess, e.g. to render it

    Returns:
        Number of guesses used, or None if the cap was reached
    """
    dictionary = solver.context.dictionary
    history: List[Guess] = []
    turn = 0
    while max_turns is None or turn < max_turns:
        turn += 1
        guess = solver.guess(history)
        if guess not in dictionary:
            raise ValueError(f"Solver guessed '{guess}' which is not in the dictionary")

        record = Guess.scored(answer, guess)
        if on_guess is not None:
            on_guess(record)
        if record.solved:
            return turn
        history.append(record)

    return None


def solve(context: SolverContext, answer: str,
          max_turns: Optional[int] = MAX_TURNS) -> List[Guess]:
    """Play `answer` with a new solver and return every guess made."""
    answer = answer.lower()
    if answer not in context.dictionary:
        raise ValueError(f"Answer '{answer}' not in dictionary")
    guesses: List[Guess] = []
    play(answer, Solver(context), max_turns=max_turns, on_guess=guesses.append)
    return guesses


def benchmark(context: SolverContext, words: List[str] = None,
              max_turns: Optional[int] = MAX_TURNS,
              verbose: bool = True, progress_every: int = 500) -> Dict:
    """
    Play every word in `words` (default: the whole dictionary).

    Returns:
        Dict with results
    """
    if words is None:
        words = list(context.dictionary.words)
    for word in words:
        if word not in context.dictionary:
            raise ValueError(f"Answer '{word}' not in dictionary")

    results = []
    dist = Counter()
    failures = []

    t0 = time.time()
    for i, word in enumerate(words):
        if verbose and i % progress_every == 0:
            elapsed = time.time() - t0
            rate = (i + 1) / elapsed if elapsed > 0 else 0
            avg = sum(results) / len(results) if results else 0
            print(f"[{i}/{len(words)}] {rate:.1f} w/s, avg={avg:.4f}, "
                  f"cache={context.cache.filled()} cells")

        n = play(word, Solver(context), max_turns=max_turns)
        if n is None:
            failures.append(word)
            continue
        results.append(n)
        dist[n] += 1
        if n > WORDLE_TURNS:
            failures.append(word)

    elapsed = time.time() - t0

    return {
        'total': len(words),
        'solved': len(results),
        'average': sum(results) / len(results) if results else 0.0,
        'total_guesses': sum(results),
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': failures[:20],
        'time': elapsed,
        'rate': len(words) / elapsed if elapsed > 0 else 0.0,
    }
