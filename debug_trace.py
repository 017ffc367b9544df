"""Debug script for tracing solver behavior."""

import sys

from entropy_wordle import SolverConfig, SolverContext, load_dictionary
from entropy_wordle.feedback import Guess, feedback_to_string
from entropy_wordle.solver import Solver


def trace_solve(context, answer, max_guesses=6):
    solver = Solver(context)
    history = []

    print(f"\n=== Tracing solve for: {answer} ===\n")

    for i in range(max_guesses):
        cands = solver.get_candidates()
        print(f"Turn {i+1}: {len(cands)} candidates, "
              f"{solver.candidates.entropy():.4f} bits left")
        if len(cands) <= 10:
            print(f"  Candidates: {cands}")

        if history:
            # Show what the selector weighed up
            ranked = sorted(solver.rank(history), key=lambda s: s.score)
            for s in ranked[:5]:
                print(f"    {s.word}: entropy={s.entropy:.4f} p={s.probability:.4f} "
                      f"score={s.score:.4f}")

        guess = solver.guess(history)
        record = Guess.scored(answer, guess)
        info = solver.scorer.entropy(context.dictionary.index_of(guess), solver.candidates)
        print(f"  Guess: {guess} -> {feedback_to_string(record.mask)} (entropy={info:.4f})")

        if record.solved:
            print(f"\n✓ Solved in {i+1} guesses!")
            return i + 1

        solver.update(guess, record.mask)
        history.append(record)

        # Check if answer is still in candidates
        if answer not in solver.candidates:
            print(f"  ERROR: {answer} not in remaining candidates!")
            print(f"  Remaining: {solver.get_candidates()[:20]}")
            break

    print(f"\n✗ Failed to solve in {max_guesses} guesses")
    return max_guesses + 1


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("usage: python debug_trace.py DICTIONARY WORD [WORD ...]")
        sys.exit(2)

    context = SolverContext(load_dictionary(sys.argv[1]), SolverConfig(verbose=True))
    for word in sys.argv[2:]:
        trace_solve(context, word)
