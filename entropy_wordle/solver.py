"""
Entropy Wordle Solver
=====================

Greedy one-ply solver. Each turn, every remaining candidate W (or the top
ranked share of them on large sets) is scored by

    p(W) * (t + 1) + (1 - p(W)) * (t + est_steps_left(H_now - H(W)))

where p(W) is W's prior share of the remaining mass, H(W) the entropy of the
pattern split W induces, H_now the entropy of the remaining candidates and
t the number of turns played. The lowest score is guessed.

The first guess is a fixed opener; see SolverConfig.opener.
"""

from typing import List, NamedTuple, Optional, Sequence

from .candidates import CandidateSet
from .context import SolverContext
from .feedback import Correctness, Guess
from .scoring import EntropyScorer, expected_score


class ScoredGuess(NamedTuple):
    word: str
    entropy: float
    probability: float
    score: float


class Solver:
    """
    One game's worth of state on top of a shared SolverContext.

    Solvers are cheap: make a new one per game. The context (dictionary and
    feedback cache) can be shared between threads, a Solver cannot.
    """

    def __init__(self, context: SolverContext):
        self.context = context
        self.config = context.config
        self.candidates = CandidateSet(context.dictionary)
        self.scorer = EntropyScorer(context.cache)
        self._applied = 0

    def get_candidates(self) -> List[str]:
        return self.candidates.words()

    def update(self, guess: str, mask: Sequence[Correctness]) -> int:
        """Apply one observed mask. Returns the number of candidates left."""
        remaining = self.candidates.filter(guess, mask)
        self._applied += 1
        return remaining

    def guess(self, history: Sequence[Guess]) -> str:
        """Next word to play given everything observed so far."""
        self._sync(history)
        if not history:
            return self.context.opener
        return self.best_guess(turns=len(history))

    def rank(self, history: Sequence[Guess]) -> List[ScoredGuess]:
        """Scores behind the next decision, in candidate rank order."""
        self._sync(history)
        return self._score_pool(len(history))

    def best_guess(self, turns: int) -> str:
        """Lowest expected score over the current pool. First one wins ties."""
        best: Optional[ScoredGuess] = None
        for scored in self._score_pool(turns):
            if best is None or scored.score < best.score:
                best = scored
        return best.word

    def _score_pool(self, turns: int) -> List[ScoredGuess]:
        candidates = self.candidates
        remaining_entropy = candidates.entropy()
        pool = candidates.prefix(self.config.pool_size(len(candidates)))

        scores = []
        for entry in pool:
            info = self.scorer.entropy(entry.index, candidates)
            p_word = candidates.probability(entry)
            score = expected_score(p_word, info, remaining_entropy, turns)
            scores.append(ScoredGuess(entry.word, info, p_word, score))
        return scores

    def _sync(self, history: Sequence[Guess]) -> None:
        if len(history) < self._applied:
            raise ValueError(f"History has {len(history)} turns but {self._applied} "
                             f"were already applied; start a new Solver per game")
        for record in history[self._applied:]:
            self.update(record.word, record.mask)
