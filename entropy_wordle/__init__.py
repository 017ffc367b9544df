"""
Entropy Wordle Solver
=====================

Picks each guess by trading the chance of hitting the answer now against the
information the guess gives about the rest of the candidates.
"""

__version__ = "1.0.0"

from .config import SolverConfig
from .context import SolverContext
from .dictionary import Dictionary, load_dictionary, load_words
from .feedback import Correctness, Guess, compute, matches
from .game import benchmark, play
from .solver import Solver
