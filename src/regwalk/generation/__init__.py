"""Generation context - random walks that emit accepted strings.

Core abstractions:
- RandomSource: Protocol for the pluggable randomizer
- sample: Uniform integer in an inclusive range
- RandomWalker: Unconstrained and length-bounded generation
"""

from regwalk.generation.sampler import RandomSource, sample
from regwalk.generation.walker import RandomWalker

__all__ = [
    "RandomSource",
    "RandomWalker",
    "sample",
]
