"""regwalk - Generate strings accepted by a finite automaton.

The inverse of a regex matcher: given an automaton compiled from a
pattern, produce sample strings that match it by construction.

Quick Start:
    from regwalk import Automaton, RandomWalker

    automaton = Automaton()
    start = automaton.add_state()
    end = automaton.add_state(accept=True)
    automaton.add_transition(start, end, "a", "z")
    automaton.add_transition(end, end, "0", "9")

    walker = RandomWalker.from_seed(automaton, 42)
    walker.generate()        # a letter followed by zero or more digits
    walker.generate(2, 4)    # length 2..4, or raises WalkError
"""

from __future__ import annotations

# Automaton model
from regwalk.automaton import (
    MAX_CODE_POINT,
    Automaton,
    AutomatonDefinition,
    AutomatonModel,
    State,
    StateView,
    Transition,
    TransitionView,
    load_automaton,
    load_definition,
)

# Configuration
from regwalk.config import WalkSettings, load_settings

# Errors
from regwalk.errors import (
    AutomatonDefinitionError,
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    InsufficientLengthError,
    InvalidLengthRangeError,
    MaxLengthExceededError,
    RegwalkError,
    ValidationError,
    WalkError,
)

# Generation
from regwalk.generation import RandomSource, RandomWalker, sample

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Generation
    "RandomWalker",
    "RandomSource",
    "sample",
    # Automaton model
    "Automaton",
    "AutomatonModel",
    "AutomatonDefinition",
    "State",
    "StateView",
    "Transition",
    "TransitionView",
    "MAX_CODE_POINT",
    "load_automaton",
    "load_definition",
    # Configuration
    "WalkSettings",
    "load_settings",
    # Errors
    "RegwalkError",
    "ErrorCode",
    "ErrorContext",
    "WalkError",
    "InsufficientLengthError",
    "MaxLengthExceededError",
    "ValidationError",
    "InvalidLengthRangeError",
    "ConfigValidationError",
    "AutomatonDefinitionError",
]
