"""Automaton context - the structure random walks run over.

Core abstractions:
- AutomatonModel / StateView / TransitionView: read-only interface the
  walker consumes
- Automaton: arena-backed implementation with stable transition order
- AutomatonDefinition: serializable description loaded from YAML/JSON
"""

from regwalk.automaton.definition import (
    AutomatonDefinition,
    StateDefinition,
    TransitionDefinition,
    load_automaton,
    load_definition,
    parse_definition,
)
from regwalk.automaton.model import MAX_CODE_POINT, Automaton, State, Transition
from regwalk.automaton.protocols import AutomatonModel, StateView, TransitionView

__all__ = [
    # Consumed interface
    "AutomatonModel",
    "StateView",
    "TransitionView",
    # Arena implementation
    "Automaton",
    "State",
    "Transition",
    "MAX_CODE_POINT",
    # Definitions
    "AutomatonDefinition",
    "StateDefinition",
    "TransitionDefinition",
    "parse_definition",
    "load_definition",
    "load_automaton",
]
