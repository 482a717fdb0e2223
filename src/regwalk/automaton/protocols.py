"""Protocols - the read-only automaton interface the walker consumes.

Any compiler output exposing this shape can be walked; the bundled
arena-backed :class:`~regwalk.automaton.model.Automaton` is one such
implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class TransitionView(Protocol):
    """An edge consuming one character whose code lies in ``[min, max]``."""

    @property
    def min(self) -> int: ...

    @property
    def max(self) -> int: ...

    @property
    def destination(self) -> StateView: ...


@runtime_checkable
class StateView(Protocol):
    """A node of the automaton.

    ``ordered_transitions()`` must return the same order on every call;
    reproducible walks depend on it.
    """

    @property
    def is_accept(self) -> bool: ...

    def ordered_transitions(self) -> Sequence[TransitionView]: ...


@runtime_checkable
class AutomatonModel(Protocol):
    """Anything with an initial state."""

    def initial_state(self) -> StateView: ...


__all__ = ["AutomatonModel", "StateView", "TransitionView"]
