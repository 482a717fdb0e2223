"""Automaton - arena-backed finite automaton over character-code ranges."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regwalk.automaton.definition import AutomatonDefinition

# Highest Unicode code point; transition ranges never exceed it.
MAX_CODE_POINT = 0x10FFFF


def to_code_point(value: int | str) -> int:
    """Accept either an integer code point or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        return ord(value)
    return value


@dataclass(frozen=True)
class State:
    """Handle to one state of an :class:`Automaton`.

    States are stored in the automaton's arena and addressed by id; the
    handle only points back at the arena. Two handles are equal when
    they name the same id in the same automaton.
    """

    automaton: Automaton = field(repr=False)
    id: int

    @property
    def is_accept(self) -> bool:
        return self.automaton.is_accept(self.id)

    def ordered_transitions(self) -> tuple[Transition, ...]:
        return self.automaton.transitions_from(self.id)

    def __hash__(self) -> int:
        return hash((id(self.automaton), self.id))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.automaton is other.automaton and self.id == other.id


@dataclass(frozen=True)
class Transition:
    """Edge consuming one character whose code lies in ``[min, max]``.

    Transitions are immutable so a cached ordering can be shared between
    walks.
    """

    min: int
    max: int
    destination: State

    @property
    def span(self) -> int:
        """Number of characters the range covers."""
        return self.max - self.min + 1


class Automaton:
    """Holds all states and transitions of one automaton.

    States live in index-addressed lists (accept flags and raw edge
    lists), so cycles and shared destinations need no nested ownership.
    The first state added becomes the initial state unless
    :meth:`set_initial` says otherwise.

    Example::

        automaton = Automaton()
        start = automaton.add_state()
        end = automaton.add_state(accept=True)
        automaton.add_transition(start, end, "a", "z")
    """

    def __init__(self) -> None:
        self._accept: list[bool] = []
        self._edges: list[list[tuple[int, int, int]]] = []  # (min, max, dest_id)
        self._ordered: dict[int, tuple[Transition, ...]] = {}
        self._initial_state_id: int | None = None

    @property
    def initial_state_id(self) -> int | None:
        """ID of the initial state, or None while the automaton is empty."""
        return self._initial_state_id

    def add_state(self, accept: bool = False) -> State:
        """Append a new state to the arena and return its handle."""
        state_id = len(self._accept)
        self._accept.append(accept)
        self._edges.append([])
        if self._initial_state_id is None:
            self._initial_state_id = state_id
        return State(self, state_id)

    def set_initial(self, state: State | int) -> None:
        self._initial_state_id = self._resolve(state)

    def set_accept(self, state: State | int, accept: bool = True) -> None:
        self._accept[self._resolve(state)] = accept

    def add_transition(
        self,
        source: State | int,
        destination: State | int,
        min_char: int | str,
        max_char: int | str | None = None,
    ) -> Transition:
        """Add an edge from ``source`` to ``destination``.

        Args:
            source: State the edge leaves.
            destination: State the edge enters.
            min_char: Lowest accepted character (code point or 1-char string).
            max_char: Highest accepted character; defaults to ``min_char``.

        Returns:
            The new transition.

        Raises:
            ValueError: If the range is empty or leaves ``0..MAX_CODE_POINT``.
        """
        src = self._resolve(source)
        dest = self._resolve(destination)
        low = to_code_point(min_char)
        high = low if max_char is None else to_code_point(max_char)
        if not 0 <= low <= high <= MAX_CODE_POINT:
            raise ValueError(
                f"Invalid character range [{low}, {high}]: "
                f"need 0 <= min <= max <= {MAX_CODE_POINT:#x}"
            )

        self._edges[src].append((low, high, dest))
        self._ordered.pop(src, None)
        return Transition(low, high, State(self, dest))

    def initial_state(self) -> State:
        if self._initial_state_id is None:
            raise ValueError("Automaton has no states")
        return State(self, self._initial_state_id)

    def state(self, state_id: int) -> State:
        """Get a state handle by ID."""
        return State(self, self._resolve(state_id))

    def is_accept(self, state_id: int) -> bool:
        return self._accept[state_id]

    def transitions_from(self, state_id: int) -> tuple[Transition, ...]:
        """Outgoing transitions of a state in their stable order.

        Sorted ascending by lower bound, then descending by upper bound,
        then by destination id. The result is cached until the state
        gains another transition.
        """
        ordered = self._ordered.get(state_id)
        if ordered is None:
            edges = sorted(self._edges[state_id], key=lambda e: (e[0], -e[1], e[2]))
            ordered = tuple(Transition(lo, hi, State(self, dest)) for lo, hi, dest in edges)
            self._ordered[state_id] = ordered
        return ordered

    def has_transitions(self, state_id: int) -> bool:
        return bool(self._edges[state_id])

    def dead_ends(self) -> list[State]:
        """Non-accept states without outgoing transitions.

        A well-formed automaton has none; walking into one is a defect of
        whatever built the automaton.
        """
        return [
            State(self, sid)
            for sid, accept in enumerate(self._accept)
            if not accept and not self._edges[sid]
        ]

    def iter_states(self) -> Iterator[State]:
        """Iterate over all states in id order."""
        return (State(self, sid) for sid in range(len(self._accept)))

    @property
    def state_count(self) -> int:
        return len(self._accept)

    @property
    def transition_count(self) -> int:
        return sum(len(edges) for edges in self._edges)

    def to_definition(self) -> AutomatonDefinition:
        """Describe this automaton as a serializable definition."""
        from regwalk.automaton.definition import (
            AutomatonDefinition,
            StateDefinition,
            TransitionDefinition,
        )

        return AutomatonDefinition(
            initial=self.initial_state().id,
            states=[
                StateDefinition(
                    id=state.id,
                    accept=state.is_accept,
                    transitions=[
                        TransitionDefinition(min=t.min, max=t.max, to=t.destination.id)
                        for t in state.ordered_transitions()
                    ],
                )
                for state in self.iter_states()
            ],
        )

    def _resolve(self, state: State | int) -> int:
        if isinstance(state, State):
            if state.automaton is not self:
                raise ValueError(f"State {state.id} belongs to another automaton")
            state_id = state.id
        else:
            state_id = state
        if not 0 <= state_id < len(self._accept):
            raise ValueError(f"Unknown state id: {state_id}")
        return state_id

    def __repr__(self) -> str:
        return (
            f"Automaton(states={self.state_count}, transitions={self.transition_count}, "
            f"initial={self._initial_state_id})"
        )


__all__ = ["Automaton", "State", "Transition", "MAX_CODE_POINT", "to_code_point"]
