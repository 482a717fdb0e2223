"""Hand-built automata, a scripted random source and an independent matcher shared by the tests."""

from __future__ import annotations

from regwalk.automaton import Automaton, AutomatonModel, StateView


class SequenceRandom:
    """Random source replaying a fixed list of draws.

    Each value is reduced modulo ``stop`` so scripted draws are always
    in range.
    """

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self._values.pop(0) % stop


def build_ab() -> Automaton:
    """Accepts exactly "ab"."""
    automaton = Automaton()
    start = automaton.add_state()
    middle = automaton.add_state()
    end = automaton.add_state(accept=True)
    automaton.add_transition(start, middle, "a")
    automaton.add_transition(middle, end, "b")
    return automaton


def build_ab_repeat_c() -> Automaton:
    """Accepts {a,b}^{4,6}c."""
    automaton = Automaton()
    counts = [automaton.add_state() for _ in range(7)]
    final = automaton.add_state(accept=True)
    for i in range(6):
        automaton.add_transition(counts[i], counts[i + 1], "a", "b")
    for i in (4, 5, 6):
        automaton.add_transition(counts[i], final, "c")
    return automaton


def build_a_then_bs() -> Automaton:
    """Accepts ab* (accept state with a self-loop)."""
    automaton = Automaton()
    start = automaton.add_state()
    loop = automaton.add_state(accept=True)
    automaton.add_transition(start, loop, "a")
    automaton.add_transition(loop, loop, "b")
    return automaton


def build_email_like() -> Automaton:
    """Accepts [a-z]+@[a-z]+\\.(com|org), with cycles before and after '@'."""
    automaton = Automaton()
    start = automaton.add_state()
    user = automaton.add_state()
    at = automaton.add_state()
    domain = automaton.add_state()
    dot = automaton.add_state()
    c, co = automaton.add_state(), automaton.add_state()
    o, org = automaton.add_state(), automaton.add_state()
    end = automaton.add_state(accept=True)

    automaton.add_transition(start, user, "a", "z")
    automaton.add_transition(user, user, "a", "z")
    automaton.add_transition(user, at, "@")
    automaton.add_transition(at, domain, "a", "z")
    automaton.add_transition(domain, domain, "a", "z")
    automaton.add_transition(domain, dot, ".")
    automaton.add_transition(dot, c, "c")
    automaton.add_transition(c, co, "o")
    automaton.add_transition(co, end, "m")
    automaton.add_transition(dot, o, "o")
    automaton.add_transition(o, org, "r")
    automaton.add_transition(org, end, "g")
    return automaton


def build_empty_string() -> Automaton:
    """Accepts only the empty string."""
    automaton = Automaton()
    automaton.add_state(accept=True)
    return automaton


def build_dead_end() -> Automaton:
    """Malformed: "a" leads into a non-accept state with no transitions."""
    automaton = Automaton()
    start = automaton.add_state()
    stuck = automaton.add_state()
    automaton.add_transition(start, stuck, "a")
    return automaton


def accepts(automaton: AutomatonModel, text: str) -> bool:
    """Simulate the automaton (possibly nondeterministic) on ``text``."""
    current: list[StateView] = [automaton.initial_state()]
    for char in text:
        code = ord(char)
        current = [
            t.destination
            for state in current
            for t in state.ordered_transitions()
            if t.min <= code <= t.max
        ]
        if not current:
            return False
    return any(state.is_accept for state in current)


AB_YAML = """\
initial: 0
states:
  - id: 0
    transitions:
      - {min: "a", to: 1}
  - id: 1
    transitions:
      - {min: "b", to: 2}
  - id: 2
    accept: true
"""
