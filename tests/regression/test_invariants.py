"""Property-based tests that verify walk INVARIANTS.

These tests use Hypothesis to pick seeds and length bounds and check
properties that hold for every walk:

1. Every generated string is accepted by the automaton
2. Bounded results respect [min_length, max_length]
3. The same seed always yields the same sequence

If these fail, the walker is producing strings outside the language.
"""

from __future__ import annotations

import random

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from regwalk.errors import InsufficientLengthError, MaxLengthExceededError, WalkError
from regwalk.generation import RandomWalker, sample
from tests.helpers import (
    accepts,
    build_a_then_bs,
    build_ab,
    build_ab_repeat_c,
    build_email_like,
)

AUTOMATA = {
    "ab": build_ab,
    "ab_repeat_c": build_ab_repeat_c,
    "a_then_bs": build_a_then_bs,
    "email": build_email_like,
}

seeds = st.integers(min_value=0, max_value=2**32 - 1)
automaton_names = st.sampled_from(sorted(AUTOMATA))


# =============================================================================
# SAMPLING INVARIANTS
# =============================================================================


class TestSampleInvariants:
    """sample() stays inside its inclusive range."""

    @given(
        low=st.integers(min_value=-(2**40), max_value=2**40),
        width=st.integers(min_value=0, max_value=2**40),
        seed=seeds,
    )
    @settings(max_examples=100)
    def test_sample_within_range(self, low: int, width: int, seed: int) -> None:
        value = sample(low, low + width, random.Random(seed))
        assert low <= value <= low + width


# =============================================================================
# WALK INVARIANTS
# =============================================================================


class TestWalkInvariants:
    """Every successful walk produces an accepted string."""

    @given(name=automaton_names, seed=seeds)
    @settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
    def test_unbounded_strings_accepted(self, name: str, seed: int) -> None:
        automaton = AUTOMATA[name]()
        walker = RandomWalker(automaton, random.Random(seed))
        for _ in range(5):
            assert accepts(automaton, walker.generate())

    @given(
        name=automaton_names,
        seed=seeds,
        min_length=st.integers(min_value=0, max_value=12),
        extra=st.integers(min_value=0, max_value=12),
    )
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_bounded_strings_accepted_and_in_range(
        self, name: str, seed: int, min_length: int, extra: int
    ) -> None:
        automaton = AUTOMATA[name]()
        max_length = min_length + extra
        walker = RandomWalker(automaton, random.Random(seed))
        try:
            value = walker.generate(min_length, max_length)
        except InsufficientLengthError as e:
            assert e.context.walk_length < min_length
            assert e.recoverable
            return
        except MaxLengthExceededError as e:
            assert e.context.walk_length == max_length
            assert not accepts(automaton, e.context.partial)
            return

        assert min_length <= len(value) <= max_length
        assert accepts(automaton, value)

    @given(seed=seeds, length=st.integers(min_value=0, max_value=10))
    @settings(max_examples=60)
    def test_degenerate_range(self, seed: int, length: int) -> None:
        automaton = build_ab_repeat_c()
        walker = RandomWalker(automaton, random.Random(seed))
        try:
            value = walker.generate(length, length)
        except WalkError:
            return
        assert len(value) == length
        assert accepts(automaton, value)


# =============================================================================
# DETERMINISM INVARIANTS
# =============================================================================


class TestDeterminismInvariants:
    """Two walkers with the same seed agree on every result."""

    @given(name=automaton_names, seed=seeds)
    @settings(max_examples=40)
    def test_same_seed_same_strings(self, name: str, seed: int) -> None:
        first = RandomWalker.from_seed(AUTOMATA[name](), seed)
        second = RandomWalker.from_seed(AUTOMATA[name](), seed)
        assert [first.generate() for _ in range(10)] == [second.generate() for _ in range(10)]

    @given(name=automaton_names, seed=seeds)
    @settings(max_examples=40)
    def test_same_seed_same_bounded_outcomes(self, name: str, seed: int) -> None:
        def run(walker: RandomWalker) -> list[str]:
            results = []
            for _ in range(10):
                try:
                    results.append(walker.generate(3, 9))
                except WalkError as e:
                    results.append(f"{e.error_code.value}:{e.context.partial}")
            return results

        first = RandomWalker.from_seed(AUTOMATA[name](), seed)
        second = RandomWalker.from_seed(AUTOMATA[name](), seed)
        assert run(first) == run(second)
