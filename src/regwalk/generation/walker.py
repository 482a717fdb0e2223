"""RandomWalker - generates strings by random walks over an automaton.

A walk starts at the initial state and repeatedly picks an outgoing
transition and a character from its range, uniformly at random. Every
string produced is accepted by the automaton by construction, which
makes the walker the inverse of a matcher: useful for producing valid
test data for a pattern without re-implementing the pattern.

Example::

    walker = RandomWalker.from_seed(automaton, 42)
    walker.generate()        # any accepted string
    walker.generate(5, 7)    # accepted string of length 5..7, or WalkError
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from regwalk.automaton.protocols import AutomatonModel, StateView, TransitionView
from regwalk.errors import (
    ErrorContext,
    InsufficientLengthError,
    InvalidLengthRangeError,
    MaxLengthExceededError,
)
from regwalk.generation.sampler import RandomSource, sample

logger = logging.getLogger(__name__)


class RandomWalker:
    """Generates strings accepted by one automaton.

    The walker holds the automaton (read-only) and a replaceable random
    source. Each :meth:`generate` call is an independent walk; nothing
    but the random source's state carries over between calls. One
    walker must not be driven by several threads at once.

    Args:
        automaton: The automaton to walk. Its states must return their
            transitions in a stable order for walks to be reproducible.
        random_source: Randomizer for every decision. A fresh
            ``random.Random()`` is created when omitted.
    """

    def __init__(
        self,
        automaton: AutomatonModel,
        random_source: RandomSource | None = None,
    ) -> None:
        self._automaton = automaton
        self._random = random_source if random_source is not None else random.Random()

    @classmethod
    def from_seed(cls, automaton: AutomatonModel, seed: int | None) -> RandomWalker:
        """Create a walker whose draws come from ``random.Random(seed)``."""
        return cls(automaton, random.Random(seed))

    @property
    def automaton(self) -> AutomatonModel:
        return self._automaton

    @property
    def random_source(self) -> RandomSource:
        """The randomizer used by subsequent walks."""
        return self._random

    @random_source.setter
    def random_source(self, random_source: RandomSource) -> None:
        self._random = random_source

    def get_random_source(self) -> RandomSource:
        return self._random

    def set_random_source(self, random_source: RandomSource) -> None:
        """Swap the randomizer, keeping the automaton."""
        self._random = random_source

    def generate(self, min_length: int | None = None, max_length: int | None = None) -> str:
        """Generate a random string accepted by the automaton.

        Without arguments the walk has no length target: at every accept
        state stopping is one more option alongside the outgoing
        transitions. On cyclic automata the walk ends with probability 1
        but has no upper bound.

        With ``min_length`` and ``max_length`` a target length is drawn
        from that range. The walk first heads for the target, preferring
        transitions into states that have transitions of their own, and
        then continues until it reaches an accept state or has emitted
        ``max_length`` characters. Callers may retry on failure; a new
        walk uses new draws.

        Args:
            min_length: Minimum length of the result (inclusive).
            max_length: Maximum length of the result (inclusive).

        Returns:
            A string accepted by the automaton.

        Raises:
            InvalidLengthRangeError: Only one bound given, or bounds not
                satisfying ``0 <= min_length <= max_length``.
            InsufficientLengthError: The walk got stuck before ``min_length``.
            MaxLengthExceededError: No accept state within ``max_length``.
        """
        if min_length is None and max_length is None:
            return self._generate_unbounded()

        self._check_bounds(min_length, max_length)
        assert min_length is not None and max_length is not None
        return self._generate_bounded(min_length, max_length)

    def _generate_unbounded(self) -> str:
        chars: list[str] = []
        state = self._automaton.initial_state()

        while True:
            transitions = state.ordered_transitions()
            if not transitions:
                assert state.is_accept, "Reached a non-accept state without transitions"
                break

            accept = state.is_accept
            # At accept states, option 0 means stop
            last_option = len(transitions) if accept else len(transitions) - 1
            option = sample(0, last_option, self._random)
            if accept and option == 0:
                break

            transition = transitions[option - 1 if accept else option]
            state = self._append_choice(chars, transition)

        return "".join(chars)

    def _generate_bounded(self, min_length: int, max_length: int) -> str:
        chars: list[str] = []
        walk_length = 0
        state = self._automaton.initial_state()

        # First get to the uniformly distributed target length
        target_length = sample(min_length, max_length, self._random)
        while walk_length < target_length:
            transitions: Sequence[TransitionView] = state.ordered_transitions()
            if not transitions:
                if walk_length >= min_length:
                    assert state.is_accept, "Reached a non-accept state without transitions"
                    return "".join(chars)
                logger.debug(
                    "Walk stuck at length %d before minimum %d (target %d)",
                    walk_length,
                    min_length,
                    target_length,
                )
                raise InsufficientLengthError(
                    message=(
                        "Reached accept state before minimum length "
                        f"(current = {walk_length} < min = {min_length})"
                    ),
                    context=self._context(chars, min_length, max_length, target_length),
                )

            # Prefer transitions that do not lead straight into a dead end
            non_final = [t for t in transitions if t.destination.ordered_transitions()]
            if non_final:
                transitions = non_final

            transition = transitions[sample(0, len(transitions) - 1, self._random)]
            state = self._append_choice(chars, transition)
            walk_length += 1

        # Now, get to an accept state
        while not state.is_accept and walk_length < max_length:
            transitions = state.ordered_transitions()
            if not transitions:
                assert state.is_accept, "Reached a non-accept state without transitions"
                return "".join(chars)

            transition = transitions[sample(0, len(transitions) - 1, self._random)]
            state = self._append_choice(chars, transition)
            walk_length += 1

        if state.is_accept:
            return "".join(chars)

        logger.debug(
            "Walk exceeded maximum length %d (target %d, min %d)",
            max_length,
            target_length,
            min_length,
        )
        raise MaxLengthExceededError(
            message=(
                f"Exceeded maximum walk length ({max_length}) before reaching an accept state: "
                f"target length was {target_length} (min length = {min_length})"
            ),
            context=self._context(chars, min_length, max_length, target_length),
        )

    def _append_choice(self, chars: list[str], transition: TransitionView) -> StateView:
        """Emit one character from the transition's range and follow it."""
        chars.append(chr(sample(transition.min, transition.max, self._random)))
        return transition.destination

    @staticmethod
    def _check_bounds(min_length: int | None, max_length: int | None) -> None:
        if min_length is None or max_length is None:
            raise InvalidLengthRangeError(
                message="Both min_length and max_length are required for bounded generation",
                field="min_length" if min_length is None else "max_length",
                value=None,
                context=ErrorContext(min_length=min_length, max_length=max_length),
            )
        if min_length < 0:
            raise InvalidLengthRangeError(
                message=f"min_length must be non-negative, got {min_length}",
                field="min_length",
                value=min_length,
                expected=">= 0",
                context=ErrorContext(min_length=min_length, max_length=max_length),
            )
        if min_length > max_length:
            raise InvalidLengthRangeError(
                message=f"min_length ({min_length}) exceeds max_length ({max_length})",
                field="max_length",
                value=max_length,
                expected=f">= {min_length}",
                context=ErrorContext(min_length=min_length, max_length=max_length),
            )

    @staticmethod
    def _context(
        chars: list[str], min_length: int, max_length: int, target_length: int
    ) -> ErrorContext:
        return ErrorContext(
            min_length=min_length,
            max_length=max_length,
            target_length=target_length,
            walk_length=len(chars),
            partial="".join(chars),
        )

    def __repr__(self) -> str:
        return f"RandomWalker(automaton={self._automaton!r})"


__all__ = ["RandomWalker"]
