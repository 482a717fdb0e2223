"""
Definition documents for automata produced by an external compiler.

A definition is a plain YAML or JSON document listing states with their
accept flags and outgoing character ranges:

.. code-block:: yaml

    initial: 0
    states:
      - id: 0
        transitions:
          - {min: "a", max: "z", to: 1}
      - id: 1
        accept: true

All models use Pydantic for validation and serialization; structural
problems surface as :class:`~regwalk.errors.AutomatonDefinitionError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from regwalk.automaton.model import MAX_CODE_POINT, Automaton, to_code_point
from regwalk.errors import AutomatonDefinitionError, ErrorContext

logger = logging.getLogger(__name__)


class TransitionDefinition(BaseModel):
    """
    One outgoing edge of a state.

    Attributes:
        min: Lowest accepted character, as a code point or 1-char string
        max: Highest accepted character; defaults to ``min``
        to: Destination state id
    """

    min: int = Field(..., description="Lowest code point of the range")
    max: Optional[int] = Field(default=None, description="Highest code point of the range")
    to: int = Field(..., description="Destination state id")

    @field_validator("min", "max", mode="before")
    @classmethod
    def validate_code_point(cls, v: Any) -> Any:
        """Convert one-character strings to code points."""
        if isinstance(v, str):
            v = to_code_point(v)
        if isinstance(v, int) and not 0 <= v <= MAX_CODE_POINT:
            raise ValueError(f"code point {v} outside 0..{MAX_CODE_POINT:#x}")
        return v

    @property
    def upper(self) -> int:
        return self.min if self.max is None else self.max


class StateDefinition(BaseModel):
    """
    One state and its outgoing edges.

    Attributes:
        id: State id, unique within the document
        accept: Whether a walk may stop here
        transitions: Outgoing edges in any order
    """

    id: int = Field(..., ge=0, description="State id")
    accept: bool = Field(default=False, description="Accept flag")
    transitions: List[TransitionDefinition] = Field(
        default_factory=list, description="Outgoing transitions"
    )


class AutomatonDefinition(BaseModel):
    """
    Serializable description of a whole automaton.

    Attributes:
        initial: Id of the initial state
        states: All states; ids need not be contiguous
    """

    initial: int = Field(..., description="Initial state id")
    states: List[StateDefinition] = Field(..., min_length=1, description="States")

    def to_automaton(self, source: Optional[str] = None) -> Automaton:
        """
        Build an arena-backed automaton from this definition.

        Declared ids are mapped onto arena slots in document order.

        Raises:
            AutomatonDefinitionError: On duplicate or unknown ids, inverted
                ranges, or non-accept states without transitions.
        """
        context = ErrorContext(source=source)
        slots: dict[int, int] = {}
        for index, state in enumerate(self.states):
            if state.id in slots:
                raise AutomatonDefinitionError(
                    message=f"Duplicate state id {state.id}",
                    field="states",
                    value=state.id,
                    context=context,
                )
            slots[state.id] = index

        if self.initial not in slots:
            raise AutomatonDefinitionError(
                message=f"Initial state {self.initial} is not declared",
                field="initial",
                value=self.initial,
                context=context,
            )

        automaton = Automaton()
        for state in self.states:
            automaton.add_state(accept=state.accept)
        automaton.set_initial(slots[self.initial])

        for state in self.states:
            for transition in state.transitions:
                if transition.to not in slots:
                    raise AutomatonDefinitionError(
                        message=f"State {state.id} has a transition to unknown state {transition.to}",
                        field="transitions.to",
                        value=transition.to,
                        context=context,
                    )
                if transition.upper < transition.min:
                    raise AutomatonDefinitionError(
                        message=(
                            f"State {state.id} has an empty range "
                            f"[{transition.min}, {transition.upper}]"
                        ),
                        field="transitions.max",
                        value=transition.upper,
                        expected=f">= {transition.min}",
                        context=context,
                    )
                automaton.add_transition(
                    slots[state.id], slots[transition.to], transition.min, transition.upper
                )

        dead_ends = [self.states[s.id].id for s in automaton.dead_ends()]
        if dead_ends:
            raise AutomatonDefinitionError(
                message=f"States {dead_ends} have no transitions and are not accept states",
                field="states",
                value=dead_ends,
                expected="accept: true",
                context=context,
            )

        logger.debug("Built %r from definition", automaton)
        return automaton


def parse_definition(data: Any, source: Optional[str] = None) -> AutomatonDefinition:
    """Validate raw mapping data as an :class:`AutomatonDefinition`."""
    try:
        return AutomatonDefinition.model_validate(data)
    except PydanticValidationError as e:
        raise AutomatonDefinitionError(
            message=f"Malformed automaton definition: {e.error_count()} error(s)",
            value=e.errors(include_url=False),
            context=ErrorContext(source=source),
            cause=e,
        ) from e


def load_definition(path: Union[str, Path]) -> AutomatonDefinition:
    """
    Read a definition from a YAML or JSON file.

    JSON is valid YAML, so one loader handles both.
    """
    path = Path(path)
    source = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise AutomatonDefinitionError(
            message=f"Cannot read automaton definition: {e}",
            context=ErrorContext(source=source),
            cause=e,
        ) from e

    return parse_definition(data, source=source)


def load_automaton(path: Union[str, Path]) -> Automaton:
    """Read a definition file and build the automaton it describes."""
    return load_definition(path).to_automaton(source=str(path))


__all__ = [
    "TransitionDefinition",
    "StateDefinition",
    "AutomatonDefinition",
    "parse_definition",
    "load_definition",
    "load_automaton",
]
