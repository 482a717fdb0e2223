"""Pytest fixtures for regwalk tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from regwalk.automaton import Automaton
from tests.helpers import (
    AB_YAML,
    build_a_then_bs,
    build_ab,
    build_ab_repeat_c,
    build_dead_end,
    build_email_like,
    build_empty_string,
)


@pytest.fixture
def ab_automaton() -> Automaton:
    return build_ab()


@pytest.fixture
def ab_repeat_c_automaton() -> Automaton:
    return build_ab_repeat_c()


@pytest.fixture
def a_then_bs_automaton() -> Automaton:
    return build_a_then_bs()


@pytest.fixture
def email_automaton() -> Automaton:
    return build_email_like()


@pytest.fixture
def empty_string_automaton() -> Automaton:
    return build_empty_string()


@pytest.fixture
def dead_end_automaton() -> Automaton:
    return build_dead_end()


@pytest.fixture
def ab_definition_file(tmp_path: Path) -> Path:
    path = tmp_path / "ab.yaml"
    path.write_text(AB_YAML)
    return path


@pytest.fixture
def clean_regwalk_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep REGWALK_* variables from the outer environment out of tests."""
    for key in (
        "REGWALK_SEED",
        "REGWALK_MIN_LENGTH",
        "REGWALK_MAX_LENGTH",
        "REGWALK_COUNT",
        "REGWALK_MAX_ATTEMPTS",
        "REGWALK_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
