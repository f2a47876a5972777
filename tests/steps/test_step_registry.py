# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_step_registry.py
#   file_relpath : tests/steps/test_step_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step type registry: lookup, construction and validation."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from paddedcell.config.model import StepSpec
from paddedcell.core.errors import ConfigError
from paddedcell.steps import (
    CommandStep,
    FunctionStep,
    IndentStep,
    IndentStyle,
    ReplaceStep,
    StepRegistry,
)


@pytest.fixture
def temp_step_type() -> Iterator[str]:
    """Register a throwaway step type and remove it afterwards."""
    name = "test_upper"
    StepRegistry.register(
        name,
        lambda _opts: FunctionStep(name, str.upper),
        description="Upper-case everything.",
    )
    yield name
    StepRegistry.unregister(name)


def test_builtin_types_are_registered() -> None:
    names: tuple[str, ...] = StepRegistry.names()
    for expected in (
        "command",
        "indent",
        "json",
        "replace",
        "replace_regex",
        "trim_trailing_whitespace",
    ):
        assert expected in names
    assert list(names) == sorted(names)


def test_build_from_spec() -> None:
    step = StepRegistry.build(StepSpec.from_table({"type": "replace", "search": "a"}))
    assert step == ReplaceStep(search="a", replacement="")


def test_build_coerces_enum_options() -> None:
    step = StepRegistry.build(StepSpec(type_name="indent", options={"style": "tabs", "width": 2}))
    assert step == IndentStep(style=IndentStyle.TABS, width=2)


def test_build_turns_arrays_into_tuples() -> None:
    step = StepRegistry.build(StepSpec(type_name="command", options={"args": ["fmt", "-"]}))
    assert isinstance(step, CommandStep)
    assert step.args == ("fmt", "-")
    hash(step)


def test_unknown_type_lists_known_types() -> None:
    with pytest.raises(ConfigError) as exc_info:
        StepRegistry.build(StepSpec(type_name="nope"))
    assert "unknown step type 'nope'" in str(exc_info.value)
    assert "replace" in str(exc_info.value)


@pytest.mark.parametrize(
    "options",
    [
        {"bogus": 1},
        {"style": "diagonal"},
        {"width": 0},
    ],
)
def test_invalid_options_raise_config_error(options: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        StepRegistry.build(StepSpec(type_name="indent", options=options))


def test_register_and_unregister(temp_step_type: str) -> None:
    assert temp_step_type in StepRegistry.names()
    assert StepRegistry.build(StepSpec(type_name=temp_step_type)).apply("a") == "A"
    meta = {m.type_name: m for m in StepRegistry.iter_meta()}
    assert meta[temp_step_type].description == "Upper-case everything."


def test_unregister_unknown_returns_false() -> None:
    assert StepRegistry.unregister("never-registered") is False


def test_mapping_is_read_only() -> None:
    mapping = StepRegistry.as_mapping()
    with pytest.raises(TypeError):
        mapping["x"] = lambda _opts: ReplaceStep(search="x")  # type: ignore[index]
