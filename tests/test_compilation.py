import pytest

from ninjascript_checker import compilation
from ninjascript_checker.compilation import CompilationSimulator
from ninjascript_checker.issue import Severity, Status
from ninjascript_checker.platform import NT8_TABLES

from samples import CLEAN_INDICATOR, STRATEGY, make_indicator


@pytest.fixture
def simulator():
    return CompilationSimulator(NT8_TABLES)


def test_clean_indicator_passes(simulator):
    result = simulator.run(CLEAN_INDICATOR)
    assert result.status == Status.PASS
    assert result.errors == []
    assert result.warnings == []


def test_strategy_does_not_need_is_overlay(simulator):
    assert simulator.run(STRATEGY).status == Status.PASS


def test_module_function_uses_default_tables():
    assert compilation.test_compilation(CLEAN_INDICATOR).status == Status.PASS


def test_empty_script_fails(simulator):
    result = simulator.run("")
    assert result.status == Status.FAIL
    messages = [m.message for m in result.errors]
    assert "No Indicator/Strategy class found" in messages
    assert "Missing namespace" in messages
    assert "using System; is missing" in messages


def test_two_classes(simulator):
    code = CLEAN_INDICATOR + "\npublic class Second : Indicator { }\n"
    result = simulator.run(code)
    assert any("Several" in m.message for m in result.errors)


def test_unknown_draw_method(simulator):
    code = CLEAN_INDICATOR.replace("Draw.ArrowUp", "Draw.ArowUp")
    result = simulator.run(code)
    assert result.status == Status.FAIL
    assert [m.message for m in result.errors] == ["Draw.ArowUp is not a known drawing method"]
    assert result.errors[0].line == code[:code.index("Draw.ArowUp")].count("\n") + 1


def test_unknown_state(simulator):
    code = CLEAN_INDICATOR.replace("State.DataLoaded", "State.Loaded")
    result = simulator.run(code)
    assert len(result.errors) == 1
    assert result.errors[0].message.startswith("State.Loaded is not a valid state")


def test_draw_call_in_comment_is_ignored(simulator):
    code = CLEAN_INDICATOR.replace(
        "if (CurrentBar < Period)", "// Draw.Nothing(this);\n            if (CurrentBar < Period)"
    )
    assert simulator.run(code).status == Status.PASS


def test_warnings_only(simulator):
    code = make_indicator(
        fields="        private Series<string> labels;",
        on_bar_update='            Print("bar " + CurrentBar); Print("again");\n',
    ).replace("IsOverlay = true;", "")
    result = simulator.run(code)
    assert result.status == Status.WARN
    assert result.errors == []
    assert all(m.severity == Severity.WARNING for m in result.warnings)
    messages = [m.message for m in result.warnings]
    assert len([m for m in messages if m.startswith("Print()")]) == 1
    assert any("Series<string>" in m for m in messages)
    assert any("IsOverlay" in m for m in messages)


def test_range_on_bool_property(simulator):
    code = make_indicator(properties=(
        "\n        [Range(0, 1)]"
        "\n        [Display(Name = \"Flag\", Order = 3)]"
        "\n        public bool Flag { get; set; }"
    ))
    result = simulator.run(code)
    assert result.status == Status.WARN
    assert [m.message for m in result.warnings] == ['[Range] used on bool property "Flag" has no effect']
