"""Tests for choice normalization, separators and the Choices collection."""

import dataclasses

import pytest

from inquisitor.errors import ConfigurationError, InvalidChoiceError
from inquisitor.model.choice import (
    DEFAULT_SEPARATOR_LINE,
    Choice,
    Choices,
    Separator,
    exclude,
    normalize_choice,
)


# ---------------------------------------------------------------------------
# normalize_choice
# ---------------------------------------------------------------------------


class TestNormalizeChoice:
    def test_string_becomes_choice_with_same_name_and_value(self):
        choice = normalize_choice("python")
        assert isinstance(choice, Choice)
        assert choice.name == "python"
        assert choice.value == "python"
        assert choice.short == "python"

    def test_mapping_with_only_name_derives_value(self):
        choice = normalize_choice({"name": "Python"})
        assert choice.value == "Python"

    def test_mapping_with_only_value_derives_name(self):
        choice = normalize_choice({"value": "py"})
        assert choice.name == "py"
        assert choice.value == "py"

    def test_explicit_none_value_is_kept(self):
        choice = normalize_choice({"name": "Nothing", "value": None})
        assert choice.name == "Nothing"
        assert choice.value is None

    def test_choice_without_value_defaults_to_name(self):
        assert Choice(name="x").value == "x"
        assert Choice(name="x", value=None).value is None

    def test_mapping_keeps_distinct_name_and_value(self):
        choice = normalize_choice({"name": "Python 3", "value": 3, "short": "py3"})
        assert choice.name == "Python 3"
        assert choice.value == 3
        assert choice.short == "py3"

    def test_mapping_without_name_or_value_is_rejected(self):
        with pytest.raises(InvalidChoiceError) as exc_info:
            normalize_choice({"checked": True})
        assert exc_info.value.entry == {"checked": True}

    def test_invalid_choice_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            normalize_choice(42)

    def test_separator_passes_through(self):
        sep = Separator("---")
        assert normalize_choice(sep) is sep

    def test_separator_tagged_mapping(self):
        sep = normalize_choice({"type": "separator", "line": "== more =="})
        assert isinstance(sep, Separator)
        assert str(sep) == "== more =="

    def test_separator_tagged_mapping_without_line_uses_default(self):
        sep = normalize_choice({"type": "separator"})
        assert str(sep) == DEFAULT_SEPARATOR_LINE

    def test_checked_and_disabled_flags(self):
        choice = normalize_choice({"name": "a", "checked": True, "disabled": "not yet"})
        assert choice.checked is True
        assert choice.disabled == "not yet"
        assert choice.is_disabled

    def test_disabled_derived_from_answers(self):
        raw = {"name": "deploy", "disabled": lambda answers: not answers.get("ready")}
        assert normalize_choice(raw, {"ready": True}).is_disabled is False
        assert normalize_choice(raw, {"ready": False}).is_disabled is True

    def test_unknown_keys_go_to_extra(self):
        choice = normalize_choice({"name": "a", "color": "red"})
        assert choice.extra == {"color": "red"}

    def test_normalization_is_deterministic(self):
        raw = {"name": "x", "value": 1}
        assert normalize_choice(raw) == normalize_choice(raw)

    def test_choice_is_frozen(self):
        choice = normalize_choice("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            choice.name = "b"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Separator / exclude
# ---------------------------------------------------------------------------


class TestSeparator:
    def test_default_line(self):
        assert str(Separator()) == DEFAULT_SEPARATOR_LINE

    def test_custom_line(self):
        assert str(Separator("***")) == "***"

    def test_exclude_rejects_separators(self):
        assert exclude(Separator()) is False
        assert Separator.exclude(Separator("x")) is False
        assert exclude({"type": "separator"}) is False

    def test_exclude_accepts_choices(self):
        assert exclude(normalize_choice("a")) is True
        assert exclude("a") is True


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------


def _choices() -> Choices:
    return Choices([
        "a",
        Separator(),
        {"name": "B", "value": "b"},
        {"name": "c", "disabled": True},
        "d",
    ])


class TestChoices:
    def test_len_counts_every_item(self):
        assert len(_choices()) == 5

    def test_real_choices_skip_separators_and_disabled(self):
        assert [c.value for c in _choices().real_choices] == ["a", "b", "d"]

    def test_get_choice_uses_selectable_index(self):
        assert _choices().get_choice(1).value == "b"

    def test_get_uses_raw_index(self):
        assert isinstance(_choices().get(1), Separator)

    def test_pluck(self):
        assert _choices().pluck("name") == ["a", "B", "d"]

    def test_where(self):
        assert [c.value for c in _choices().where(name="B")] == ["b"]

    def test_where_with_predicate(self):
        matches = _choices().where(lambda c: c.value in ("a", "d"))
        assert [c.value for c in matches] == ["a", "d"]

    def test_index_of(self):
        choices = _choices()
        assert choices.index_of(choices.get(4)) == 4
