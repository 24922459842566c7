"""Tests for the question model and field resolution."""

import dataclasses

import pytest

from inquisitor.errors import DerivationError, InvalidChoiceError
from inquisitor.model.answers import Answers
from inquisitor.model.choice import Separator
from inquisitor.model.question import DEFAULT_TYPE, Derived, Fixed, Question, dynamic


class TestDynamic:
    def test_literal_wraps_as_fixed(self):
        assert dynamic(3) == Fixed(3)

    def test_callable_wraps_as_derived(self):
        fn = lambda answers: 1  # noqa: E731
        assert dynamic(fn) == Derived(fn)

    def test_wrapped_values_pass_through(self):
        fixed = Fixed("x")
        assert dynamic(fixed) is fixed

    def test_fixed_ignores_answers(self):
        assert Fixed("x").resolve({"a": 1}) == "x"

    def test_derived_reads_answers(self):
        assert Derived(lambda a: a["n"] * 2).resolve({"n": 2}) == 4


class TestQuestion:
    def test_fields_are_wrapped_at_construction(self):
        q = Question(name="n", message="Name?", default=lambda a: "x")
        assert isinstance(q.message, Fixed)
        assert isinstance(q.default, Derived)
        assert isinstance(q.when, Fixed)
        assert q.choices is None

    def test_string_when_is_a_condition(self):
        q = Question(name="n", when="ok=true")
        assert isinstance(q.when, Derived)
        assert q.when.expression == "ok=true"
        assert q.is_runnable({"ok": True}) is True
        assert q.is_runnable({"ok": False}) is False

    def test_none_when_always_asks(self):
        q = Question.from_dict({"name": "n", "when": None})
        assert q.is_runnable(Answers()) is True

    def test_effective_type_defaults_to_input(self):
        assert Question(name="n").effective_type == DEFAULT_TYPE == "input"

    def test_is_frozen(self):
        q = Question(name="n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.name = "m"  # type: ignore[misc]

    def test_from_dict_collects_unknown_keys_in_metadata(self):
        q = Question.from_dict({"name": "pw", "type": "password", "mask": "#"})
        assert q.type == "password"
        assert q.metadata == {"mask": "#"}


class TestResolve:
    def test_message_defaults_to_name(self):
        resolved = Question(name="color").resolve(Answers())
        assert resolved.message == "color:"

    def test_derived_message_and_default(self):
        q = Question(
            name="greeting",
            message=lambda a: f"Hello {a['name']}?",
            default=lambda a: a["name"].upper(),
        )
        resolved = q.resolve(Answers({"name": "ada"}))
        assert resolved.message == "Hello ada?"
        assert resolved.default == "ADA"

    def test_derived_choices_are_normalized(self):
        q = Question(
            name="pick",
            type="list",
            choices=lambda a: [a["first"], Separator(), {"value": "other"}],
        )
        resolved = q.resolve(Answers({"first": "one"}))
        assert resolved.type == "list"
        assert resolved.choices is not None
        assert resolved.choices.pluck("value") == ["one", "other"]

    def test_malformed_choice_raises(self):
        q = Question(name="pick", type="list", choices=[{"checked": True}])
        with pytest.raises(InvalidChoiceError):
            q.resolve(Answers())

    def test_failing_when_raises_derivation_error(self):
        q = Question(name="n", when=lambda a: a["missing"])
        with pytest.raises(DerivationError) as exc_info:
            q.is_runnable(Answers())
        assert exc_info.value.field == "when"
        assert exc_info.value.question == "n"
        assert isinstance(exc_info.value.cause, KeyError)

    def test_failing_default_raises_derivation_error(self):
        q = Question(name="n", default=lambda a: 1 / 0)
        with pytest.raises(DerivationError) as exc_info:
            q.resolve(Answers())
        assert exc_info.value.field == "default"

    def test_failing_filter_raises_derivation_error(self):
        q = Question(name="age", filter=int)
        with pytest.raises(DerivationError) as exc_info:
            q.apply_filter("abc")
        assert exc_info.value.field == "filter"


    def test_failing_disabled_raises_derivation_error(self):
        def disabled(answers):
            raise RuntimeError("boom")

        q = Question(name="pick", type="list", choices=lambda a: ["a", {"name": "b", "disabled": disabled}])
        with pytest.raises(DerivationError) as exc_info:
            q.resolve(Answers())
        assert exc_info.value.field == "choices"
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_disabled_sees_answers(self):
        q = Question(
            name="pick",
            type="list",
            choices=["a", {"name": "b", "disabled": lambda a: a["locked"]}],
        )
        resolved = q.resolve(Answers({"locked": True}))
        assert resolved.choices.pluck("value") == ["a"]


class TestCheck:
    def test_no_validator_accepts(self):
        assert Question(name="n").check("") is True

    def test_true_accepts(self):
        assert Question(name="n", validate=lambda v: True).check("x") is True

    def test_false_rejects(self):
        assert Question(name="n", validate=lambda v: False).check("x") is False

    def test_message_rejects_with_message(self):
        q = Question(name="n", validate=lambda v: len(v) > 0 or "required")
        assert q.check("") == "required"
        assert q.check("a") is True

    def test_empty_message_counts_as_false(self):
        assert Question(name="n", validate=lambda v: "").check("x") is False
