"""
Unit tests for valkit.validation.evaluate.
Tests: validate (fail-fast and validate-all), check, validate_report.
"""
import pytest

from valkit.validation.bundle import create_validations
from valkit.validation.errors import CombinedValidationError, ConditionError
from valkit.validation.evaluate import check, validate, validate_report


class TestEmptyBundle:
    @pytest.mark.parametrize("validate_all", [False, True])
    def test_no_conditions_is_success(self, empty_bundle, validate_all):
        empty_bundle.set_method(validate_all)
        assert validate(empty_bundle) is None


class TestFailFast:
    """validate_all=False: stop at the first failure."""

    def test_all_passing(self, passing):
        v = create_validations(str).add_condition(passing).add_condition(passing)
        assert validate(v) is None

    def test_returns_first_failure_unchanged(self, failing):
        first = failing("first")
        v = create_validations(str).add_condition(first).add_condition(failing("second"))
        error = validate(v)
        assert isinstance(error, ConditionError)
        assert not isinstance(error, CombinedValidationError)
        assert str(error) == "first"

    def test_later_conditions_never_invoked(self, counting, failing, passing):
        c1 = counting(failing("f1"))
        c2 = counting(passing)
        c3 = counting(failing("f3"))
        v = create_validations(str).add_condition(c1).add_condition(c2).add_condition(c3)

        assert str(validate(v)) == "f1"
        assert c1.calls == 1
        assert c2.calls == 0
        assert c3.calls == 0

    def test_conditions_before_failure_are_invoked(self, counting, failing, passing):
        c1 = counting(passing)
        c2 = counting(failing("f2"))
        c3 = counting(passing)
        v = create_validations(str).add_condition(c1).add_condition(c2).add_condition(c3)

        assert str(validate(v)) == "f2"
        assert (c1.calls, c2.calls, c3.calls) == (1, 1, 0)

    def test_two_failures_returns_only_first(self, two_failures_bundle):
        assert str(validate(two_failures_bundle)) == "A"


class TestValidateAll:
    """validate_all=True: run everything and combine failures."""

    def test_all_passing(self, passing):
        v = create_validations(str).set_method(True).add_condition(passing)
        assert validate(v) is None

    def test_single_failure_not_wrapped(self, passing):
        sentinel = ConditionError("only one")
        v = (
            create_validations(str)
            .set_method(True)
            .add_condition(passing)
            .add_condition(lambda _v: sentinel)
            .add_condition(passing)
        )
        assert validate(v) is sentinel

    def test_two_failures_joined(self, two_failures_bundle):
        two_failures_bundle.set_method(True)
        error = validate(two_failures_bundle)
        assert isinstance(error, CombinedValidationError)
        assert str(error) == "A; B"

    def test_combined_keeps_structured_errors(self, two_failures_bundle):
        two_failures_bundle.set_method(True)
        error = validate(two_failures_bundle)
        assert [str(e) for e in error.errors] == ["A", "B"]

    def test_every_condition_invoked(self, counting, failing, passing):
        calls = [counting(failing("x")), counting(passing), counting(failing("y"))]
        v = create_validations(str).set_method(True)
        for c in calls:
            v.add_condition(c)

        assert str(validate(v)) == "x; y"
        assert [c.calls for c in calls] == [1, 1, 1]

    def test_duplicate_messages_preserved(self, failing):
        same = failing("dup")
        v = create_validations(str).set_method(True).add_condition(same).add_condition(same)
        assert str(validate(v)) == "dup; dup"

    def test_encounter_order_preserved(self, failing):
        v = create_validations(str).set_method(True)
        for msg in ("c", "a", "b"):
            v.add_condition(failing(msg))
        assert str(validate(v)) == "c; a; b"

    def test_condition_receives_value(self):
        seen = []

        def record(value):
            seen.append(value)
            return None

        v = create_validations(str).set_method(True).add_condition(record).set_value("abc")
        validate(v)
        assert seen == ["abc"]


class TestConditionRaising:
    def test_exception_propagates(self):
        def boom(_value):
            raise RuntimeError("bug in condition")

        v = create_validations(str).add_condition(boom)
        with pytest.raises(RuntimeError, match="bug in condition"):
            validate(v)


class TestCheck:
    def test_passes_silently(self, passing):
        check(create_validations(str).add_condition(passing))

    def test_raises_failure(self, two_failures_bundle):
        two_failures_bundle.set_method(True)
        with pytest.raises(CombinedValidationError, match="^A; B$"):
            two_failures_bundle.check()


class TestValidateReport:
    def test_success(self, passing):
        report = validate_report(create_validations(str).add_condition(passing))
        assert report.valid is True
        assert report.errors == []
        assert bool(report) is True

    def test_fail_fast_reports_one(self, two_failures_bundle):
        report = two_failures_bundle.validate_report()
        assert report.valid is False
        assert report.errors == ["A"]
        assert report.validate_all is False

    def test_validate_all_reports_each(self, two_failures_bundle):
        two_failures_bundle.set_method(True)
        report = validate_report(two_failures_bundle)
        assert report.errors == ["A", "B"]
        assert report.validate_all is True
        assert not report
