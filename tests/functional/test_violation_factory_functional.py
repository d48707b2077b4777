"""Functional tests for synthesized violation construction."""

from __future__ import annotations

import logging

from formvalidator import FormConstraint, FormNode
from formvalidator.config.error_mapping import NO_SUCH_FIELD_ERROR, NOT_SYNCHRONIZED_ERROR
from formvalidator.logic.errors import TransformationFailedError
from formvalidator.logic.violation_factory import (
    render_extra_fields,
    render_value,
    violation_extra_fields,
    violation_not_synchronized,
)


def test_render_extra_fields():
    assert render_extra_fields(["foo"]) == '"foo"'
    assert render_extra_fields(["foo", "baz", "quux"]) == '"foo", "baz", "quux"'


def test_render_value():
    assert render_value("foo") == "foo"
    assert render_value(12) == "12"
    assert render_value(b"abc") == "abc"
    assert render_value(None) == ""
    assert render_value(["a"]) == "list"


def test_render_value_uses_python_text_for_scalars():
    assert render_value(True) == "True"
    assert render_value(False) == "False"
    assert render_value(1.5) == "1.5"


def test_not_synchronized_violation_fields():
    constraint = FormConstraint()
    form = FormNode("name", invalid_message="invalid {{ value }}")
    failure = TransformationFailedError()
    form.record_transformation_failure(failure, "foo")

    violation = violation_not_synchronized(form, constraint)

    assert violation.message_template == "invalid {{ value }}"
    assert violation.parameters == {"{{ value }}": "foo"}
    assert violation.code == NOT_SYNCHRONIZED_ERROR
    assert violation.cause is failure
    assert violation.constraint is constraint


def test_extra_fields_violation_fields(caplog):
    constraint = FormConstraint()
    form = FormNode("parent", compound=True, extra_fields_message="Extra!")
    form.record_extra_data({"foo": "bar"})

    with caplog.at_level(logging.INFO, logger="formvalidator"):
        violation = violation_extra_fields(form, constraint)

    assert violation.code == NO_SUCH_FIELD_ERROR
    assert violation.cause is None
    assert violation.invalid_value == {"foo": "bar"}
    assert any(getattr(r, "code", None) == NO_SUCH_FIELD_ERROR for r in caplog.records)


def test_recording_port_satisfies_port_protocol():
    from formvalidator import ConstraintValidationPort, RecordingPort

    assert isinstance(RecordingPort(), ConstraintValidationPort)


def test_recording_port_forwards_to_delegate():
    from formvalidator import RecordingPort, StaticGroups

    inner = RecordingPort()
    outer = RecordingPort(delegate=inner)
    groups = StaticGroups.of("Default")
    data = object()

    outer.validate_implicit(data, groups)
    outer.validate_explicit(data, "constraint", "Default")

    assert inner.calls == outer.calls
    assert outer.get_calls() == [("implicit", data, groups), ("explicit", data, "constraint", "Default")]
    assert outer.calls == []
