"""Shared pytest fixtures for the form validator suites.

Every test runs from an empty temporary directory with FORMVALIDATOR_*
variables cleared so configuration always falls back to model defaults
unless a test sets its own overrides.
"""

from __future__ import annotations

import os

import pytest

from formvalidator import ExecutionContext, FormConstraint, FormGroupValidator, RecordingPort


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("FORMVALIDATOR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def port() -> RecordingPort:
    return RecordingPort()


@pytest.fixture
def context(port) -> ExecutionContext:
    return ExecutionContext(port)


@pytest.fixture
def validator(context) -> FormGroupValidator:
    return FormGroupValidator(context)


@pytest.fixture
def form_constraint() -> FormConstraint:
    return FormConstraint()
