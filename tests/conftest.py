"""Pytest configuration and shared fixtures.

No sys.path hacks - tests should import from the installed wiremodel package.
"""

import os
from pathlib import Path

import httpx
import pytest

from wiremodel.kernel.command import Command
from wiremodel.kernel.description import ServiceDescription
from wiremodel.visitors.base import ResponseVisitor


class RecordingVisitor(ResponseVisitor):
    """Visitor that logs every lifecycle call into a shared list."""

    def __init__(self, location, calls, fail_on=None):
        self.location = location
        self.calls = calls
        self.fail_on = fail_on

    def before(self, command, result):
        self.calls.append(("before", self.location))
        if self.fail_on == "before":
            raise RuntimeError(f"{self.location} before failed")

    def visit(self, command, response, param, result):
        self.calls.append(("visit", self.location, param.name))
        if self.fail_on == "visit":
            raise RuntimeError(f"{self.location} visit failed")
        result[param.name] = f"{self.location}:{param.name}"

    def after(self, command):
        self.calls.append(("after", self.location))
        if self.fail_on == "after":
            raise RuntimeError(f"{self.location} after failed")


def make_description(model, operation_extra=None, name="Result"):
    """Build a description with one operation returning ``model``."""
    operation = {"responseClass": name}
    operation.update(operation_extra or {})
    return ServiceDescription(**{
        "name": "test",
        "operations": {"GetThing": operation},
        "models": {name: model},
    })


def make_command(description, options=None, response=None, operation="GetThing"):
    return Command(description.get_operation(operation), options=options, response=response)


def json_response(payload, status_code=200, headers=None):
    return httpx.Response(status_code, json=payload, headers=headers)


def xml_response(text, status_code=200, headers=None):
    all_headers = {"Content-Type": "application/xml"}
    all_headers.update(headers or {})
    return httpx.Response(status_code, content=text.encode("utf-8"), headers=all_headers)


@pytest.fixture
def calls():
    return []


@pytest.fixture(autouse=True)
def clean_wiremodel_env(monkeypatch):
    """Keep WIREMODEL_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("WIREMODEL_"):
            monkeypatch.delenv(key, raising=False)


def pytest_sessionfinish(session, exitstatus):
    """Best-effort cleanup for basetemp on Windows without patching pytest internals."""
    if os.name != "nt":
        return
    basetemp = getattr(session.config.option, "basetemp", None)
    if not basetemp:
        return
    basetemp_path = Path(basetemp)
    if not basetemp_path.exists():
        return
    try:
        import shutil
        shutil.rmtree(basetemp_path)
    except (PermissionError, OSError):
        import warnings
        warnings.warn(f"Could not remove basetemp: {basetemp_path}")
