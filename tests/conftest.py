"""Shared fixtures: a complete descriptor and a canned version history."""

import dataclasses

import pytest

from descriptor.models import PackageDescriptor, Person
from history.git import VersionHistory

FIXED_DATE = "Mon, 19 Oct 2026 10:00:00 +0000"


class FakeHistory:
    """Stands in for GitHistory; records how often it was consulted."""

    def __init__(self, version="1.0.0", changes=None, error=None):
        self.version = version
        self.changes = ["Second change", "Initial commit"] if changes is None else changes
        self.error = error
        self.calls = 0

    def extract(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return VersionHistory(version=self.version, date=FIXED_DATE, changes=list(self.changes))


@pytest.fixture
def descriptor():
    return PackageDescriptor(
        name="foo",
        description="bar",
        section="devel",
        priority="optional",
        architecture="any",
        maintainer=Person("Jane", "jane@x.org"),
        build_depends=["gcc"],
        depends=["libc6"],
    )


@pytest.fixture
def make_descriptor(descriptor):
    def _make(**overrides):
        return dataclasses.replace(descriptor, **overrides)
    return _make


@pytest.fixture
def fake_history():
    return FakeHistory()
