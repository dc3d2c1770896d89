"""Tests for version and changelog derivation."""

import subprocess
from datetime import datetime, timedelta, timezone

import pytest

from errors import HistoryUnavailableError
from history.git import GitHistory, derive_version, parse_changes

LOG_OUTPUT = "Merge branch 'feature'\nFix crash on empty input\nInitial commit"


class FakeGit:
    """Canned git runner keyed on the subcommand."""

    def __init__(self, describe="v1.2.3\n", log=LOG_OUTPUT, fail=None):
        self.outputs = {"describe": describe, "log": log}
        self.fail = fail or {}
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        sub = "log" if "log" in args else args[0]
        if sub in self.fail:
            raise self.fail[sub]
        return self.outputs[sub]


def _clock():
    return datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc)


class TestDeriveVersion:
    """Tag-to-version normalization."""

    @pytest.mark.parametrize("tag,expected", [
        ("v1.2.3\n", "1.2.3"),
        ("V1.2.3\n", "1.2.3"),
        ("2.0\n", "2.0"),
        ("v0.9", "0.9"),
        ("v1.0\r\n", "1.0"),
    ])
    def test_strips_prefix_and_terminator(self, tag, expected):
        assert derive_version(tag) == expected

    def test_strips_exactly_one_prefix(self):
        assert derive_version("vv1.0\n") == "v1.0"

    @pytest.mark.parametrize("tag", ["", "\n", "v\n"])
    def test_empty_tag_is_unavailable(self, tag):
        with pytest.raises(HistoryUnavailableError):
            derive_version(tag)


class TestParseChanges:
    """One change entry per log line."""

    def test_order_preserved(self):
        assert parse_changes(LOG_OUTPUT) == [
            "Merge branch 'feature'",
            "Fix crash on empty input",
            "Initial commit",
        ]

    def test_duplicates_kept(self):
        assert parse_changes("Fix typo\nFix typo\n") == ["Fix typo", "Fix typo"]

    def test_empty_output(self):
        assert parse_changes("") == []


class TestGitHistory:
    """GitHistory with an injected runner."""

    def test_extract(self):
        git = FakeGit()
        history = GitHistory(run=git, clock=_clock).extract()
        assert history.version == "1.2.3"
        assert len(history.changes) == 3
        assert history.changes[0] == "Merge branch 'feature'"
        assert history.date == "Mon, 19 Oct 2026 10:00:00 +0000"

    def test_queries(self):
        git = FakeGit()
        GitHistory(run=git, clock=_clock).extract()
        describe, log = git.calls
        assert describe[:3] == ["describe", "--abbrev=0", "--tags"]
        assert "--match=v*" in describe
        assert "--match=V*" in describe
        assert log == ["--no-pager", "log", "--first-parent", "--pretty=format:%s"]

    def test_stable_across_runs(self):
        git = FakeGit()
        first = GitHistory(run=git, clock=_clock).extract()
        second = GitHistory(run=git, clock=_clock).extract()
        assert first == second

    def test_timestamp_keeps_offset(self):
        tz = timezone(timedelta(hours=2))
        history = GitHistory(run=FakeGit(), clock=lambda: datetime(2026, 1, 2, 3, 4, 5, tzinfo=tz))
        assert history.timestamp() == "Fri, 02 Jan 2026 03:04:05 +0200"

    def test_no_tag(self):
        error = subprocess.CalledProcessError(128, ["git", "describe"], stderr="fatal: No names found")
        history = GitHistory(run=FakeGit(fail={"describe": error}), clock=_clock)
        with pytest.raises(HistoryUnavailableError, match="No names found"):
            history.extract()

    def test_log_failure(self):
        error = subprocess.CalledProcessError(128, ["git", "log"], stderr="fatal: not a git repository")
        history = GitHistory(run=FakeGit(fail={"log": error}), clock=_clock)
        with pytest.raises(HistoryUnavailableError):
            history.changes()

    def test_git_not_installed(self):
        history = GitHistory(run=FakeGit(fail={"describe": FileNotFoundError("git")}), clock=_clock)
        with pytest.raises(HistoryUnavailableError, match="cannot run git"):
            history.latest_version()

    def test_default_runner_uses_cwd(self, monkeypatch):
        seen = {}

        def fake_run(cmd, **kwargs):
            seen["cmd"] = cmd
            seen["cwd"] = kwargs.get("cwd")
            return subprocess.CompletedProcess(cmd, 0, stdout="v3.1\n", stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert GitHistory(cwd="/some/checkout").latest_version() == "3.1"
        assert seen["cmd"][0] == "git"
        assert seen["cwd"] == "/some/checkout"
