"""Unit tests for the task graph and the validator's task wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from validator_build.engine import BuildContext, TaskGraph
from validator_build.pipeline import TASKS


def _graph(calls: list[str]) -> TaskGraph:
    graph = TaskGraph()

    def record(name: str):
        def action(ctx):
            calls.append(name)
        return action

    graph.task("a", "leaf a")(record("a"))
    graph.task("b", "leaf b")(record("b"))
    graph.task("c", "needs a and b", depends=("a", "b"))(record("c"))
    graph.task("d", "needs c", depends=("c",))(record("d"))
    return graph


class TestTaskGraph:
    def test_resolve_leaves_first(self):
        graph = _graph([])
        assert [t.name for t in graph.resolve(["d"])] == ["a", "b", "c", "d"]

    def test_shared_dependency_runs_once(self):
        calls: list[str] = []
        graph = _graph(calls)
        graph.run(["c", "d", "a"], MagicMock(spec=BuildContext))
        assert calls == ["a", "b", "c", "d"]

    def test_run_returns_names(self):
        graph = _graph([])
        assert graph.run(["b"], MagicMock(spec=BuildContext)) == ["b"]

    def test_unknown_task(self):
        graph = _graph([])
        with pytest.raises(KeyError, match="Unknown task 'zzz'"):
            graph.resolve(["zzz"])

    def test_duplicate_registration(self):
        graph = _graph([])
        with pytest.raises(ValueError, match="already registered"):
            graph.task("a", "again")(lambda ctx: None)

    def test_cycle(self):
        graph = TaskGraph()
        graph.task("x", "x", depends=("y",))(lambda ctx: None)
        graph.task("y", "y", depends=("x",))(lambda ctx: None)
        with pytest.raises(ValueError, match="cycle: x -> y -> x"):
            graph.resolve(["x"])

    def test_failure_aborts_dependents(self):
        calls: list[str] = []
        graph = TaskGraph()

        def boom(ctx):
            raise RuntimeError("boom")

        graph.task("fails", "fails")(boom)
        graph.task("after", "after", depends=("fails",))(lambda ctx: calls.append("after"))
        with pytest.raises(RuntimeError, match="boom"):
            graph.run(["after"], MagicMock(spec=BuildContext))
        assert calls == []


class TestPipelineTasks:
    def test_registered_tasks(self):
        assert {t.name for t in TASKS} == {
            "issues",
            "snapshot",
            "web",
            "npmDebug",
            "npmRelease",
            "npm",
            "npmPublish",
        }

    def test_npm_depends_on_issues_and_release(self):
        assert [t.name for t in TASKS.resolve(["npm"])] == ["issues", "npmRelease", "npm"]

    def test_publish_depends_on_npm(self):
        assert [t.name for t in TASKS.resolve(["npmPublish"])] == [
            "issues",
            "npmRelease",
            "npm",
            "npmPublish",
        ]

    def test_standalone_tasks(self):
        for name in ("issues", "snapshot", "web", "npmDebug", "npmRelease"):
            assert [t.name for t in TASKS.resolve([name])] == [name]
