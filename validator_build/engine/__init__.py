"""Build engine -- run context and task graph."""

from validator_build.engine.context import BuildContext
from validator_build.engine.task_graph import Task, TaskGraph

__all__ = ["BuildContext", "Task", "TaskGraph"]
