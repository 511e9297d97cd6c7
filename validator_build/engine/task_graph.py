"""TaskGraph -- named build tasks with dependencies, run sequentially."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from validator_build.engine.context import BuildContext

logger = logging.getLogger("validator_build.engine")

TaskAction = Callable[[BuildContext], None]


@dataclass(frozen=True)
class Task:
    """A single named build step."""

    name: str
    description: str
    action: TaskAction
    depends: tuple[str, ...] = field(default_factory=tuple)


class TaskGraph:
    """Registry of tasks and their dependencies.

    Tasks run one at a time.  Each task runs at most once per :meth:`run`
    call, after all of its dependencies.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def task(
        self, name: str, description: str, depends: Iterable[str] = ()
    ) -> Callable[[TaskAction], TaskAction]:
        """Decorator registering ``action`` as task ``name``."""

        def decorator(action: TaskAction) -> TaskAction:
            self.add(Task(name, description, action, tuple(depends)))
            return action

        return decorator

    def add(self, task: Task) -> None:
        if task.name in self._tasks:
            raise ValueError(f"Task already registered: {task.name}")
        self._tasks[task.name] = task

    def get(self, name: str) -> Task:
        try:
            return self._tasks[name]
        except KeyError:
            known = ", ".join(sorted(self._tasks))
            raise KeyError(f"Unknown task {name!r}. Known tasks: {known}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)

    def resolve(self, names: Iterable[str]) -> list[Task]:
        """Order the requested tasks and their dependencies, leaves first.

        Raises:
            KeyError: If a task or dependency is not registered.
            ValueError: If the dependencies form a cycle.
        """
        ordered: list[Task] = []
        done: set[str] = set()
        visiting: list[str] = []

        def visit(name: str) -> None:
            if name in done:
                return
            if name in visiting:
                cycle = " -> ".join([*visiting[visiting.index(name):], name])
                raise ValueError(f"Task dependency cycle: {cycle}")
            task = self.get(name)
            visiting.append(name)
            for dep in task.depends:
                visit(dep)
            visiting.pop()
            done.add(name)
            ordered.append(task)

        for name in names:
            visit(name)
        return ordered

    def run(self, names: Iterable[str], ctx: BuildContext) -> list[str]:
        """Run the requested tasks and their dependencies.

        The first failing task aborts the run; its exception propagates.

        Returns:
            Names of the tasks that ran, in order.
        """
        plan = self.resolve(names)
        ran: list[str] = []
        for task in plan:
            logger.info("Running task %s -- %s", task.name, task.description)
            task.action(ctx)
            ran.append(task.name)
        logger.info("Finished: %s", ", ".join(ran))
        return ran
