from buildgraph.executor import shell_action
from buildgraph.registry import TaskRegistry

from .types import ProjectConfig


def build_registry(project: ProjectConfig) -> TaskRegistry:
    registry = TaskRegistry()

    for task in project:
        action = None
        if task.command is not None:
            action = shell_action(
                task.command,
                component=task.id,
                env=task.env,
                working_dir=task.working_dir,
            )
        registry.register(task.id, task.deps, action)

    return registry
