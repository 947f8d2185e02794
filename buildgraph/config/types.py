from dataclasses import dataclass, field


@dataclass
class TaskConfig:
    id: str
    command: str | None
    deps: list[str]
    env: dict[str, str] = field(default_factory=dict)
    working_dir: str | None = None
    description: str | None = None


@dataclass
class ProjectConfig:
    tasks: dict[str, TaskConfig]

    def __iter__(self):
        yield from self.tasks.values()

    def __len__(self):
        return len(self.tasks)

    def has_task(self, id: str) -> bool:
        return id in self.tasks

    def get_task(self, id: str) -> TaskConfig:
        if not self.has_task(id):
            raise KeyError(id)

        return self.tasks[id]

    def tasks_ids(self) -> list[str]:
        return list(self.tasks)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
