import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from .types import ConfigError, ProjectConfig, TaskConfig, UnsupportedConfigFormatError

LOGGER = logging.getLogger(__name__)

_TASK_FIELDS = {"command", "deps", "env", "working_dir", "description"}


def load_project(path: str | Path) -> ProjectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    project = _build_project_config(raw_file)
    LOGGER.debug("Loaded %d task(s) from %s", len(project), pure_path)
    return project


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Unsupported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    parser: Callable[[str], Any]
    match fmt:
        case "yaml":
            parser, errors = yaml.safe_load, yaml.YAMLError
        case "toml":
            parser, errors = tomllib.loads, tomllib.TOMLDecodeError
        case "json":
            parser, errors = json.loads, json.JSONDecodeError
        case _:
            raise AssertionError("Unreachable")

    try:
        raw_file = parser(path.read_text(encoding="utf-8"))
    except errors as exc:
        raise ConfigError(f"{path}: invalid {fmt.upper()}") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_project_config(raw: Mapping[str, Any]) -> ProjectConfig:
    tasks: dict[str, TaskConfig] = {}

    if "tasks" not in raw:
        raise ConfigError("Missing 'tasks' field")

    if not isinstance(raw["tasks"], Mapping):
        raise ConfigError(f"'tasks' must be a mapping, got {type(raw['tasks'])}")

    if len(raw["tasks"]) < 1:
        raise ConfigError("There must be at least one task in the config file")

    for task_id, fields in raw["tasks"].items():
        if not isinstance(task_id, str):
            raise ConfigError(f"Task id must be a string, got {type(task_id)}")

        task_id_norm = task_id.strip()

        if len(task_id_norm) < 1:
            raise ConfigError("A task id can't be empty")

        if task_id_norm in tasks:
            raise ConfigError(f"Duplicate task id after normalization: {task_id_norm}")

        # A bare key declares a grouping task with no command and no deps.
        if fields is None:
            fields = {}

        if not isinstance(fields, Mapping):
            raise ConfigError(f"{task_id_norm} must be a mapping")

        tasks[task_id_norm] = _build_task_config(task_id_norm, fields)

    return ProjectConfig(tasks=tasks)


def _build_task_config(task_id: str, fields: Mapping[str, Any]) -> TaskConfig:
    for field in fields.keys():
        if field not in _TASK_FIELDS:
            raise ConfigError(f"{task_id}: Can't process: {field}")

    command = _optional_string(task_id, fields, "command")
    working_dir = _optional_string(task_id, fields, "working_dir")
    description = _optional_string(task_id, fields, "description")
    deps = _build_deps(task_id, fields.get("deps", []))
    env = _build_env(task_id, fields.get("env", {}))

    return TaskConfig(task_id, command, deps, env, working_dir, description)


def _optional_string(task_id: str, fields: Mapping[str, Any], key: str) -> str | None:
    if key not in fields:
        return None

    value = fields[key]
    if not isinstance(value, str):
        raise ConfigError(f"{task_id}: '{key}' should be a string")

    if len(value.strip()) < 1:
        raise ConfigError(f"{task_id}: '{key}' is empty, provide a value or remove it")

    return value.strip()


def _build_deps(task_id: str, raw_deps: Any) -> list[str]:
    if not isinstance(raw_deps, list):
        raise ConfigError(f"{task_id}: Dependencies should be in a list.")

    deps = []
    for item in raw_deps:
        if not isinstance(item, str):
            raise ConfigError(f"{task_id}: {item} should be a string in the dependency list")

        dep = item.strip()

        if len(dep) < 1:
            raise ConfigError(f"{task_id}: A dependency is empty")

        if dep == task_id:
            raise ConfigError(f"{task_id}: A task cannot be self dependent")

        # Repeats are kept, the runner executes each task once anyway.
        deps.append(dep)

    return deps


def _build_env(task_id: str, raw_env: Any) -> dict[str, str]:
    if not isinstance(raw_env, Mapping):
        raise ConfigError(f"{task_id}: Env should be a mapping")

    env = {}
    for key, item in raw_env.items():
        if not isinstance(key, str):
            raise ConfigError(f"{task_id}: {key} should be a string")

        if len(key.strip()) < 1:
            raise ConfigError(f"{task_id}: A key can't be empty")

        if not isinstance(item, str):
            raise ConfigError(f"{task_id}: {item} should be a string")

        env[key.strip()] = item

    return env
