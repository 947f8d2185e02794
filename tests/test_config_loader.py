from __future__ import annotations

import json
from pathlib import Path

import pytest

from buildgraph.config import build_registry
from buildgraph.config.loader import load_project
from buildgraph.config.types import ConfigError, UnsupportedConfigFormatError


# -------------------------
# Helpers
# -------------------------


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


# -------------------------
# Basic file/path errors
# -------------------------


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_project(tmp_path / "missing.yaml")


def test_path_is_dir_raises_config_error(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    with pytest.raises(ConfigError):
        load_project(d)


def test_unsupported_extension_raises_unsupported_format(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.txt", "tasks: {}")
    with pytest.raises(UnsupportedConfigFormatError):
        load_project(p)


# -------------------------
# Parse errors are wrapped
# -------------------------


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "tasks: [\n"),
        ("config.toml", "tasks = {"),
        ("config.json", '{"tasks": '),
    ],
)
def test_invalid_syntax_is_wrapped_as_config_error(
    tmp_path: Path, name: str, content: str
) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError) as e:
        load_project(p)
    assert e.value.__cause__ is not None


# -------------------------
# Top-level shape validation
# -------------------------


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "[]\n"),
        (".yaml", "null\n"),
        (".toml", 'tasks = "nope"\n'),
        (".json", "[]"),
        (".json", "null"),
    ],
)
def test_top_level_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_project(p)


def test_missing_tasks_key_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "not_tasks: {}\n")
    with pytest.raises(ConfigError):
        load_project(p)


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "tasks: []\n"),
        (".yaml", "tasks: null\n"),
        (".json", '{"tasks": []}'),
        (".toml", "tasks = 123\n"),
    ],
)
def test_tasks_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_project(p)


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "tasks: {}\n"),
        (".json", '{"tasks": {}}'),
        (".toml", "[tasks]\n"),
    ],
)
def test_tasks_empty_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_project(p)


# -------------------------
# Task id validation
# -------------------------


def test_task_id_not_string_yaml_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "tasks:\n  1:\n    command: echo hi\n")
    with pytest.raises(ConfigError):
        load_project(p)


def test_task_id_empty_after_strip_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", 'tasks:\n  "   ":\n    command: echo hi\n')
    with pytest.raises(ConfigError):
        load_project(p)


def test_duplicate_task_id_after_normalization_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n"
        "  build:\n"
        "    command: echo 1\n"
        '  " build ":\n'
        "    command: echo 2\n",
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_tasks_keep_declaration_order(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  zeta: {}\n  alpha: {}\n  mid: {}\n",
    )
    assert load_project(p).tasks_ids() == ["zeta", "alpha", "mid"]


# -------------------------
# Task fields
# -------------------------


def test_task_fields_not_mapping_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "tasks:\n  build: []\n")
    with pytest.raises(ConfigError):
        load_project(p)


def test_unknown_task_field_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  build:\n    command: echo hi\n    nope: 1\n",
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_bare_key_is_a_grouping_task(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "tasks:\n  default:\n")
    task = load_project(p).get_task("default")
    assert task.command is None
    assert task.deps == []


def test_missing_command_is_a_grouping_task(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  all:\n    deps: [a]\n  a:\n    command: echo a\n",
    )
    proj = load_project(p)
    assert proj.tasks["all"].command is None
    assert proj.tasks["a"].command == "echo a"


@pytest.mark.parametrize("field", ["command", "working_dir", "description"])
def test_string_field_not_string_raises(tmp_path: Path, field: str) -> None:
    p = write_text(tmp_path / "config.yaml", f"tasks:\n  build:\n    {field}: 123\n")
    with pytest.raises(ConfigError):
        load_project(p)


@pytest.mark.parametrize("field", ["command", "working_dir", "description"])
def test_string_field_empty_after_strip_raises(tmp_path: Path, field: str) -> None:
    p = write_text(tmp_path / "config.yaml", f'tasks:\n  build:\n    {field}: "   "\n')
    with pytest.raises(ConfigError):
        load_project(p)


# -------------------------
# deps validation
# -------------------------


def test_deps_not_list_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  build:\n    command: echo hi\n    deps: no\n",
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_deps_contains_non_string_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  build:\n    command: echo hi\n    deps: [1]\n",
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_deps_contains_empty_string_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        'tasks:\n  build:\n    command: echo hi\n    deps: ["   "]\n',
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_deps_self_dependency_raises(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  build:\n    command: echo hi\n    deps: [build]\n",
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_unknown_dependency_and_wildcards_are_accepted(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n" "  a:\n" "    command: echo a\n" '    deps: [later, "*:js"]\n',
    )
    proj = load_project(p)
    assert proj.tasks["a"].deps == ["later", "*:js"]


def test_deps_keep_order_and_repeats(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n"
        "  a:\n"
        '    deps: [c, " b ", c]\n'
        "  b: {}\n"
        "  c: {}\n",
    )
    proj = load_project(p)
    assert proj.tasks["a"].deps == ["c", "b", "c"]


# -------------------------
# env validation
# -------------------------


@pytest.mark.parametrize(
    "env_yaml",
    [
        "    env: []\n",
        "    env:\n      1: x\n",
        '    env:\n      "   ": x\n',
        "    env:\n      KEY: 1\n",
    ],
)
def test_invalid_env_raises(tmp_path: Path, env_yaml: str) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n  a:\n    command: echo a\n" + env_yaml,
    )
    with pytest.raises(ConfigError):
        load_project(p)


def test_env_key_is_stripped_value_preserved(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        'tasks:\n  a:\n    command: echo a\n    env:\n      " KEY ": "  v  "\n',
    )
    proj = load_project(p)
    assert proj.tasks["a"].env == {"KEY": "  v  "}


# -------------------------
# Happy paths (all formats)
# -------------------------


def test_valid_yaml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n"
        "  build:\n"
        "    command: echo build\n"
        "    description: Build everything\n"
        "    deps: [test]\n"
        "    env:\n"
        "      KEY: value\n"
        "  test:\n"
        "    command: echo test\n",
    )
    proj = load_project(p)
    assert proj.tasks_ids() == ["build", "test"]
    assert proj.tasks["build"].deps == ["test"]
    assert proj.tasks["build"].env == {"KEY": "value"}
    assert proj.tasks["build"].description == "Build everything"


def test_valid_json_loads(tmp_path: Path) -> None:
    obj = {
        "tasks": {
            "a": {"command": "echo a"},
            "b": {"command": "echo b", "deps": ["a"]},
        }
    }
    p = write_json(tmp_path / "config.json", obj)
    proj = load_project(p)
    assert proj.tasks_ids() == ["a", "b"]
    assert proj.tasks["b"].deps == ["a"]


def test_valid_toml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.toml",
        '[tasks."build:js"]\n'
        'command = "echo js"\n'
        "\n"
        "[tasks.default]\n"
        'deps = ["*:js"]\n',
    )
    proj = load_project(p)
    assert proj.tasks_ids() == ["build:js", "default"]
    assert proj.tasks["default"].deps == ["*:js"]


# -------------------------
# Registry building
# -------------------------


def test_build_registry_attaches_actions_to_commands(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        "tasks:\n"
        "  compile:\n"
        "    command: echo compile\n"
        "  default:\n"
        "    deps: [compile, compile]\n",
    )
    registry = build_registry(load_project(p))

    assert registry.list_names() == ["compile", "default"]
    assert registry.get("compile").action is not None
    assert registry.get("default").action is None
    assert registry.get("default").deps == ("compile", "compile")
