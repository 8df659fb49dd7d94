import os
import sys
import textwrap

import pytest

from argrouter import ErrorKind, SignatureError
from argrouter.config import AppConfig, build_app, import_executor, load_config, loader
from argrouter.exceptions import ConfigError
from argrouter.messages import UnrecognizedOptionsPrinting
from argrouter.parser import OptionKind

TASKS = '''
def add_remote(arguments):
    return (arguments["name"], arguments["url"], arguments.flag("fetch"),
            arguments.option("track"))


def status(arguments):
    return "clean"

not_callable = 42
'''

YAML_CONFIG = """
program: tool
version: 2.1.0
description: Example tool
default_command: status
unrecognized_options_printing: unrecognized_only
commands:
  - name: remote add
    description: Add a remote
    signature: "<name> <url>"
    executor: cfg_tasks.add_remote
    options:
      - aliases: ["-f", "--fetch"]
        help: Fetch after adding.
      - aliases: ["-t", "--track"]
        kind: key
  - name: status
    executor: cfg_tasks.status
    shortcuts: ["-s"]
"""

TOML_CONFIG = """
program = "tool"
version = "3.0"

[[commands]]
name = "status"
executor = "cfg_tasks.status"
hidden = true
"""


@pytest.fixture
def tasks_module(tmp_path, monkeypatch):
    (tmp_path / "cfg_tasks.py").write_text(TASKS)
    monkeypatch.syspath_prepend(str(tmp_path))
    yield tmp_path
    sys.modules.pop("cfg_tasks", None)


def test_import_executor():
    assert import_executor("os.path.join") is os.path.join


@pytest.mark.parametrize(
    "path, message",
    [
        ("nodots", "Invalid executor path"),
        ("no_such_module_xyz.func", "Could not import"),
        ("os.path.no_such_function", "has no attribute"),
        ("os.sep", "is not callable"),
    ],
)
def test_import_executor_errors(path, message):
    with pytest.raises(ConfigError, match=message):
        import_executor(path)


def test_load_yaml_config(tasks_module):
    path = tasks_module / "argrouter.yaml"
    path.write_text(YAML_CONFIG)
    config = load_config(path)
    assert isinstance(config, AppConfig)
    assert config.program == "tool"
    assert config.unrecognized_options_printing is (
        UnrecognizedOptionsPrinting.UNRECOGNIZED_ONLY
    )
    assert [command.name for command in config.commands] == ["remote add", "status"]
    assert config.commands[0].options[1].kind is OptionKind.KEYED


def test_build_app_from_yaml(tasks_module, capsys):
    path = tasks_module / "argrouter.yaml"
    path.write_text(YAML_CONFIG)
    app = loader(path)
    assert app.program == "tool"
    assert app.version == "2.1.0"

    result = app.dispatch(["remote", "add", "origin", "git@host", "-f", "-t", "main"])
    assert result.value == ("origin", "git@host", True, "main")
    assert result.command.is_option_aware

    assert app.dispatch([]).value == "clean"
    assert app.dispatch(["-s"]).value == "clean"

    result = app.dispatch(["remote", "add", "a", "b", "--nope"])
    assert result.kind is ErrorKind.SILENT
    out = capsys.readouterr().out
    assert "Unrecognized option: --nope" in out
    assert "Usage:" not in out


def test_load_toml_config(tasks_module):
    path = tasks_module / "argrouter.toml"
    path.write_text(TOML_CONFIG)
    app = build_app(load_config(path))
    assert app.version == "3.0"
    assert app.registry.get("status").hidden
    assert app.dispatch(["status"]).value == "clean"


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "argrouter.ini"
    path.write_text("[x]")
    with pytest.raises(ConfigError, match="Unsupported config format"):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "argrouter.yaml"
    path.write_text("commands: [unclosed")
    with pytest.raises(ConfigError, match="Could not parse"):
        load_config(path)


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "argrouter.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_invalid_settings(tmp_path):
    path = tmp_path / "argrouter.yaml"
    path.write_text(
        textwrap.dedent(
            """
            log_mode: loud
            commands:
              - name: status
            """
        )
    )
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(path)


def test_bad_signature_in_config(tasks_module):
    path = tasks_module / "argrouter.yaml"
    path.write_text(
        textwrap.dedent(
            """
            commands:
              - name: status
                executor: cfg_tasks.status
                signature: "[<a>] <b>"
            """
        )
    )
    with pytest.raises(SignatureError) as exc_info:
        loader(path)
    assert exc_info.value.kind is ErrorKind.CONFIGURATION
