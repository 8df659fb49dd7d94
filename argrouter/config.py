# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argrouter applications.

A YAML or TOML file describes the program and its commands; executors are
referenced by dotted import path:

    program: tool
    version: 2.1.0
    description: Example tool
    commands:
      - name: remote add
        description: Add a remote
        signature: "<name> <url>"
        executor: tasks.add_remote
        options:
          - aliases: ["-f", "--fetch"]
            help: Fetch after adding.
          - aliases: ["-t", "--track"]
            kind: keyed
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Literal

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argrouter.app import ArgRouter
from argrouter.command import CommandBuilder, CommandDescriptor
from argrouter.exceptions import ConfigError
from argrouter.logger import logger
from argrouter.messages import (
    DefaultMisusedOptionsMessageGenerator,
    UnrecognizedOptionsPrinting,
)
from argrouter.parser.option import OptionKind


def import_executor(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid executor path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        executor = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(executor):
        raise ConfigError(f"Executor '{dotted_path}' is not callable")
    return executor


class RawOption(BaseModel):
    """Option entry of a configured command."""

    aliases: list[str]
    kind: OptionKind = OptionKind.FLAG
    dest: str | None = None
    help: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, value: Any) -> OptionKind:
        if isinstance(value, OptionKind):
            return value
        return OptionKind(value)


class RawCommand(BaseModel):
    """Raw command model for Argrouter configuration."""

    name: str
    executor: str
    description: str = ""
    signature: str = ""
    options: list[RawOption] = Field(default_factory=list)
    option_aware: bool | None = None
    fail_on_unrecognized_options: bool = True
    shortcuts: list[str] = Field(default_factory=list)
    help_text: str = ""
    hidden: bool = False


class AppConfig(BaseModel):
    """Top-level application settings."""

    program: str | None = None
    version: str = "1.0"
    description: str = ""
    default_command: str | None = None
    help_command: bool = True
    version_command: bool = True
    unrecognized_options_printing: UnrecognizedOptionsPrinting = (
        UnrecognizedOptionsPrinting.ALL
    )
    log_mode: Literal["cli", "json"] | None = None
    log_file: str | None = None
    commands: list[RawCommand] = Field(default_factory=list)


def convert_commands(raw_commands: list[RawCommand]) -> list[CommandDescriptor]:
    commands = []
    for raw_command in raw_commands:
        builder = (
            CommandBuilder(raw_command.name)
            .describe(raw_command.description)
            .signature(raw_command.signature)
            .fail_on_unrecognized(raw_command.fail_on_unrecognized_options)
            .help_text(raw_command.help_text)
            .hidden(raw_command.hidden)
            .executes(import_executor(raw_command.executor))
        )
        if raw_command.shortcuts:
            builder.shortcut(*raw_command.shortcuts)
        if raw_command.option_aware is not None:
            builder.option_aware(raw_command.option_aware)
        for option in raw_command.options:
            if option.kind is OptionKind.KEYED:
                builder.keyed(*option.aliases, dest=option.dest, help=option.help)
            elif option.kind is OptionKind.FLAG:
                builder.flag(*option.aliases, dest=option.dest, help=option.help)
            else:
                raise ConfigError(
                    f"Command '{raw_command.name}' cannot declare a '{option.kind}' option"
                )
        commands.append(builder.build())
    return commands


def load_config(path: Path | str) -> AppConfig:
    """Read and validate a YAML or TOML config file."""
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    try:
        with path.open(encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file) or {}
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    try:
        return AppConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid config in {path}: {error}") from error


def build_app(config: AppConfig) -> ArgRouter:
    """Build an `ArgRouter` from validated settings."""
    app = ArgRouter(
        program=config.program,
        version=config.version,
        description=config.description,
        default_command=config.default_command,
        help_command=config.help_command,
        version_command=config.version_command,
        misuse_generator=DefaultMisusedOptionsMessageGenerator(
            config.unrecognized_options_printing
        ),
    )
    app.register_commands(convert_commands(config.commands))
    return app


def loader(path: Path | str) -> ArgRouter:
    """Build an `ArgRouter` with every command declared in a config file."""
    config = load_config(path)
    app = build_app(config)
    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return app
