import pytest

from argrouter import CommandDescriptor, CommandRegistry
from argrouter.exceptions import CommandAlreadyExistsError, RegistryFrozenError


def test_register_and_get():
    registry = CommandRegistry()
    command = CommandDescriptor(name="remote  add")
    registry.register_command(command)
    assert registry.get("remote add") is command
    assert registry.get(" remote   add ") is command
    assert "remote add" in registry
    assert len(registry) == 1
    assert list(registry) == [command]


def test_duplicate_name_rejected():
    registry = CommandRegistry([CommandDescriptor(name="build")])
    with pytest.raises(CommandAlreadyExistsError):
        registry.register_command(CommandDescriptor(name="build"))


def test_duplicate_shortcut_rejected():
    registry = CommandRegistry([CommandDescriptor(name="build", shortcuts=("-b",))])
    with pytest.raises(CommandAlreadyExistsError, match="-b"):
        registry.register_command(CommandDescriptor(name="bundle", shortcuts=("-b",)))


def test_reserved_name_and_shortcut_rejected():
    registry = CommandRegistry()
    registry.reserve("help", ("-h", "--help"))
    with pytest.raises(CommandAlreadyExistsError):
        registry.register_command(CommandDescriptor(name="help"))
    with pytest.raises(CommandAlreadyExistsError, match="reserved"):
        registry.register_command(CommandDescriptor(name="hide", shortcuts=("-h",)))
    assert "help" not in registry


def test_reserving_a_registered_name_fails():
    registry = CommandRegistry([CommandDescriptor(name="help")])
    with pytest.raises(CommandAlreadyExistsError):
        registry.reserve("help")


def test_frozen_registry_rejects_registration():
    registry = CommandRegistry()
    registry.freeze()
    assert registry.frozen
    with pytest.raises(RegistryFrozenError):
        registry.register_command(CommandDescriptor(name="late"))


def test_register_requires_descriptor():
    with pytest.raises(TypeError):
        CommandRegistry().register_command("build")  # type: ignore[arg-type]


def test_builder_registers():
    registry = CommandRegistry()
    descriptor = registry.command("deploy").signature("<env>").register()
    assert registry.get("deploy") is descriptor
    assert registry.commands == (descriptor,)
