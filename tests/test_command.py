import asyncio

import pytest
from pydantic import ValidationError

from argrouter import (
    BoundArguments,
    CommandBuilder,
    CommandCapability,
    CommandDescriptor,
    CommandError,
    OptionKind,
    SignatureError,
)
from argrouter.exceptions import OptionConfigurationError
from argrouter.parser import OptionSpec


def test_descriptor_defaults():
    command = CommandDescriptor(name="build")
    assert command.capability is CommandCapability.PLAIN
    assert command.slots == ()
    assert len(command.option_registry) == 0
    assert command.fail_on_unrecognized_options
    assert not command.hidden


def test_name_whitespace_normalized():
    command = CommandDescriptor(name="  remote \t add ")
    assert command.name == "remote add"
    assert command.words == ("remote", "add")


@pytest.mark.parametrize("name", ["", "   ", "remote --add", "-x"])
def test_invalid_names(name):
    with pytest.raises(ValidationError):
        CommandDescriptor(name=name)


def test_shortcut_must_look_like_option():
    with pytest.raises(ValidationError):
        CommandDescriptor(name="build", shortcuts=("b",))


def test_signature_parsed_at_declaration():
    command = CommandDescriptor(name="copy", signature="<source> [<destination>]")
    assert [slot.name for slot in command.slots] == ["source", "destination"]
    assert command.get_signature_text() == "<source> [<destination>]"


def test_malformed_signature_fails_at_declaration():
    with pytest.raises(SignatureError):
        CommandDescriptor(name="copy", signature="[<a>] <b>")


def test_options_imply_option_aware_and_help():
    command = CommandDescriptor(
        name="copy", options=(OptionSpec(("-f", "--force")),)
    )
    assert command.is_option_aware
    assert command.option_registry.lookup("-f").dest == "force"
    assert command.option_registry.lookup("--help").kind is OptionKind.HELP
    assert [spec.dest for spec in command.options] == ["force"]


def test_plain_command_cannot_declare_options():
    with pytest.raises(OptionConfigurationError):
        CommandDescriptor(
            name="copy",
            options=(OptionSpec(("-f",)),),
            capability=CommandCapability.PLAIN,
        )


def test_descriptor_is_frozen():
    command = CommandDescriptor(name="build")
    with pytest.raises(ValidationError):
        command.name = "other"


def test_execute_calls_executor():
    seen = []
    command = CommandDescriptor(name="build", executor=lambda args: seen.append(args) or 5)
    arguments = BoundArguments({"x": "1"})
    assert command.execute(arguments) == 5
    assert seen == [arguments]


def test_execute_runs_coroutines():
    async def build(arguments):
        await asyncio.sleep(0)
        return "built"

    command = CommandDescriptor(name="build", executor=build)
    assert command.execute(BoundArguments()) == "built"


def test_execute_without_executor():
    with pytest.raises(CommandError, match="has no executor"):
        CommandDescriptor(name="build").execute(BoundArguments())


def test_builder_chain():
    def handler(arguments):
        return arguments

    command = (
        CommandBuilder("remote add")
        .describe("Add a remote")
        .signature("<name> <url>")
        .flag("-f", "--fetch", help="Fetch after adding.")
        .keyed("-t", "--track")
        .shortcut("-r")
        .help_text("Adds a named remote.")
        .hidden()
        .fail_on_unrecognized(False)
        .executes(handler)
        .build()
    )
    assert command.name == "remote add"
    assert command.description == "Add a remote"
    assert command.is_option_aware
    assert [spec.dest for spec in command.options] == ["fetch", "track"]
    assert command.option_registry.lookup("-t").takes_value
    assert command.shortcuts == ("-r",)
    assert command.hidden
    assert not command.fail_on_unrecognized_options
    assert command.executor is handler


def test_builder_option_aware_without_options():
    command = CommandBuilder("status").option_aware().build()
    assert command.is_option_aware
    assert "-h" in command.option_registry


def test_builder_rejects_duplicate_alias_immediately():
    builder = CommandBuilder("copy").flag("-f", "--force")
    with pytest.raises(OptionConfigurationError):
        builder.keyed("-f", "--file")


def test_builder_rejects_non_callable():
    with pytest.raises(TypeError):
        CommandBuilder("copy").executes("not callable")  # type: ignore[arg-type]


def test_unbound_builder_cannot_register():
    with pytest.raises(CommandError, match="not bound to a registry"):
        CommandBuilder("copy").register()
