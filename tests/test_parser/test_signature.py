import pytest

from argrouter.exceptions import SignatureError
from argrouter.parser import SlotKind, parse_signature, render_signature


def kinds(slots):
    return [(slot.name, slot.kind) for slot in slots]


def test_empty_signature():
    assert parse_signature("") == ()
    assert parse_signature("   ") == ()


def test_required_and_optional_slots():
    slots = parse_signature("<in> [<out>]")
    assert kinds(slots) == [("in", SlotKind.REQUIRED), ("out", SlotKind.OPTIONAL)]
    assert [slot.position for slot in slots] == [0, 1]


@pytest.mark.parametrize(
    "signature",
    ["<files> ...", "<files>...", "[<files>] ...", "[<files>]..."],
)
def test_variadic_marker_forms(signature):
    slots = parse_signature(signature)
    assert kinds(slots) == [("files", SlotKind.VARIADIC)]
    assert slots[0].is_variadic and not slots[0].is_required


def test_variadic_prefix_form_adds_slot():
    slots = parse_signature("<source> [<destination>] ...extra")
    assert kinds(slots) == [
        ("source", SlotKind.REQUIRED),
        ("destination", SlotKind.OPTIONAL),
        ("extra", SlotKind.VARIADIC),
    ]


def test_variadic_after_optional_is_allowed():
    slots = parse_signature("<a> [<b>] <rest> ...")
    assert kinds(slots)[-1] == ("rest", SlotKind.VARIADIC)


def test_required_after_optional_fails():
    with pytest.raises(SignatureError):
        parse_signature("[<a>] <b>")


def test_more_than_one_variadic_fails():
    with pytest.raises(SignatureError):
        parse_signature("<a> ... ...")
    with pytest.raises(SignatureError):
        parse_signature("<a>... <b>...")


def test_variadic_must_be_last():
    with pytest.raises(SignatureError):
        parse_signature("<a> ... <b>")


def test_dangling_variadic_marker_fails():
    with pytest.raises(SignatureError):
        parse_signature("...")


@pytest.mark.parametrize("signature", ["name", "<>", "[name]", "<a b>", "<1st>"])
def test_invalid_slots(signature):
    with pytest.raises(SignatureError):
        parse_signature(signature)


def test_duplicate_names_fail():
    with pytest.raises(SignatureError):
        parse_signature("<a> [<a>]")


def test_render_signature():
    slots = parse_signature("<in> [<out>] ...rest")
    assert render_signature(slots) == "<in> [<out>] [<rest>] ..."
    assert parse_signature(render_signature(slots)) == slots
