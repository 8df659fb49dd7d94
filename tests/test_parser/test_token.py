from argrouter.parser import OptionRegistry, TokenRole, expand_combined_flags, tokenize
from argrouter.parser.token import is_option_like, split_argument_string


def texts(tokens):
    return [token.text for token in tokens]


def roles(tokens):
    return [token.role for token in tokens]


def test_option_like_detection():
    assert is_option_like("-v")
    assert is_option_like("--verbose")
    assert is_option_like("-abc")
    assert not is_option_like("-")
    assert not is_option_like("--")
    assert not is_option_like("-5")
    assert not is_option_like("--3")
    assert not is_option_like("-.5")
    assert not is_option_like("file.txt")


def test_tokenize_tags_roles_in_order():
    tokens = tokenize(["remote", "-v", "add", "--force", "-", "-12"])
    assert texts(tokens) == ["remote", "-v", "add", "--force", "-", "-12"]
    assert roles(tokens) == [
        TokenRole.VALUE,
        TokenRole.OPTION,
        TokenRole.VALUE,
        TokenRole.OPTION,
        TokenRole.VALUE,
        TokenRole.VALUE,
    ]
    assert not any(token.consumed for token in tokens)


def test_attached_values_are_split():
    tokens = tokenize(["--output=out.txt", "-o=a=b", "in.txt"])
    assert texts(tokens) == ["--output", "out.txt", "-o", "a=b", "in.txt"]
    assert roles(tokens) == [
        TokenRole.OPTION,
        TokenRole.VALUE,
        TokenRole.OPTION,
        TokenRole.VALUE,
        TokenRole.VALUE,
    ]


def test_attached_value_matches_separate_value():
    attached = tokenize(["--key=value"])
    separate = tokenize(["--key", "value"])
    assert texts(attached) == texts(separate)
    assert roles(attached) == roles(separate)


def test_attached_values_are_marked():
    tokens = tokenize(["--output=out.txt", "-o", "x", "-k=v"])
    assert [token.attached for token in tokens] == [False, True, False, False, False, True]


def test_separator_makes_everything_after_it_a_value():
    tokens = tokenize(["run", "--", "-x", "--long", "--"])
    assert texts(tokens) == ["run", "-x", "--long", "--"]
    assert all(token.role is TokenRole.VALUE for token in tokens)


def test_tokenize_empty_input():
    assert tokenize([]) == []


def test_split_argument_string():
    assert split_argument_string("add 'my file.txt' -v") == ["add", "my file.txt", "-v"]
    assert split_argument_string("add 'unbalanced -v") == ["add", "'unbalanced", "-v"]


def test_combined_flags_expand_when_all_are_flags():
    options = OptionRegistry()
    options.add_flag("-a")
    options.add_flag("-b")
    options.add_flag("-c")
    tokens = expand_combined_flags(tokenize(["-abc", "x"]), options.alias_map)
    assert texts(tokens) == ["-a", "-b", "-c", "x"]
    assert roles(tokens)[:3] == [TokenRole.OPTION] * 3


def test_combined_flags_with_keyed_option_take_attached_value():
    options = OptionRegistry()
    options.add_flag("-v", "--verbose")
    options.add_keyed("-o", "--output")
    tokens = expand_combined_flags(tokenize(["-ofile.txt"]), options.alias_map)
    assert texts(tokens) == ["-o", "file.txt"]
    assert roles(tokens) == [TokenRole.OPTION, TokenRole.VALUE]

    tokens = expand_combined_flags(tokenize(["-vofile.txt"]), options.alias_map)
    assert texts(tokens) == ["-v", "-o", "file.txt"]

    tokens = expand_combined_flags(tokenize(["-vo", "file.txt"]), options.alias_map)
    assert texts(tokens) == ["-v", "-o", "file.txt"]


def test_combined_flags_with_unknown_character_stay_intact():
    options = OptionRegistry()
    options.add_flag("-a")
    tokens = expand_combined_flags(tokenize(["-ax"]), options.alias_map)
    assert texts(tokens) == ["-ax"]


def test_long_options_are_never_expanded():
    options = OptionRegistry()
    options.add_flag("-a")
    options.add_flag("-l")
    tokens = expand_combined_flags(tokenize(["--all"]), options.alias_map)
    assert texts(tokens) == ["--all"]
