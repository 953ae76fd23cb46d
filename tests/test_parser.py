import pytest

from wordle_hints.constraints import GreenConstraint, YellowConstraint
from wordle_hints.errors import (
    HintError,
    InvalidGreenPattern,
    InvalidYellowSlot,
    MalformedToken,
    MalformedYellowPattern,
    UnrecognizedKind,
)
from wordle_hints.parser import parse_line, parse_token, split_line


def test_green_token():
    c = parse_token("hg3")
    assert c == GreenConstraint("H", 3)
    assert c.letter == "H"
    assert c.slot == 3


def test_tokens_are_case_insensitive():
    assert parse_token("HG3") == GreenConstraint("H", 3)
    assert parse_token("LY15") == YellowConstraint("L", frozenset({1, 5}), 1)


def test_yellow_token_with_duplicates():
    c = parse_token("fy15-")
    assert isinstance(c, YellowConstraint)
    assert c.letter == "F"
    assert c.excluded_slots == frozenset({1, 5})
    assert c.count == 2

    assert parse_token("fy2---").count == 4


def test_yellow_excluded_slots_are_deduplicated():
    c = parse_token("ay1131")
    assert c.excluded_slots == frozenset({1, 3})
    assert c.count == 1


def test_yellow_without_exclusions():
    c = parse_token("ey-")
    assert c.excluded_slots == frozenset()
    assert c.count == 2


def test_token_property_round_trips():
    for token in ["hg3", "ly15", "fy15-", "ey-", "zy12345--"]:
        assert parse_token(token).token == token


@pytest.mark.parametrize("token", ["", "h", "hg", "ay", "ey", "3g1", "-y1", "_g2"])
def test_malformed_tokens(token):
    with pytest.raises(MalformedToken):
        parse_token(token)


def test_unrecognized_kind():
    with pytest.raises(UnrecognizedKind):
        parse_token("hx3")


@pytest.mark.parametrize("token", ["hg0", "hg6", "hg33", "hga", "hg3-"])
def test_invalid_green(token):
    with pytest.raises(InvalidGreenPattern):
        parse_token(token)


@pytest.mark.parametrize("token", ["ly16", "ly0", "ly9-"])
def test_invalid_yellow_slot(token):
    with pytest.raises(InvalidYellowSlot):
        parse_token(token)


@pytest.mark.parametrize("token", ["ly1a", "ly1-5", "ly 1"])
def test_malformed_yellow(token):
    with pytest.raises(MalformedYellowPattern):
        parse_token(token)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_token("zz")
    assert issubclass(HintError, ValueError)


def test_split_line_on_spaces_and_commas():
    assert split_line("ly15 hg3") == ["ly15", "hg3"]
    assert split_line(" fy15-,eg4 ,  ay2 ") == ["fy15-", "eg4", "ay2"]
    assert split_line("   ") == []


def test_parse_line_keeps_order():
    got = parse_line("ly15, hg3 fy2-")
    assert got == [
        YellowConstraint("L", frozenset({1, 5})),
        GreenConstraint("H", 3),
        YellowConstraint("F", frozenset({2}), 2),
    ]


def test_parse_line_aborts_on_first_error():
    with pytest.raises(UnrecognizedKind):
        parse_line("ly15 hq3 ay2")


def test_constraint_constructors_validate():
    with pytest.raises(InvalidGreenPattern):
        GreenConstraint("a", 6)
    with pytest.raises(InvalidYellowSlot):
        YellowConstraint("a", {0})
    with pytest.raises(ValueError):
        YellowConstraint("a", set(), 0)
    with pytest.raises(TypeError):
        GreenConstraint("ab", 1)


def test_two_letter_yellow_needs_a_marker():
    with pytest.raises(MalformedToken):
        parse_line("ay")
    assert parse_line("ay-") == [YellowConstraint("A", frozenset(), 2)]


def test_parse_line_allows_greens_on_same_slot():
    # slot conflicts are reported when patterns are generated
    assert parse_line("hg3 eg3") == [GreenConstraint("H", 3), GreenConstraint("E", 3)]


def test_constraints_reject_bool_slots_and_counts():
    with pytest.raises(InvalidGreenPattern):
        GreenConstraint("a", True)
    with pytest.raises(InvalidYellowSlot):
        YellowConstraint("a", {True})
    with pytest.raises(ValueError):
        YellowConstraint("a", set(), True)
