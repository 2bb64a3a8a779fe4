"""Test patterns functionality."""

from route_matcher.patterns import REGEX_PREFIX, name_pattern, option_pattern


def test_patterns_regex_usage():
    """Test that all patterns are working correctly."""
    assert REGEX_PREFIX == "::"

    # Test name_pattern
    assert name_pattern.fullmatch("id")
    assert name_pattern.fullmatch("_user_id2")
    assert not name_pattern.fullmatch("2id")
    assert not name_pattern.fullmatch("user-id")
    assert not name_pattern.fullmatch("")

    # Test option_pattern
    match = option_pattern.match("--flag")
    assert match is not None
    assert match.groupdict() == {"name": "flag", "value": None}

    match = option_pattern.match("-b=1=2")
    assert match is not None
    assert match["name"] == "b"
    assert match["value"] == "1=2"

    match = option_pattern.match("--empty=")
    assert match["value"] == ""
