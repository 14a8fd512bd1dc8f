import pytest

from lstheme.patterns import ExtensionMappings, GlobPattern, PatternError
from lstheme.style import Colour, Fixed, Style


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("Makefile", "Makefile", True),
        ("Makefile", "makefile", False),
        ("Makefile", "Makefile.bak", False),
        ("*.txt", "notes.txt", True),
        ("*.txt", ".txt", True),
        ("*.txt", "notes.txt.gz", False),
        ("*.TXT", "notes.txt", False),
        ("lev.*", "lev.dat", True),
        ("lev.*", "level.dat", False),
        ("1*1", "11", True),
        ("1*1", "1abc1", True),
        ("1*1", "1abc2", False),
        ("a?c", "abc", True),
        ("a?c", "ac", False),
        ("a?c", "abbc", False),
    ],
)
def test_simple_wildcards(pattern, name, expected):
    assert GlobPattern(pattern).matches(name) is expected


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("[abc].rs", "b.rs", True),
        ("[abc].rs", "d.rs", False),
        ("[a-c]x", "cx", True),
        ("[a-c]x", "dx", False),
        ("[!a-c]x", "dx", True),
        ("[!a-c]x", "bx", False),
        ("[*]", "*", True),
        ("[*]", "a", False),
        ("[?]", "?", True),
        ("[]]", "]", True),
        ("[]]", "a", False),
        ("[!]]", "a", True),
        ("[!]]", "]", False),
        ("[z-a]", "m", False),
        ("[a-]", "-", True),
        ("x]", "x]", True),
    ],
)
def test_bracket_expressions(pattern, name, expected):
    assert GlobPattern(pattern).matches(name) is expected


@pytest.mark.parametrize("name", ["abcde", "", ".asdf", "/x/.asdf"])
def test_lone_recursive_wildcard_matches_everything(name):
    assert GlobPattern("**").matches(name)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("some/needle.txt", True),
        ("some/one/needle.txt", True),
        ("some/one/two/needle.txt", True),
        ("some/oneneedle.txt", False),
        ("other/needle.txt", False),
    ],
)
def test_recursive_wildcard_between_components(name, expected):
    assert GlobPattern("some/**/needle.txt").matches(name) is expected


def test_leading_recursive_component():
    pattern = GlobPattern("**/needle.txt")
    assert pattern.matches("needle.txt")
    assert pattern.matches("a/b/needle.txt")
    assert not pattern.matches("aneedle.txt")


def test_too_many_stars():
    with pytest.raises(PatternError) as info:
        GlobPattern("***")
    assert info.value.msg == "wildcards are either regular `*` or recursive `**`"


@pytest.mark.parametrize("pattern", ["a**", "**a", "a/**b"])
def test_recursive_wildcard_must_be_whole_component(pattern):
    with pytest.raises(PatternError) as info:
        GlobPattern(pattern)
    assert info.value.msg == "recursive wildcards must form a single path component"


@pytest.mark.parametrize("pattern", ["a[bc", "[", "[]", "[!]", "x[!ab"])
def test_unclosed_range(pattern):
    with pytest.raises(PatternError) as info:
        GlobPattern(pattern)
    assert info.value.msg == "invalid range pattern"
    assert info.value.pos == pattern.index("[")


def test_pattern_error_is_value_error_with_position_in_message():
    with pytest.raises(ValueError, match="invalid range pattern") as info:
        GlobPattern("ab[c")
    assert str(info.value.pos) in str(info.value)


def test_pattern_equality_and_text():
    assert GlobPattern("*.mp3") == GlobPattern("*.mp3")
    assert GlobPattern("*.mp3") != GlobPattern("*.mp4")
    assert hash(GlobPattern("*.mp3")) == hash(GlobPattern("*.mp3"))
    assert str(GlobPattern("*.mp3")) == "*.mp3"
    assert GlobPattern("*.mp3").pattern == "*.mp3"


def test_empty_mappings_colour_nothing():
    mappings = ExtensionMappings()
    assert not mappings.is_non_empty()
    assert mappings.colour_file("anything.txt") is None


def test_added_mapping_colours_matching_files():
    mappings = ExtensionMappings()
    mappings.add(GlobPattern("*.txt"), Colour.Red.normal())
    assert mappings.is_non_empty()
    assert mappings.colour_file("readme.txt") == Colour.Red.normal()
    assert mappings.colour_file("readme.md") is None


def test_later_mappings_override_earlier_ones():
    mappings = ExtensionMappings()
    mappings.add(GlobPattern("*.txt"), Colour.Red.normal())
    mappings.add(GlobPattern("*.txt"), Colour.Green.normal())
    assert mappings.colour_file("a.txt") == Colour.Green.normal()


def test_falls_back_to_earlier_mapping_when_later_does_not_match():
    mappings = ExtensionMappings()
    mappings.add(GlobPattern("*"), Fixed(135).normal())
    mappings.add(GlobPattern("*.log"), Colour.White.normal())
    assert mappings.colour_file("server.log") == Colour.White.normal()
    assert mappings.colour_file("Cargo.toml") == Fixed(135).normal()


def test_add_accepts_pattern_text_and_keeps_order():
    mappings = ExtensionMappings()
    mappings.add("*.tmp", Colour.White.normal())
    mappings.add("Makefile", Colour.Green.bold().underline())
    assert mappings.mappings == [
        (GlobPattern("*.tmp"), Colour.White.normal()),
        (GlobPattern("Makefile"), Colour.Green.bold().underline()),
    ]
    assert mappings.colour_file("Makefile") == Style(
        foreground=Colour.Green, is_bold=True, is_underline=True
    )


def test_add_with_bad_pattern_text_raises():
    mappings = ExtensionMappings()
    with pytest.raises(PatternError):
        mappings.add("[oops", Colour.Red.normal())
    assert not mappings.is_non_empty()


def test_mappings_equality():
    first = ExtensionMappings()
    first.add("*.zip", Colour.Red.normal())
    second = ExtensionMappings([(GlobPattern("*.zip"), Colour.Red.normal())])
    assert first == second