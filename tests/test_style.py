from dataclasses import replace

import pytest

from lstheme.style import RGB, Colour, Fixed, Style

EFFECTS = [
    ("bold", "is_bold"),
    ("dimmed", "is_dimmed"),
    ("italic", "is_italic"),
    ("underline", "is_underline"),
    ("blink", "is_blink"),
    ("reverse", "is_reverse"),
    ("hidden", "is_hidden"),
    ("strikethrough", "is_strikethrough"),
]


def test_default_style_is_plain():
    style = Style()
    assert style.foreground is None
    assert style.background is None
    assert not any(getattr(style, attr) for _, attr in EFFECTS)


@pytest.mark.parametrize("method, attr", EFFECTS)
def test_each_effect_sets_only_its_flag(method, attr):
    result = getattr(Style(), method)()
    assert getattr(result, attr) is True
    assert replace(result, **{attr: False}) == Style()


@pytest.mark.parametrize("method, attr", EFFECTS)
def test_effects_are_idempotent(method, attr):
    once = getattr(Style(), method)()
    twice = getattr(once, method)()
    assert once == twice


def test_builders_do_not_mutate():
    base = Style()
    base.bold()
    base.fg(Colour.Red)
    assert base == Style()


def test_effect_order_does_not_matter():
    assert Style().bold().underline() == Style().underline().bold()


def test_colour_normal_matches_fg():
    for colour in Colour:
        assert colour.normal() == Style().fg(colour)


def test_colour_bold_and_underline():
    assert Colour.Green.bold() == Style().fg(Colour.Green).bold()
    assert Colour.Green.underline() == Style().fg(Colour.Green).underline()


def test_colour_on_sets_both_colours():
    assert Colour.Red.on(Colour.Yellow) == Style().on(Colour.Yellow).fg(Colour.Red)


def test_later_foreground_wins():
    assert Style().fg(Colour.Red).fg(Colour.Blue) == Colour.Blue.normal()


def test_fixed_and_rgb_paint():
    assert Fixed(149).normal() == Style(foreground=Fixed(149))
    assert Fixed(121).on(Fixed(212)) == Style().fg(Fixed(121)).on(Fixed(212))
    assert Fixed(7).bold() == Style(foreground=Fixed(7), is_bold=True)
    assert Fixed(7).underline() == Style(foreground=Fixed(7), is_underline=True)
    assert RGB(255, 100, 0).bold() == Style().fg(RGB(255, 100, 0)).bold()
    assert RGB(255, 100, 0).underline().is_underline is True
    assert RGB(1, 2, 3).on(Colour.Red) == Style(foreground=RGB(1, 2, 3), background=Colour.Red)


def test_fixed_equality():
    background = Style().on(Fixed(1)).background
    assert background == Fixed(1)
    assert background.number == 1
    assert (Fixed(1) == Fixed(2)) is False
    assert (Style().on(Fixed(1)) == Style().on(Fixed(2))) is False


@pytest.mark.parametrize("value", [-1, 256, 999])
def test_fixed_out_of_range(value):
    with pytest.raises(ValueError):
        Fixed(value)


def test_rgb_out_of_range():
    with pytest.raises(ValueError):
        RGB(0, 0, 256)
    with pytest.raises(ValueError):
        RGB(-1, 0, 0)