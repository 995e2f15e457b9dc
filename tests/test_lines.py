import logging

import pytest

from script_translate.lines import (
    Blank,
    DirectCopy,
    Event,
    Image,
    LineClassifier,
    ModeToggle,
    Notice,
    Serif,
    ZoneClose,
    ZoneOpen,
)


@pytest.fixture
def classifier():
    return LineClassifier("3")


@pytest.mark.parametrize(
    "line,expected",
    [
        ("", Blank()),
        ("<>", ModeToggle()),
        ("-- (Night market)", ZoneOpen("Night market")),
        ("--(Harbor) after", ZoneOpen("Harbor")),
        ("--", ZoneClose()),
        ("--   ", ZoneClose()),
        ("-- The lights go out", Event("The lights go out")),
        ("--Rain ", Event("Rain")),
        ("[Bob enters]", Notice("Bob enters")),
        ("[ a ] [ b ]", Notice("a ] [ b")),
        ("Alice: Hello/World", Serif("Alice", "Hello/World")),
        ("Just talking", Serif(None, "Just talking")),
    ],
)
def test_classify(classifier, line, expected):
    assert classifier.classify(line) == expected


def test_toggle_marker_must_be_exact(classifier):
    assert classifier.classify("<> ") == Serif(None, "<> ")
    assert classifier.classify("<>x") == Serif(None, "<>x")


def test_direct_copy_bypasses_shapes(classifier):
    assert classifier.classify("-- (Zone)", direct_copy=True) == DirectCopy("-- (Zone)")
    assert classifier.classify("<b>raw</b>", direct_copy=True) == DirectCopy("<b>raw</b>")
    # toggle and blank still win
    assert classifier.classify("<>", direct_copy=True) == ModeToggle()
    assert classifier.classify("", direct_copy=True) == Blank()


def test_zone_header_uses_first_closing_paren(classifier):
    assert classifier.classify("-- (a) (b)") == ZoneOpen("a")


def test_zone_header_without_close_warns(classifier, caplog):
    with caplog.at_level(logging.WARNING):
        item = classifier.classify("-- (Dock", line_no=7)
    assert item == ZoneOpen("Dock")
    assert "line 7" in caplog.text


def test_image_gets_default_extension(classifier):
    item = classifier.classify("!door!")
    assert item == Image(
        "door", "{{site.baseurl}}{{page.resources_path}}{{page.resources_story_path}}/ep3/door.png"
    )


def test_image_keeps_extension(classifier):
    item = classifier.classify("! map.jpg !")
    assert isinstance(item, Image)
    assert item.src.endswith("/ep3/map.jpg")


def test_image_path_follows_episode():
    assert LineClassifier("12").classify("!a!").src.endswith("/ep12/a.png")


def test_unterminated_image_is_dialogue(classifier, caplog):
    with caplog.at_level(logging.WARNING):
        item = classifier.classify("!door")
    assert item == Serif(None, "!door")
    assert "unterminated image" in caplog.text


def test_serif_splits_on_first_colon(classifier):
    assert classifier.classify("Bob: time: 10:30") == Serif("Bob", "time: 10:30")


def test_serif_with_nothing_after_colon_has_no_speaker(classifier):
    assert classifier.classify("Alice:") == Serif(None, "Alice:")
    assert Serif(None, "Alice:").to_html() == '<div class="serif"><div class="content">Alice:</div></div>\n'


def test_to_html_vocabulary():
    assert Blank().to_html() == '<div class="delimeter" />\n'
    assert ZoneOpen("Night market").to_html() == (
        '<div class="zone"><div class="header"><span class="content">Night market</span></div>\n'
    )
    assert ZoneClose().to_html() == "</div>\n"
    assert Event("Door *slams*").to_html() == (
        '\n<div class="event"><span class="content">Door <em>*slams*</em></span></div>\n\n'
    )
    assert Notice("Bob enters").to_html() == (
        '\n<div class="notice"><span class="content">Bob enters</span></div>\n\n'
    )
    assert ModeToggle().to_html() == ""


def test_serif_html():
    assert Serif("Alice", "Hello/World").to_html() == (
        '<div class="serif"><div class="name">Alice</div><div class="content">Hello<br/>World</div></div>\n'
    )
    assert Serif(None, "(sigh)").to_html() == (
        '<div class="serif"><div class="content"><span class="minds">(sigh)</span></div></div>\n'
    )
