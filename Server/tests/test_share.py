from datetime import date

from lexi.services.share import build_share_text, format_day

GREEN = "\U0001F7E9"
BLACK = "⬛"


def test_format_day():
    assert format_day(date(2026, 10, 19)) == "Oct 19, 2026"
    assert format_day(date(2026, 3, 5)) == "Mar 5, 2026"


def test_share_text_layout(clock, today):
    text = build_share_text(today, ["allot", "allow"], "allow", "\U0001F3AF", clock)
    lines = text.split("\n")

    assert lines[0] == "\U0001F3AF Oct 19, 2026 2/6"
    assert len(lines) == 3
    assert lines[1] == GREEN * 4 + BLACK
    assert len(lines[2]) == 5
    assert lines[2][4] == GREEN
    assert lines[2] == GREEN * 5


def test_share_text_has_no_letters(clock, today):
    text = build_share_text(today, ["lowly", "allow"], "allow", "*", clock)
    assert "lowly" not in text
    assert "allow" not in text
    assert text.splitlines()[0].endswith("2/6")


def test_lost_game_header_counts_all_guesses(clock, today):
    guesses = ["crane", "slate", "ghost", "fuzzy", "plumb", "drink"]
    lines = build_share_text(today, guesses, "allow", "*", clock).split("\n")
    assert lines[0] == "* Oct 19, 2026 6/6"
    assert len(lines) == 7
