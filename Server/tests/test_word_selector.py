import math

from lexi.config import WIN_TEXTS
from lexi.services.word_bank import WordBank
from lexi.services.word_selector import DailyWordSelector, select_word_for_day
from lexi.utils.seedrandom import seed_random


def test_word_is_stable_across_calls_and_instances(word_bank):
    first = DailyWordSelector(word_bank)
    second = DailyWordSelector(WordBank(list(word_bank)))
    for day in range(9000, 9060):
        assert first.word_for_day(day) == first.word_for_day(day)
        assert first.word_for_day(day) == second.word_for_day(day)


def test_index_follows_the_pinned_formula(word_bank):
    selector = DailyWordSelector(word_bank)
    for day in (0, 1, 365, 9789, 12000):
        expected = math.floor(seed_random(str(day))() * len(word_bank))
        assert selector.index_for_day(day) == expected
        assert selector.word_for_day(day) == word_bank.word_at(expected)


def test_index_is_always_in_bounds(word_bank):
    selector = DailyWordSelector(word_bank)
    for day in range(-50, 2000):
        assert 0 <= selector.index_for_day(day) < len(word_bank)


def test_memo_does_not_change_results(word_bank):
    selector = DailyWordSelector(word_bank)
    before = selector.word_for_day(9790)
    selector._index_memo.clear()
    assert selector.word_for_day(9790) == before


def test_default_bank_shortcut():
    selector = DailyWordSelector(WordBank.default())
    assert select_word_for_day(9790) == selector.word_for_day(9790)


def test_celebration_text_is_deterministic(word_bank):
    selector = DailyWordSelector(word_bank)
    text = selector.win_celebration_text(9790)
    assert text in WIN_TEXTS
    assert DailyWordSelector(word_bank).win_celebration_text(9790) == text


def test_celebration_draw_does_not_disturb_word(word_bank):
    selector = DailyWordSelector(word_bank)
    word = DailyWordSelector(word_bank).word_for_day(9790)
    selector.win_celebration_text(9790)
    assert selector.word_for_day(9790) == word


def test_celebration_uses_its_own_list(word_bank):
    selector = DailyWordSelector(word_bank, win_texts=["Only"])
    assert selector.win_celebration_text(123) == "Only"
