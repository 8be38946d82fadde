from lexi.models.game import LetterStatus
from lexi.services.guess_evaluator import evaluate, keyboard_state, status_row

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


def test_exact_match_is_all_correct():
    assert evaluate("allow", "allow") == [C] * 5


def test_no_shared_letters_is_all_absent():
    assert evaluate("ghost", "crane") == [A] * 5


def test_allow_lowly():
    # target has two l's, one o, one w; no position matches
    assert evaluate("lowly", "allow") == [P, P, P, P, A]


def test_correct_letters_consume_budget_first():
    # target "allot" has two l's; the l at index 2 is exact, leaving one for the others
    assert evaluate("lolly", "allot") == [P, P, C, A, A]


def test_earlier_positions_win_present():
    # one misplaced e in the target, two in the guess: only the first is present
    assert evaluate("eerie", "alert") == [P, A, P, A, A]


def test_extra_repeats_left_to_right():
    assert evaluate("sassy", "class") == [P, P, A, C, A]


def test_guess_is_normalized_to_lowercase():
    assert evaluate("ALLOW", "allow") == [C] * 5


def test_keyboard_state_prefers_best_status():
    letters = keyboard_state(["lolly", "allot"], "allot")
    assert letters["l"] is C
    assert letters["o"] is C
    assert letters["a"] is C
    assert letters["y"] is A


def test_keyboard_state_never_downgrades():
    # "nacre" only finds c, r, a and n out of place; they stay correct
    letters = keyboard_state(["crane", "nacre"], "crane")
    assert letters["a"] is C
    assert letters["c"] is C
    assert letters["n"] is C
    assert letters["e"] is C


def test_status_row_glyphs():
    assert status_row([C, P, A]) == "\U0001F7E9\U0001F7E8⬛"
