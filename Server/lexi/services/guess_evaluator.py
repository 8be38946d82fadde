"""
Guess Evaluator

Pure functions classifying guess letters against a target word.
"""

from collections import Counter
from typing import Dict, Iterable, List

from ..models.game import LetterStatus

STATUS_GLYPHS = {
    LetterStatus.CORRECT: "\U0001F7E9",  # green square
    LetterStatus.PRESENT: "\U0001F7E8",  # yellow square
    LetterStatus.ABSENT: "⬛",              # black square
}


def evaluate(guess: str, target: str) -> List[LetterStatus]:
    """
    Classify each position of guess against target.

    Exact matches are marked first. Every other letter may be marked present
    only while the target still has unmatched copies of it; copies are
    handed out left to right, so with more repeats in the guess than in the
    target the earlier positions get `present` and the later ones `absent`.

    Args:
        guess: Guess word, same length as target
        target: Target word

    Returns:
        List[LetterStatus]: One status per position
    """
    guess = guess.lower()
    target = target.lower()

    result: List[LetterStatus] = [LetterStatus.ABSENT] * len(guess)
    budget = Counter(target)

    # First pass: exact position matches
    for i, (letter, expected) in enumerate(zip(guess, target)):
        if letter == expected:
            result[i] = LetterStatus.CORRECT
            budget[letter] -= 1

    # Second pass: consume the remaining copies left to right
    for i, letter in enumerate(guess):
        if result[i] is LetterStatus.CORRECT:
            continue
        if budget[letter] > 0:
            result[i] = LetterStatus.PRESENT
            budget[letter] -= 1

    return result


def keyboard_state(guesses: Iterable[str], target: str) -> Dict[str, LetterStatus]:
    """
    Best status seen for every guessed letter (correct > present > absent).
    A letter never moves down once it has been marked higher.
    """
    letters: Dict[str, LetterStatus] = {}
    for guess in guesses:
        for letter, status in zip(guess.lower(), evaluate(guess, target)):
            current = letters.get(letter)
            if current is None or status.rank > current.rank:
                letters[letter] = status
    return letters


def status_row(statuses: Iterable[LetterStatus]) -> str:
    """Render statuses as emoji squares."""
    return "".join(STATUS_GLYPHS[status] for status in statuses)
