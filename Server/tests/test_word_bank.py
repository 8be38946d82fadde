import pytest

from lexi.config import WORD_LIST, validate_word_list_integrity
from lexi.exceptions import IndexOutOfRange
from lexi.services.word_bank import WordBank


def test_contains_is_case_insensitive(word_bank):
    assert word_bank.contains("allow")
    assert word_bank.contains("ALLOW")
    assert word_bank.contains(" Allow ")
    assert not word_bank.contains("zzzzz")
    assert not word_bank.contains("")
    assert "crane" in word_bank


def test_word_at_keeps_order(word_bank):
    assert word_bank.word_at(0) == "allow"
    assert word_bank.word_at(len(word_bank) - 1) == "trust"


@pytest.mark.parametrize("index", [-1, 12, 100])
def test_word_at_out_of_range(word_bank, index):
    with pytest.raises(IndexOutOfRange):
        word_bank.word_at(index)


def test_out_of_range_is_an_index_error(word_bank):
    with pytest.raises(IndexError):
        word_bank.word_at(len(word_bank))


def test_rejects_duplicates():
    with pytest.raises(ValueError, match="Duplicate"):
        WordBank(["crane", "slate", "CRANE"])


def test_rejects_wrong_length():
    with pytest.raises(ValueError):
        WordBank(["crane", "cranes"])


def test_rejects_empty():
    with pytest.raises(ValueError):
        WordBank([])


def test_bundled_word_list_is_valid():
    assert validate_word_list_integrity()
    bank = WordBank.default()
    assert len(bank) == len(WORD_LIST)
    assert bank.contains("allow")
