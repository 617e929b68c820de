import itertools

import pytest

from wordstack.dictionary import DictionaryService
from wordstack.letters import LetterStack
from wordstack.schemas import RejectReason
from wordstack.validator import letters_available, validate


STACK = LetterStack("aabcdef")


def test_repeated_letters_need_repeated_tiles():
    assert letters_available("aab", STACK)
    assert not letters_available("aaa", STACK)
    assert not letters_available("aac", LetterStack("abcdefg"))


def test_empty_word_rejected_first():
    verdict = validate("", STACK, DictionaryService([""]), [])
    assert verdict.reason == RejectReason.EMPTY


def test_unloaded_dictionary_rejects():
    verdict = validate("cab", STACK, DictionaryService(), [])
    assert not verdict.accepted
    assert verdict.reason == RejectReason.NOT_READY


def test_letters_checked_before_history_and_dictionary():
    verdict = validate("zoo", STACK, DictionaryService(["cab"]), ["zoo"])
    assert verdict.reason == RejectReason.LETTERS_UNAVAILABLE


def test_history_checked_before_dictionary():
    verdict = validate("bad", STACK, DictionaryService(["cab"]), ["bad"])
    assert verdict.reason == RejectReason.ALREADY_USED


@pytest.mark.parametrize("fits, used, known", list(itertools.product([True, False], repeat=3)))
def test_accepted_iff_all_checks_pass(fits, used, known):
    word = "fade" if fits else "fuzz"
    dictionary = DictionaryService([word] if known else ["other"])
    history = [word] if used else []
    verdict = validate(word, STACK, dictionary, history)
    assert verdict.accepted == (fits and not used and known)
    if not verdict.accepted:
        assert verdict.reason is not None


def test_validate_is_total():
    dictionary = DictionaryService(["cab"])
    for word in ["", "CAB", "c a b", "ñ", "12", "cab\n"]:
        verdict = validate(word, STACK, dictionary, [])
        assert verdict.accepted is False
