"""Narrowing down the terminal password from guesses and likeness scores."""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterable
from typing import Optional

from termcolor import colored

from .storage import (
    DEFAULT_PATH,
    MAX_LENGTH,
    MIN_LENGTH,
    PathLike,
    process_user_inputted_words,
)

FINISHED = "F"
ReadLine = Callable[[], str]
Write = Callable[[str], None]

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_COUNT = re.compile(r"\+?[0-9]+", re.ASCII)


def _read_word(read_line: ReadLine) -> str:
    return read_line().strip().translate(_UPPER)


def _read_count(read_line: ReadLine) -> int:
    text = read_line().strip()
    if not _COUNT.fullmatch(text) or int(text) > 255:
        raise ValueError(f"invalid letter count: {text!r}")
    return int(text)


def exact_overlap(word: str, guessed_word: str, amount_correct: int) -> bool:
    """True if the words share exactly amount_correct letters in the same places."""
    return sum(a == b for a, b in zip(word, guessed_word)) == amount_correct


def check_word_against_list(
    words: Iterable[str], guessed_word: str, amount_correct: int
) -> set[str]:
    """Keep the words consistent with the guess and its likeness score."""
    return {word for word in words if exact_overlap(word, guessed_word, amount_correct)}


def validate_single_word(word: str, length: int) -> bool:
    """True if the word has the expected length."""
    return len(word) == length


def validate_words_input(
    first: str,
    length: int,
    read_line: ReadLine = input,
    write: Write = print,
) -> set[str]:
    """Collect words until 'F' is entered, rejecting those of another length."""
    words: set[str] = set()
    entry = first
    while entry != FINISHED:
        if validate_single_word(entry, length):
            words.add(entry)
        else:
            write("latest word is a different length than previous word(s)")
        entry = _read_word(read_line)
    return words


def solve(
    words: Iterable[str],
    read_line: ReadLine = input,
    write: Write = print,
) -> Optional[str]:
    """Ask for guesses and scores until one word remains; return it, or None."""
    write(colored("Pick a word and write the word here", "green"))
    guessed_word = _read_word(read_line)
    write("How many letters were correct?")
    amount_correct = _read_count(read_line)
    remaining = check_word_against_list(words, guessed_word, amount_correct)

    while len(remaining) > 1:
        write(colored("Pick another word from the following list:", "green"))
        for word in sorted(remaining):
            write(colored(word, "light_yellow"))
        guessed_word = _read_word(read_line)
        write(colored("How many letters were correct?", "green"))
        amount_correct = _read_count(read_line)
        remaining = check_word_against_list(remaining, guessed_word, amount_correct)

    if len(remaining) == 1:
        answer = next(iter(remaining))
        write(f"correct answer is {colored(answer, 'green', attrs=['bold'])}")
        return answer
    write("no valid answer")
    return None


def run_terminal(
    read_line: ReadLine = input,
    write: Write = print,
    path: PathLike = DEFAULT_PATH,
) -> Optional[str]:
    """Run the interactive assistant, saving entered words; return the answer."""
    write(colored("Write down all the words and write 'F' when finished", "green"))
    entry = _read_word(read_line)
    while entry != FINISHED and not MIN_LENGTH <= len(entry) <= MAX_LENGTH:
        if len(entry) < MIN_LENGTH:
            write("word is too short to be valid")
        else:
            write("word is too large to be valid")
        entry = _read_word(read_line)

    if entry == FINISHED:
        write("no valid answer")
        return None

    length = len(entry)
    words = validate_words_input(entry, length, read_line, write)
    process_user_inputted_words(words, length, path)
    return solve(words, read_line, write)