"""State of one guided hacking session: word entry, guessing and help."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .solver import check_word_against_list
from .storage import MAX_LENGTH, MIN_LENGTH

HELP_TEXT = (
    "This assistant will help you solve the hacking minigame from fallout 3, "
    "new vegas, 4 and 76.\n"
    "I highly recommend first clicking 1 word in the minigame before continuing "
    "just in case it's immediately correct.\n"
    "If it is not, proceed by filling in all the words displayed in the terminal "
    "you're hacking.\n"
    'All the filled in words will be displayed under "current words:"\n'
    "Upon filling in all the words on the terminal, press the [FINISHED] button "
    "and proceed to the Guessing form.\n"
    "Fill in the word you guessed and the amount correct. Press the [SUBMIT] "
    "button afterwards and the list will shrink accordingly.\n"
    "You can then pick a word from the remaining words list to guess in-game.\n"
    "Repeat this until the password is correct or you're locked out.\n"
    "Press the [RESTART] button to begin the process all over again."
)


@dataclass
class HackingSession:
    """Words entered from a terminal and the candidates still left after guesses."""

    current_words: set[str] = field(default_factory=set)
    remaining_words: set[str] = field(default_factory=set)
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    help_visible: bool = False

    def add_word(self, word: str) -> str:
        """Add a word shown on the terminal; the first word fixes the length."""
        word = word.strip().upper()
        if not word:
            raise ValueError("word must not be empty")
        if not self.min_length <= len(word) <= self.max_length:
            raise ValueError(
                f"word {word!r} must be {self.min_length}-{self.max_length} "
                "characters long"
            )
        if not self.current_words:
            self.min_length = self.max_length = len(word)
        self.current_words.add(word)
        return word

    def finish(self) -> set[str]:
        """Move the entered words into the candidate list and return it."""
        self.remaining_words |= self.current_words
        return set(self.remaining_words)

    def submit_guess(self, guess: str, amount_correct: int) -> set[str]:
        """Drop candidates that disagree with a guess and its likeness score."""
        guess = guess.strip().upper()
        if guess and len(guess) != self.max_length:
            raise ValueError(
                f"guess {guess!r} must be {self.max_length} characters long"
            )
        if not 0 <= amount_correct <= self.max_length:
            raise ValueError(
                f"amount correct must be between 0 and {self.max_length}"
            )
        self.remaining_words = check_word_against_list(
            self.remaining_words, guess, amount_correct
        )
        return set(self.remaining_words)

    def reset(self) -> None:
        """Clear every list and reopen word entry."""
        self.current_words = set()
        self.remaining_words = set()
        self.min_length = 0
        self.max_length = MAX_LENGTH

    def toggle_help(self) -> bool:
        """Show or hide the help text; return whether it is now shown."""
        self.help_visible = not self.help_visible
        return self.help_visible

    def help_text(self) -> Optional[str]:
        """The help text while it is shown, otherwise None."""
        return HELP_TEXT if self.help_visible else None