# hackassist

A helper for the terminal hacking minigame in Fallout 3, New Vegas, 4 and 76.

The minigame shows a list of candidate passwords, all of the same length
(4 to 15 letters). Each wrong guess tells you how many letters match the
password in the same position. hackassist keeps only the candidates that are
consistent with every answer you have received, until one word is left.

## Installing

```
pip install .
```

## Using it from the terminal

```
hackassist
hackassist --file my_words.json
```

1. Type every word shown on the in-game terminal, one per line. Words shorter
   than 4 or longer than 15 letters are rejected until a usable first word is
   given; after that, words that differ in length from the first word are
   rejected.
2. Type `F` when all words are entered.
3. Guess a word in the game, then type that word and the number of correct
   letters the game reported.
4. hackassist prints the words that are still possible. Repeat until it names
   the password, or reports `no valid answer` when nothing fits.

Letters are upper-cased as they are read, so `healing` and `HEALING` are the
same word.

Every word you enter is also remembered, grouped by length, in
`saved_words.json` in the current directory, or in the file given with
`--file`. The file is created on first use.

The command exits with status 0 when it names the password, 1 when no word
fits or input ends early, and 2 when a letter count is not a whole number
from 0 to 255.

## Using it as a library

```python
from hackassist.solver import check_word_against_list

words = {"HEALING", "LEGIONS", "CEILING", "SPECIAL"}
remaining = check_word_against_list(words, "HEALING", 5)  # {"CEILING"}
```

In `hackassist.solver`:

- `exact_overlap(word, guessed_word, amount_correct)` tells whether a single
  candidate shares exactly that many letters in the same places with a guess.
- `check_word_against_list(words, guessed_word, amount_correct)` returns the
  set of candidates that fit.
- `validate_single_word(word, length)` checks a word's length.
- `validate_words_input`, `solve` and `run_terminal` drive the interactive
  session; each takes a `read_line` callable and a `write` callable (by default
  `input` and `print`), so they can be fed from any source.

`hackassist.session.HackingSession` keeps the state of one hacking attempt
for an interactive front end:

- `add_word(word)` adds a candidate; the first word fixes the length of the
  rest, and a word of the wrong length raises `ValueError`.
- `finish()` moves the entered words into the remaining candidates.
- `submit_guess(guess, amount_correct)` drops the candidates that disagree,
  raising `ValueError` for a guess of the wrong length or a count out of range.
- `reset()` clears everything.
- `toggle_help()` and `help_text()` show and return the built-in instructions.

The saved word store is in `hackassist.storage`. `WordsByLengths` holds one
list of words for each length from 4 to 15, with `get`, `set`, `to_json` and
`from_json`; lengths outside that range and malformed JSON raise `ValueError`.
`process_user_inputted_words(words_inputted, word_length, path)` merges new
words into a store file and returns whether the file was rewritten.

## What it does not do

hackassist has no graphical or browser interface. `HackingSession` holds the
state such an interface would need, but the only ready-made way to use the
package interactively is the `hackassist` terminal command.

## Running the tests

```
pip install .[test]
pytest
```