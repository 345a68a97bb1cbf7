"""Small terminal games: hangman and number guessing, and the menu that starts them."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable
from enum import Enum

DEFAULT_WORD = "ankit"
DEFAULT_ATTEMPTS = 6
LOWEST = 1
HIGHEST = 100

Reader = Callable[[], str]
Writer = Callable[[str], object]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> int:
    return sys.stdout.write(text)


def _read_int(read: Reader) -> int | None:
    match = _INT_PREFIX.match(read())
    return int(match.group(1)) if match else None


def _read_letter(read: Reader) -> str:
    """First non-blank character of the next non-blank line."""
    while True:
        text = read().strip()
        if text:
            return text[0]


class Hangman:
    """A hangman round: guess the letters of a word before the attempts run out."""

    def __init__(self, word: str = DEFAULT_WORD, attempts: int = DEFAULT_ATTEMPTS) -> None:
        if not word:
            raise ValueError("the word must not be empty")
        if attempts < 1:
            raise ValueError("at least one attempt is needed")
        self.word = word
        self.attempts = attempts
        self.guessed: set[str] = set()

    def guess(self, letter: str) -> bool:
        """Record a guess; True when the letter is in the word."""
        if len(letter) != 1 or letter.isspace():
            raise ValueError(f"a guess is a single letter, not {letter!r}")
        if self.won() or self.lost():
            raise RuntimeError("the round is over")
        self.guessed.add(letter)
        hit = letter in self.word
        if not hit:
            self.attempts -= 1
        return hit

    def masked(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return " ".join(ch if ch in self.guessed else "_" for ch in self.word)

    def won(self) -> bool:
        return all(ch in self.guessed for ch in self.word)

    def lost(self) -> bool:
        return self.attempts <= 0


class Hint(Enum):
    TOO_HIGH = "too high"
    TOO_LOW = "too low"
    CORRECT = "correct"


class NumberGuess:
    """A secret number and the count of guesses made at it."""

    def __init__(self, number: int) -> None:
        self.number = number
        self.guesses = 0

    def guess(self, value: int) -> Hint:
        self.guesses += 1
        if value > self.number:
            return Hint.TOO_HIGH
        if value < self.number:
            return Hint.TOO_LOW
        return Hint.CORRECT


def play_hangman(read: Reader | None = None, write: Writer | None = None) -> bool:
    """Play one round of hangman; True when the word was found."""
    read = read or _stdin_line
    write = write or _stdout_write
    game = Hangman()
    while not game.lost():
        write(f"Word: {game.masked()} \n")
        write(f"Attempts left: {game.attempts}\n")
        if game.won():
            write(f"You win! The word was '{game.word}'.\n")
            return True
        write("Guess a letter: ")
        game.guess(_read_letter(read))
    write(f"You lose! The word was '{game.word}'.\n")
    return False


def play_number_guessing(
    read: Reader | None = None,
    write: Writer | None = None,
    rng: random.Random | None = None,
) -> int:
    """Play until the secret number is found; returns the number of guesses."""
    read = read or _stdin_line
    write = write or _stdout_write
    rng = rng or random.Random()
    game = NumberGuess(rng.randint(LOWEST, HIGHEST))
    write(f"Guess the number ({LOWEST}-{HIGHEST}): ")
    while True:
        value = _read_int(read)
        if value is None:
            write("Try again: ")
            continue
        hint = game.guess(value)
        if hint is Hint.TOO_HIGH:
            write("Too high! \nTry again: ")
        elif hint is Hint.TOO_LOW:
            write("Too low! \nTry again: ")
        else:
            write(f"Correct! The number was {game.number}.\n")
            return game.guesses


def game_menu(read: Reader | None = None, write: Writer | None = None) -> None:
    """Offer the games until Exit is chosen or input ends."""
    read = read or _stdin_line
    write = write or _stdout_write
    try:
        while True:
            write("###### Game Menu ###### \n")
            write("1. Number Guessing Game\n2. Hangman \n4. Exit \n")
            write("####################### \n")
            write("Enter your choice: ")
            choice = _read_int(read)
            if choice == 1:
                play_number_guessing(read, write)
            elif choice == 2:
                play_hangman(read, write)
            elif choice == 4:
                return
            else:
                write("Invalid choice. Please try again.\n")
    except EOFError:
        return