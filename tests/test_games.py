import pytest

from parlourkit.games import (
    Hangman,
    Hint,
    NumberGuess,
    game_menu,
    play_hangman,
    play_number_guessing,
)


def scripted(lines):
    items = iter(lines)

    def read():
        try:
            return next(items) + "\n"
        except StopIteration:
            raise EOFError from None

    return read


class Recorder:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.value


def test_hangman_starts_fully_masked():
    game = Hangman("ankit")
    assert game.masked() == "_ _ _ _ _"
    assert not game.won()
    assert not game.lost()


def test_hangman_correct_guess_reveals_and_keeps_attempts():
    game = Hangman("ankit", 6)
    assert game.guess("a") is True
    assert game.attempts == 6
    assert game.masked().startswith("a ")
    assert game.masked().count("_") == 4


def test_hangman_wrong_guess_costs_attempt():
    game = Hangman("ankit", 6)
    assert game.guess("z") is False
    assert game.attempts == 5


def test_hangman_repeated_wrong_guess_costs_again():
    game = Hangman("ankit", 6)
    game.guess("z")
    game.guess("z")
    assert game.attempts == 4


def test_hangman_win_reveals_word():
    game = Hangman("ankit")
    for letter in "ankit":
        game.guess(letter)
    assert game.won()
    assert game.masked() == " ".join("ankit")


def test_hangman_lost_after_all_attempts():
    game = Hangman("ankit", 2)
    game.guess("x")
    game.guess("y")
    assert game.lost()
    with pytest.raises(RuntimeError):
        game.guess("a")


@pytest.mark.parametrize("bad", ["", "ab", " "])
def test_hangman_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        Hangman().guess(bad)


def test_hangman_rejects_empty_word():
    with pytest.raises(ValueError):
        Hangman("")


@pytest.mark.parametrize(
    "value,hint",
    [(60, Hint.TOO_HIGH), (40, Hint.TOO_LOW), (50, Hint.CORRECT)],
)
def test_number_guess_hints(value, hint):
    assert NumberGuess(50).guess(value) is hint


def test_number_guess_counts_guesses():
    game = NumberGuess(10)
    game.guess(1)
    game.guess(10)
    assert game.guesses == 2


def test_play_hangman_win():
    out = Recorder()
    assert play_hangman(scripted(list("ankit")), out) is True
    assert "You win! The word was 'ankit'." in out.text
    assert "Attempts left: 6" in out.text


def test_play_hangman_skips_blank_lines():
    out = Recorder()
    assert play_hangman(scripted(["", "a", "  n", "k", "i", "t"]), out) is True


def test_play_hangman_lose():
    out = Recorder()
    assert play_hangman(scripted(list("bcdefg")), out) is False
    assert "You lose! The word was 'ankit'." in out.text
    assert "You win!" not in out.text


def test_play_number_guessing_feedback():
    out = Recorder()
    rng = FixedRng(37)
    count = play_number_guessing(scripted(["50", "20", "37"]), out, rng)
    assert count == 3
    assert rng.calls == [(1, 100)]
    assert out.text.startswith("Guess the number (1-100): ")
    assert "Too high! \nTry again: " in out.text
    assert "Too low! \nTry again: " in out.text
    assert out.text.endswith("Correct! The number was 37.\n")


def test_play_number_guessing_ignores_non_numbers():
    out = Recorder()
    count = play_number_guessing(scripted(["abc", "37"]), out, FixedRng(37))
    assert count == 1
    assert "Correct! The number was 37." in out.text


def test_game_menu_invalid_then_exit():
    out = Recorder()
    game_menu(scripted(["9", "4"]), out)
    assert out.text.count("Invalid choice. Please try again.") == 1
    assert out.text.count("###### Game Menu ######") == 2


def test_game_menu_plays_hangman():
    out = Recorder()
    game_menu(scripted(["2", *"ankit", "4"]), out)
    assert "You win! The word was 'ankit'." in out.text


def test_game_menu_returns_at_end_of_input():
    out = Recorder()
    game_menu(scripted([]), out)
    assert out.text.endswith("Enter your choice: ")