"""A terminal parlour: a bakery order desk, hangman and a number guessing game."""

__version__ = "0.1.0"
__all__ = ["bakery", "games", "cli"]