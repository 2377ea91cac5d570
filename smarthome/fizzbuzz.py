"""The FizzBuzz sequence."""

from __future__ import annotations

__all__ = ["fizzbuzz", "main"]

COUNT = 100


def _word(number: int) -> str:
    match (number % 3, number % 5):
        case (0, 0):
            return "FizzBuzz"
        case (0, _):
            return "Fizz"
        case (_, 0):
            return "Buzz"
        case _:
            return str(number)


def fizzbuzz(count: int = COUNT) -> list[str]:
    """Return the FizzBuzz words for the numbers 1 to ``count``."""
    return [_word(number) for number in range(1, count + 1)]


def main(argv: list[str] | None = None) -> int:
    for word in fizzbuzz(COUNT):
        print(word)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())