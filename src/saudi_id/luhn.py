"Luhn checksum over decimal digit sequences. Nothing in here knows about national ID formats."

import random
import typing as t

_system_random = random.SystemRandom()


def digits_of(value: str | int) -> list[int]:
    """
    Split a non-negative integer or a string of ASCII digits into its digits, most-significant first.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Negative numbers have no digits: {value}")
        value = str(value)
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"Not a string of digits: {value!r}")
    return [int(d) for d in value]


def is_digit(value: t.Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 9


def checksum(digits: t.Sequence[int]) -> int:
    """
    Sum the digits, with every second digit counting from the right doubled (and its own digits summed), mod 10.
    """
    digits = list(digits)
    odd_digits = digits[-1::-2]
    even_digits = digits[-2::-2]
    total = sum(odd_digits)
    for d in even_digits:
        total += sum(divmod(d * 2, 10))
    return total % 10


def validate(digits: t.Sequence[int]) -> bool:
    """
    Check if the digits pass the Luhn check. Works on any length; anything that isn't a digit fails.
    """
    if not all(is_digit(d) for d in digits):
        return False
    return checksum(digits) == 0


def calc_check_digit(payload: t.Sequence[int]) -> int:
    """
    Return the digit which, appended to `payload`, gives a valid sequence.
    """
    return (10 - checksum([*payload, 0])) % 10


def generate_with_prefix(length: int, prefix: t.Sequence[int], rng: random.Random | None = None) -> list[int]:
    """
    Generate a random valid sequence of exactly `length` digits starting with `prefix`.

    :param rng: Source of randomness, defaults to the OS one. Pass a seeded `random.Random` for repeatable output.
    """
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    if len(prefix) >= length:
        raise ValueError(f"prefix of {len(prefix)} digits leaves no room for a check digit in {length}")
    if not all(is_digit(d) for d in prefix):
        raise ValueError(f"prefix must only contain digits 0-9, got {list(prefix)!r}")

    rng = rng or _system_random
    payload = [*prefix, *(rng.randrange(10) for _ in range(length - len(prefix) - 1))]
    return [*payload, calc_check_digit(payload)]
