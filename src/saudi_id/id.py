"""
Saudi Arabian national ID numbers.

An ID is 10 decimal digits which pass the Luhn check, where the first digit says who holds it: 1 for citizens, 2 for
residents. Valid IDs can be parsed from an int, a string or a sequence of digits, and random valid ones generated for
testing software that consumes them.
"""

import enum
import logging
import random
import typing as t

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer, model_validator

from saudi_id import luhn

logger = logging.getLogger(__name__)

ID_SIZE = 10
CITIZEN_PREFIX = 1
RESIDENT_PREFIX = 2


class IdType(enum.StrEnum):
    """
    Who an ID belongs to. Can be looked up case-insensitively or by its prefix digit:

        IdType("Citizen")  # IdType.CITIZEN
        IdType("2")  # IdType.RESIDENT
    """

    CITIZEN = enum.auto()
    RESIDENT = enum.auto()

    @property
    def prefix(self) -> int:
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, digit: int) -> "IdType":
        for member, prefix in _PREFIXES.items():
            if prefix == digit:
                return member
        raise ValueError(f"No ID type has prefix {digit!r}")

    @classmethod
    def _missing_(cls, value: object) -> t.Any | None:
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if member.value == value:
                    return member
            if value.isascii() and value.isdigit():
                value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls.from_prefix(value)
            except ValueError:
                return None
        return None


_PREFIXES: dict[IdType, int] = {
    IdType.CITIZEN: CITIZEN_PREFIX,
    IdType.RESIDENT: RESIDENT_PREFIX,
}


class InvalidIdReason(enum.StrEnum):
    NOT_A_NUMBER = "not a number"
    WRONG_LENGTH = "wrong length"
    BAD_PREFIX = "bad prefix"
    BAD_CHECKSUM = "bad checksum"


class ParseError(ValueError):
    pass


class InvalidIdError(ParseError):
    """
    Raised when a value can't be turned into an `Id`. `reason` says which rule it broke first.
    """

    def __init__(self, value: t.Any, reason: InvalidIdReason) -> None:
        super().__init__(f"Invalid national ID {value!r}: {reason}")
        self.value = value
        self.reason = reason


def _reject(value: t.Any, reason: InvalidIdReason) -> t.NoReturn:
    logger.debug("Rejected national ID %r: %s", value, reason)
    raise InvalidIdError(value, reason)


class Id(BaseModel):
    """
    A valid national ID. Build one with `from_int`, `from_str`, `from_digits`, `parse` or `new`; instances are
    immutable and compare equal when their digits do.

    Can also be used as a field in other pydantic models, where it accepts any of the representations `parse` does
    and serializes to the 10 digit string.

    `model_construct` and `model_copy(update=...)` skip validation like they do for any pydantic model, so an `Id`
    built through them is only as valid as the digits handed in.
    """

    model_config = ConfigDict(frozen=True)

    digits: tuple[int, ...]

    @classmethod
    def validate_digits(cls, digits: t.Sequence[t.Any], source: t.Any = None) -> None:
        """
        Raise `InvalidIdError` unless `digits` are exactly 10 digits starting with a known prefix and passing the
        Luhn check.

        :param source: What the digits were parsed from, reported in the error instead of the digits.
        """
        if source is None:
            source = digits
        if not all(luhn.is_digit(d) for d in digits):
            _reject(source, InvalidIdReason.NOT_A_NUMBER)
        if len(digits) != ID_SIZE:
            _reject(source, InvalidIdReason.WRONG_LENGTH)
        if digits[0] not in _PREFIXES.values():
            _reject(source, InvalidIdReason.BAD_PREFIX)
        if not luhn.validate(digits):
            _reject(source, InvalidIdReason.BAD_CHECKSUM)

    @classmethod
    def from_digits(cls, digits: t.Iterable[int]) -> "Id":
        digits = tuple(digits)
        cls.validate_digits(digits)
        return cls(digits=digits)

    @classmethod
    def from_int(cls, value: int) -> "Id":
        if isinstance(value, bool) or value < 0:
            _reject(value, InvalidIdReason.NOT_A_NUMBER)

        # Anything below 10^9 comes out too short, and 0 comes out empty
        digits: list[int] = []
        remaining = value
        while remaining > 0:
            remaining, digit = divmod(remaining, 10)
            digits.insert(0, digit)
        cls.validate_digits(digits, source=value)
        return cls(digits=tuple(digits))

    @classmethod
    def from_str(cls, value: str) -> "Id":
        """
        Parse an ID from plain ASCII digits. No sign, whitespace or separators are allowed.

        The text is read digit by digit so a leading zero is kept, and rejected as a bad prefix.
        """
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        try:
            digits = luhn.digits_of(value)
        except ValueError:
            _reject(value, InvalidIdReason.NOT_A_NUMBER)
        cls.validate_digits(digits, source=value)
        return cls(digits=tuple(digits))

    @classmethod
    def parse(cls, value: "Id | int | str | t.Iterable[int]") -> "Id":
        if isinstance(value, Id):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, t.Iterable):
            return cls.from_digits(value)
        raise TypeError(f"Can't parse a national ID from {type(value).__name__}")

    @classmethod
    def is_valid(cls, value: "Id | int | str | t.Iterable[int]") -> bool:
        try:
            cls.parse(value)
        except ParseError:
            return False
        return True

    @classmethod
    def new(cls, id_type: IdType | str, rng: random.Random | None = None) -> "Id":
        """
        Generate a random valid ID of the given type.

        :param rng: Passed through to `luhn.generate_with_prefix`, for repeatable output in tests.
        """
        id_type = IdType(id_type)
        # Can't fail for a fixed size and a single digit prefix
        digits = luhn.generate_with_prefix(ID_SIZE, [id_type.prefix], rng=rng)
        try:
            generated = cls.from_digits(digits)
        except InvalidIdError as e:
            raise RuntimeError(f"Generated an invalid {id_type} ID: {digits!r}") from e
        logger.debug("Generated %s ID %s", id_type, generated)
        return generated

    def get_type(self) -> IdType:
        try:
            return IdType.from_prefix(self.digits[0])
        except ValueError as e:
            # Construction already checked the prefix, so this is a bug rather than bad input
            raise RuntimeError(f"Id {self} has an unknown prefix") from e

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __int__(self) -> int:
        return int(str(self))

    def __repr__(self) -> str:
        return f"Id({str(self)!r})"

    @model_validator(mode="before")
    @classmethod
    def coerce_input(cls, data: t.Any) -> t.Any:
        # Lets a field typed `Id` accept the same things `parse` does
        if isinstance(data, (Id, dict)):
            return data
        if isinstance(data, str):
            return {"digits": luhn.digits_of(data)}
        if isinstance(data, int) and not isinstance(data, bool):
            return {"digits": cls.from_int(data).digits}
        if isinstance(data, (list, tuple)):
            return {"digits": data}
        return data

    @field_validator("digits", mode="before")
    @classmethod
    def check_digits(cls, digits: t.Any) -> t.Any:
        # Runs on the raw input, before lax mode can turn "1", 1.0 or True into 1
        if isinstance(digits, t.Iterable) and not isinstance(digits, (str, bytes, dict)):
            digits = tuple(digits)
            cls.validate_digits(digits)
        return digits

    @model_serializer
    def serialize(self) -> str:
        return str(self)
