"""Team member records and the request used to add one."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

COMPENSATION_MIN = 2000
COMPENSATION_MAX = 99_999

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ValidationError(ValueError):
    """Raised when a record breaks one or more field rules.

    ``errors`` maps each offending field name to its message.
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{name}: {msg}" for name, msg in self.errors.items()))


def _required(errors: dict[str, str], name: str, value: str) -> None:
    if len(value) < 1:
        errors[name] = f"{name} is required"


def _compensation_in_range(errors: dict[str, str], value: int) -> None:
    if not COMPENSATION_MIN <= value <= COMPENSATION_MAX:
        errors["compensation"] = (
            f"compensation must be between {COMPENSATION_MIN} and {COMPENSATION_MAX}"
        )


def _read_fields(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    """Pull the dataclass fields of ``cls`` out of ``data``, checking their types."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a mapping for {cls.__name__}, got {type(data).__name__}")
    values: dict[str, Any] = {}
    for field in fields(cls):
        if field.name not in data:
            raise ValueError(f"missing field `{field.name}`")
        value = data[field.name]
        if field.type in ("int", int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field `{field.name}` must be an integer")
            if not _I32_MIN <= value <= _I32_MAX:
                raise ValueError(f"field `{field.name}` is out of range for a 32-bit integer")
        elif not isinstance(value, str):
            raise ValueError(f"field `{field.name}` must be a string")
        values[field.name] = value
    return values


@dataclass
class Person:
    """A member of the team."""

    uuid: str
    name: str
    title: str
    level: str
    compensation: int
    joined_date: str

    def validate(self) -> None:
        """Raise ValidationError if any field rule is broken."""
        errors: dict[str, str] = {}
        _required(errors, "name", self.name)
        _required(errors, "title", self.title)
        _required(errors, "level", self.level)
        _compensation_in_range(errors, self.compensation)
        if errors:
            raise ValidationError(errors)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Person":
        return cls(**_read_fields(cls, data))


@dataclass
class AddPersonRequest:
    """The details supplied when adding a new team member."""

    name: str
    title: str
    level: str
    compensation: int

    def validate(self) -> None:
        """Raise ValidationError if any field rule is broken."""
        errors: dict[str, str] = {}
        _required(errors, "name", self.name)
        _required(errors, "title", self.title)
        _required(errors, "level", self.level)
        _compensation_in_range(errors, self.compensation)
        if errors:
            raise ValidationError(errors)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AddPersonRequest":
        return cls(**_read_fields(cls, data))