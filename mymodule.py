"""
mymodule - Example module that creates a Person type.

A mutable record with two text fields and one integer field, default-valued
construction, a custom string conversion and one derived accessor.

Architecture: Functional Core, Imperative Shell
- Data: the Person record and an immutable PersonFields struct
- Computations: pure functions (argument parsing, version comparison)
- Renderers: pure functions (data → str)
- Actions: logging and interpreter inspection at module load only

>>> import mymodule
>>> p = mymodule.Person(first_name="Isaac", last_name="Newton", number=42)
>>> print(p)
Person(first_name=Isaac, last_name=Newton, number=42)
>>> print(p.name())
Isaac Newton
"""

from __future__ import annotations

import logging
import operator
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping, Sequence

logger = logging.getLogger(__name__)


DEFAULT_FIRST_NAME = "John"
DEFAULT_LAST_NAME = "Doe"
DEFAULT_NUMBER = 42

# Positional order accepted by Person(...)
FIELD_ORDER: tuple[str, ...] = ("first_name", "last_name", "number")
TEXT_FIELDS: tuple[str, ...] = ("first_name", "last_name")

# (major, minor) of the interpreter this module targets
BUILT_FOR: tuple[int, int] = (3, 10)


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


class PersonError(Exception):
    """Base class for every error raised by this module."""


class ArityError(PersonError, TypeError):
    """Bad argument shape: too many positionals, unknown or duplicate keyword."""


class TypeMismatchError(PersonError, TypeError):
    """A field value has the wrong type."""


class MissingFieldError(PersonError, AttributeError):
    """A text field was read while absent (only reachable after ``del``)."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is not set")
        self.field = field


class InitializationFailure(PersonError):
    """Module setup could not complete."""


class VersionMismatchFatal(InitializationFailure, ImportError):
    """The running interpreter has a different major version."""


class VersionDifference(Enum):
    """How the running interpreter compares to BUILT_FOR."""

    DIFFERENT_MAJOR = auto()
    DIFFERENT_MINOR = auto()
    SAME = auto()


@dataclass(frozen=True)
class PersonFields:
    """The three Person fields with their defaults (pure data)."""

    first_name: str = DEFAULT_FIRST_NAME
    last_name: str = DEFAULT_LAST_NAME
    number: int = DEFAULT_NUMBER


# =============================================================================
# PURE FUNCTIONS (Computations) - No I/O, no side effects, no logging
# =============================================================================


def coerce_text(field: str, value: object) -> str:
    """
    Validate a name field value.

    Pure: (str, object) -> str
    """
    if not isinstance(value, str):
        raise TypeMismatchError(
            f"{field} must be str, not {type(value).__name__}"
        )
    return value


def coerce_number(field: str, value: object) -> int:
    """
    Validate an integer field value.

    Anything implementing the integer protocol is accepted and normalized
    to a plain int (so True becomes 1).

    Pure: (str, object) -> int
    """
    try:
        return int(operator.index(value))
    except TypeError as exc:
        raise TypeMismatchError(
            f"{field} must be an integer, not {type(value).__name__}"
        ) from exc


def coerce_field(field: str, value: object) -> Any:
    """Dispatch to the validator for ``field``. Pure."""
    if field in TEXT_FIELDS:
        return coerce_text(field, value)
    return coerce_number(field, value)


def parse_person_args(
    args: Sequence[object],
    kwargs: Mapping[str, object],
) -> dict[str, Any]:
    """
    Map Person(...) call arguments onto field names.

    Returns only the fields the caller supplied, already validated, in
    FIELD_ORDER. Fields that were not supplied are absent from the result so
    the caller can leave them untouched.

    Pure: (args, kwargs) -> dict[str, Any]
    """
    if len(args) > len(FIELD_ORDER):
        raise ArityError(
            f"Person() takes at most {len(FIELD_ORDER)} arguments "
            f"({len(args)} given)"
        )

    supplied: dict[str, object] = dict(zip(FIELD_ORDER, args))

    for key, value in kwargs.items():
        if key not in FIELD_ORDER:
            raise ArityError(f"'{key}' is an invalid keyword argument for Person()")
        if key in supplied:
            position = FIELD_ORDER.index(key) + 1
            raise ArityError(
                f"argument for Person() given by name ('{key}') "
                f"and position ({position})"
            )
        supplied[key] = value

    return {
        field: coerce_field(field, supplied[field])
        for field in FIELD_ORDER
        if field in supplied
    }


def version_difference(
    built_for: Sequence[int],
    running: Sequence[int],
) -> VersionDifference:
    """
    Compare (major, minor) pairs.

    Pure: (built_for, running) -> VersionDifference
    """
    try:
        built_major, built_minor = built_for[0], built_for[1]
        major, minor = running[0], running[1]
    except (TypeError, IndexError) as exc:
        raise InitializationFailure(
            f"cannot read a (major, minor) version from {running!r}"
        ) from exc

    if major != built_major:
        return VersionDifference.DIFFERENT_MAJOR
    if minor != built_minor:
        return VersionDifference.DIFFERENT_MINOR
    return VersionDifference.SAME


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_person(fields: PersonFields) -> str:
    """Render the Person string form. Pure: PersonFields -> str."""
    return (
        f"Person(first_name={fields.first_name}, "
        f"last_name={fields.last_name}, "
        f"number={fields.number})"
    )


def render_name(first_name: str, last_name: str) -> str:
    """Render a full name. Pure: (str, str) -> str."""
    return f"{first_name} {last_name}"


# =============================================================================
# RECORD
# =============================================================================


class TextField:
    """Name field backed by a slot; may be deleted, never set to a non-str."""

    def __init__(self, doc: str) -> None:
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = f"_{name}"

    def is_set(self, obj: object) -> bool:
        return hasattr(obj, self.slot)

    def __get__(self, obj: object | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        try:
            return getattr(obj, self.slot)
        except AttributeError:
            raise MissingFieldError(self.name) from None

    def __set__(self, obj: object, value: object) -> None:
        setattr(obj, self.slot, coerce_text(self.name, value))

    def __delete__(self, obj: object) -> None:
        if not self.is_set(obj):
            raise MissingFieldError(self.name)
        delattr(obj, self.slot)


class NumberField:
    """Integer field backed by a slot; cannot be deleted."""

    def __init__(self, doc: str) -> None:
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = f"_{name}"

    def __get__(self, obj: object | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self.slot)

    def __set__(self, obj: object, value: object) -> None:
        setattr(obj, self.slot, coerce_number(self.name, value))

    def __delete__(self, obj: object) -> None:
        raise TypeError(f"can't delete numeric attribute '{self.name}'")


class Person:
    """Person object"""

    __slots__ = ("_first_name", "_last_name", "_number")

    first_name = TextField("First name of the person")
    last_name = TextField("Last name of the person")
    number = NumberField("Number of the person")

    def __new__(cls, *args: object, **kwargs: object) -> Person:
        # Defaults are in place before __init__ runs.
        self = super().__new__(cls)
        self._first_name = DEFAULT_FIRST_NAME
        self._last_name = DEFAULT_LAST_NAME
        self._number = DEFAULT_NUMBER
        return self

    def __init__(self, *args: object, **kwargs: object) -> None:
        """
        Person(first_name="John", last_name="Doe", number=42)

        Any subset of the fields may be given by position or keyword;
        omitted fields keep their current value.
        """
        # Validate everything before touching the record.
        overrides = parse_person_args(args, kwargs)
        for field, value in overrides.items():
            setattr(self, field, value)

    @classmethod
    def from_fields(cls, fields: PersonFields) -> Person:
        """Build a Person from a PersonFields struct."""
        return cls(fields.first_name, fields.last_name, fields.number)

    def fields(self) -> PersonFields:
        """Snapshot the current values. Raises MissingFieldError if a name was deleted."""
        return PersonFields(
            first_name=self.first_name,
            last_name=self.last_name,
            number=self.number,
        )

    def name(self) -> str:
        """Return the name of a person combining first and last names"""
        if not Person.first_name.is_set(self):
            raise MissingFieldError("first_name")
        if not Person.last_name.is_set(self):
            raise MissingFieldError("last_name")
        return render_name(self.first_name, self.last_name)

    def __str__(self) -> str:
        return render_person(self.fields())


# =============================================================================
# ACTIONS (Effects) - logging happens here only
# =============================================================================


def check_runtime_version(
    built_for: Sequence[int] = BUILT_FOR,
    running: Sequence[int] = sys.version_info,
) -> VersionDifference:
    """
    Verify the running interpreter can host this module. Action.

    A major mismatch is fatal. A minor mismatch is logged and tolerated.
    """
    difference = version_difference(built_for, running)

    match difference:
        case VersionDifference.DIFFERENT_MAJOR:
            logger.error(
                "mymodule was built for Python %d but is running on Python %d",
                built_for[0],
                running[0],
            )
            raise VersionMismatchFatal(
                f"mymodule requires Python {built_for[0]}, "
                f"running Python {running[0]}"
            )
        case VersionDifference.DIFFERENT_MINOR:
            logger.info(
                "mymodule was built for Python %d.%d but is running on Python %d.%d",
                built_for[0],
                built_for[1],
                running[0],
                running[1],
            )
        case VersionDifference.SAME:
            pass

    return difference


# =============================================================================
# MODULE INIT
# =============================================================================


check_runtime_version()
