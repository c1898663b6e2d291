"""Calendar date value type used for APOD records and output filenames."""

import re
from datetime import date

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DateString(str):
    """A calendar date in ``YYYY-MM-DD`` form.

    Behaves as a plain string so it can be formatted directly into
    filenames, but construction rejects anything that is not a real
    calendar date (no time part, no timezone, four-digit years only).

    Example:
        day = DateString("2021-03-08")
        f"{day}_image.jpg"  # "2021-03-08_image.jpg"
    """

    def __new__(cls, value: str) -> "DateString":
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD")
        try:
            date.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"Invalid calendar date {value!r}: {e}") from e
        return super().__new__(cls, value)

    @classmethod
    def from_date(cls, value: date) -> "DateString":
        return cls(value.isoformat())

    @property
    def date(self) -> date:
        return date.fromisoformat(str(self))

    def __repr__(self) -> str:
        return f"DateString({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: object, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )
