"""Recurrence rule validation."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..models.recurrence import Frequency, RecurrenceRule, RecurrenceViolation, Weekday
from ..utils.date_utils import parse_date_like
from ..utils.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

MAX_BYDAY = 7
KNOWN_KEYS = ("freq", "until", "interval", "count", "byday")

RecurrenceSpec = Union[str, Mapping[str, Any], RecurrenceRule]


@dataclass(frozen=True)
class RecurrenceValidation:
    """Outcome of validating a recurrence spec.

    On success ``rule`` holds either the raw override string or the
    normalized RecurrenceRule; on failure ``violation`` names the first
    check that failed.
    """

    rule: Optional[Union[str, RecurrenceRule]] = None
    violation: Optional[RecurrenceViolation] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.violation is None


def _fail(violation: RecurrenceViolation, message: str) -> RecurrenceValidation:
    return RecurrenceValidation(violation=violation, message=message)


def _positive_int(value: Any) -> Optional[int]:
    """Return value as a positive int, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
    else:
        return None
    return number if number >= 1 else None


class RecurrenceRuleValidator:
    """Validates recurrence specs against the supported RRULE subset."""

    def validate(self, spec: RecurrenceSpec) -> RecurrenceValidation:
        """
        Validate and normalize a recurrence spec.

        Args:
            spec: Raw RRULE override string, mapping of rule parts
                (freq, until, interval, count, byday), or RecurrenceRule

        Returns:
            RecurrenceValidation with the normalized rule or the first violation
        """
        if isinstance(spec, str):
            # Raw overrides are passed through untouched
            return RecurrenceValidation(rule=spec)
        if isinstance(spec, RecurrenceRule):
            # Rules built with model_construct skip model validation
            spec = spec.model_dump()
        if not isinstance(spec, Mapping):
            return _fail(
                RecurrenceViolation.FREQUENCY,
                f"Recurrence must be a string or a mapping, got {type(spec).__name__}",
            )

        unknown = [key for key in spec if key not in KNOWN_KEYS]
        if unknown:
            logger.debug(f"Ignoring unknown recurrence keys: {', '.join(map(str, unknown))}")

        freq = spec.get("freq")
        if freq not in [f.value for f in Frequency]:
            return _fail(
                RecurrenceViolation.FREQUENCY,
                "Recurrence frequency must be provided and be one of the following: "
                + ", ".join(f.value for f in Frequency),
            )

        until = None
        if spec.get("until") not in (None, ""):
            try:
                until = parse_date_like(spec["until"])
            except InvalidDateError:
                return _fail(
                    RecurrenceViolation.UNTIL,
                    "Recurrence 'until' must be a valid date",
                )

        interval = None
        if spec.get("interval") is not None:
            interval = _positive_int(spec["interval"])
            if interval is None:
                return _fail(
                    RecurrenceViolation.INTERVAL,
                    "Recurrence 'interval' must be a positive integer",
                )

        count = None
        if spec.get("count") is not None:
            count = _positive_int(spec["count"])
            if count is None:
                return _fail(
                    RecurrenceViolation.COUNT,
                    "Recurrence 'count' must be a positive integer",
                )

        byday: tuple[Weekday, ...] = ()
        raw_byday = spec.get("byday")
        if raw_byday is not None:
            if isinstance(raw_byday, (str, bytes)) or not isinstance(raw_byday, Sequence):
                return _fail(
                    RecurrenceViolation.BYDAY_TYPE,
                    "Recurrence 'byday' must be a list",
                )

            # Length is checked before duplicates are dropped
            if len(raw_byday) > MAX_BYDAY:
                return _fail(
                    RecurrenceViolation.BYDAY_LENGTH,
                    "Recurrence 'byday' must not be longer than the 7 days in a week",
                )

            unique: list[Any] = []
            for code in raw_byday:
                if code not in unique:
                    unique.append(code)

            valid_codes = [d.value for d in Weekday]
            for code in unique:
                if code not in valid_codes:
                    return _fail(
                        RecurrenceViolation.BYDAY_VALUE,
                        "Recurrence 'byday' values must include only the following: "
                        + ", ".join(valid_codes),
                    )
            byday = tuple(Weekday(code) for code in unique)

        rule = RecurrenceRule(
            freq=Frequency(freq),
            until=until,
            interval=interval,
            count=count,
            byday=byday,
        )
        return RecurrenceValidation(rule=rule)
