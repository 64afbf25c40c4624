"""RRULE line composition."""

from typing import Union

from ..models.recurrence import RecurrenceRule
from ..utils.date_utils import format_date

# UNTIL is rendered as the until-day at midnight UTC
UNTIL_SUFFIX = "000000Z"


class RecurrenceRuleComposer:
    """Renders validated recurrence rules as RRULE field text."""

    def compose_value(self, rule: RecurrenceRule) -> str:
        """Rule parts after ``RRULE:``, in fixed order."""
        parts = [f"FREQ={rule.freq.value}"]
        if rule.until is not None:
            parts.append(f"UNTIL={format_date(rule.until, full_day=True)}{UNTIL_SUFFIX}")
        if rule.interval is not None:
            parts.append(f"INTERVAL={rule.interval}")
        if rule.count is not None:
            parts.append(f"COUNT={rule.count}")
        if rule.byday:
            parts.append("BYDAY=" + ",".join(day.value for day in rule.byday))
        return ";".join(parts)

    def compose(self, rule: Union[str, RecurrenceRule]) -> str:
        """
        Compose the full RRULE line.

        Args:
            rule: Raw override string (returned verbatim) or a validated rule

        Returns:
            Field line text, e.g. ``RRULE:FREQ=WEEKLY;INTERVAL=2``
        """
        if isinstance(rule, str):
            return rule
        return f"RRULE:{self.compose_value(rule)}"
