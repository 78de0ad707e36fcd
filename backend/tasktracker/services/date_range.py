"""Resolve named date presets into inclusive calendar-day ranges."""

import calendar
import logging
import re
from datetime import date, datetime, timedelta
from typing import NamedTuple, Optional
from zoneinfo import ZoneInfo

from tasktracker.config import settings
from tasktracker.errors import MalformedDateError

logger = logging.getLogger(__name__)

PRESET_ALL = "All"
PRESET_TODAY = "Today"
PRESET_YESTERDAY = "Yesterday"
PRESET_LAST_7_DAYS = "Last 7 Days"
PRESET_LAST_1_MONTH = "Last 1 Month"
PRESET_LAST_3_MONTHS = "Last 3 Months"
PRESET_LAST_6_MONTHS = "Last 6 Months"
PRESET_LAST_9_MONTHS = "Last 9 Months"
PRESET_LAST_1_YEAR = "Last 1 Year"
PRESET_SPECIFIC_DATE = "Specific Date"

PRESETS = (
    PRESET_ALL,
    PRESET_TODAY,
    PRESET_YESTERDAY,
    PRESET_LAST_7_DAYS,
    PRESET_LAST_1_MONTH,
    PRESET_LAST_3_MONTHS,
    PRESET_LAST_6_MONTHS,
    PRESET_LAST_9_MONTHS,
    PRESET_LAST_1_YEAR,
    PRESET_SPECIFIC_DATE,
)

MONTH_PRESETS = {
    PRESET_LAST_1_MONTH: 1,
    PRESET_LAST_3_MONTHS: 3,
    PRESET_LAST_6_MONTHS: 6,
    PRESET_LAST_9_MONTHS: 9,
    PRESET_LAST_1_YEAR: 12,
}

# Short keys sent by the older dashboard pages.
PRESET_ALIASES = {
    "all": PRESET_ALL,
    "today": PRESET_TODAY,
    "yesterday": PRESET_YESTERDAY,
    "week": PRESET_LAST_7_DAYS,
    "month": PRESET_LAST_1_MONTH,
    "year": PRESET_LAST_1_YEAR,
    "date": PRESET_SPECIFIC_DATE,
}

_DAY_PATTERN = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})(?=$|[T\s])")


class DateRange(NamedTuple):
    start: date
    end: date


def current_day() -> date:
    if settings.TASK_TIMEZONE:
        return datetime.now(ZoneInfo(settings.TASK_TIMEZONE)).date()
    return date.today()


def truncate_day(value: Optional[str]) -> Optional[str]:
    """Cut a date string down to its ``YYYY-MM-DD`` part.

    ``None`` stays ``None`` and strings without a leading ISO day are only
    stripped, so malformed input is kept for the filter to reject later.
    """
    if value is None:
        return None
    text = str(value).strip()
    match = _DAY_PATTERN.match(text)
    if match:
        return match.group(1)
    return text


def parse_day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = truncate_day(value) if value is not None else None
    if not text:
        raise MalformedDateError(value)
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise MalformedDateError(value)


def subtract_months(day: date, months: int) -> date:
    """Step back whole months, clamping to the last valid day of the target month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def canonical_preset(preset: Optional[str]) -> str:
    if preset is None:
        return PRESET_ALL
    key = str(preset).strip().lower()
    for name in PRESETS:
        if name.lower() == key:
            return name
    return PRESET_ALIASES.get(key, PRESET_ALL)


def effective_preset(preset: Optional[str], custom_date: Optional[str] = None) -> str:
    """Preset to apply when a request leaves it out: a picked day wins over the configured default."""
    if preset:
        return preset
    if custom_date:
        return PRESET_SPECIFIC_DATE
    return settings.DEFAULT_DATE_PRESET


def resolve_date_range(
    preset: Optional[str],
    custom_date: Optional[str] = None,
    today: Optional[date] = None,
) -> Optional[DateRange]:
    """Return the inclusive ``DateRange`` for a preset, or ``None`` for no restriction."""
    today = today or current_day()
    name = canonical_preset(preset)

    if name == PRESET_ALL:
        return None

    if name == PRESET_SPECIFIC_DATE:
        day = today
        if custom_date:
            try:
                day = parse_day(custom_date)
            except MalformedDateError:
                logger.debug("[tasks] custom date %r unparseable, using today", custom_date)
        return DateRange(day, day)

    if name == PRESET_TODAY:
        return DateRange(today, today)
    if name == PRESET_YESTERDAY:
        yesterday = today - timedelta(days=1)
        return DateRange(yesterday, yesterday)
    if name == PRESET_LAST_7_DAYS:
        return DateRange(today - timedelta(days=6), today)
    return DateRange(subtract_months(today, MONTH_PRESETS[name]), today)
