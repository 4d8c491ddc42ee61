"""
Local derivation of Colombian national holidays.

Used whenever the external holiday source has no data for a year. Three rule
classes apply:

1. Fixed-date holidays, observed on their literal calendar date.
2. Fixed-date holidays moved to the following Monday when they do not already
   fall on one ("Ley Emiliani", Law 51 of 1983).
3. Easter-relative holidays. Holy Thursday and Good Friday are observed on
   their literal date; Ascension, Corpus Christi and Sacred Heart are moved to
   the following Monday.
"""

from datetime import date, timedelta
from typing import Dict, List, Tuple

from .models import HolidayClassification, HolidayRecord

FIXED_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "Año Nuevo"),
    (5, 1, "Día del Trabajo"),
    (7, 20, "Día de la Independencia"),
    (8, 7, "Batalla de Boyacá"),
    (12, 8, "Inmaculada Concepción"),
    (12, 25, "Navidad"),
)

MONDAY_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 6, "Día de los Reyes Magos"),
    (3, 19, "Día de San José"),
    (6, 29, "San Pedro y San Pablo"),
    (8, 15, "Asunción de la Virgen"),
    (10, 12, "Día de la Raza"),
    (11, 1, "Todos los Santos"),
    (11, 11, "Independencia de Cartagena"),
)

# (offset from Easter Sunday in days, moved to Monday, name)
EASTER_HOLIDAYS: Tuple[Tuple[int, bool, str], ...] = (
    (-3, False, "Jueves Santo"),
    (-2, False, "Viernes Santo"),
    (39, True, "Ascensión del Señor"),
    (60, True, "Corpus Christi"),
    (68, True, "Sagrado Corazón"),
)


def easter_sunday(year: int) -> date:
    """Easter Sunday of ``year`` (anonymous Gregorian algorithm)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def next_monday(d: date) -> date:
    """Return ``d`` if it is a Monday, otherwise the Monday after it."""
    return d + timedelta(days=(7 - d.weekday()) % 7)


def local_holiday_records(year: int) -> List[HolidayRecord]:
    """
    Compute all national holidays of ``year``, sorted by date.

    Two rules landing on the same date produce a single record; the first
    rule's name wins (fixed, then Monday-moved, then Easter-relative).
    """
    by_date: Dict[date, str] = {}

    for month, day, name in FIXED_HOLIDAYS:
        by_date.setdefault(date(year, month, day), name)

    for month, day, name in MONDAY_HOLIDAYS:
        by_date.setdefault(next_monday(date(year, month, day)), name)

    easter = easter_sunday(year)
    for offset, moved, name in EASTER_HOLIDAYS:
        observed = easter + timedelta(days=offset)
        if moved:
            observed = next_monday(observed)
        by_date.setdefault(observed, name)

    return [
        HolidayRecord(
            civil_date=observed,
            name=by_date[observed],
            classification=HolidayClassification.NATIONAL,
        )
        for observed in sorted(by_date)
    ]


def local_holidays_for_year(year: int) -> Tuple[date, ...]:
    """Sorted, de-duplicated holiday dates of ``year``."""
    return tuple(record.civil_date for record in local_holiday_records(year))
