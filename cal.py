import calendar
import logging
from collections import namedtuple
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

DAY_NAMES = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

MonthBlock = namedtuple('MonthBlock', ['label', 'columns', 'rows'])


class Locale(namedtuple('Locale', ['day_abbr', 'month_name', 'first_weekday'])):
    """Weekday names, month names and the default row start (0 = Monday).

    Names follow LC_TIME. The default row start does not: from_system takes
    it from calendar.firstweekday(), which is Monday unless
    calendar.setfirstweekday() was called, or from the first_weekday argument.
    """

    __slots__ = ()

    @classmethod
    def from_system(cls, first_weekday=None):
        # calendar's name tables follow the current LC_TIME setting
        return cls(
            tuple(calendar.day_abbr),
            tuple(calendar.month_name),
            calendar.firstweekday() if first_weekday is None else first_weekday,
        )

    @classmethod
    def english(cls, first_weekday=0):
        return cls(
            tuple(name[:3].title() for name in DAY_NAMES),
            ('', 'January', 'February', 'March', 'April', 'May', 'June', 'July',
             'August', 'September', 'October', 'November', 'December'),
            first_weekday,
        )


class HighlightDays:
    """Cursor over an ascending run of day-of-month numbers.

    Each number is matched at most once, the first time the walk reaches a
    day with that number while it is at the head. Numbers are never re-sorted,
    so an unsorted run only highlights its matching prefix.
    """

    def __init__(self, days=()):
        self._days = tuple(days)
        self._pos = 0

    def __bool__(self):
        return self._pos < len(self._days)

    @property
    def remaining(self):
        return self._days[self._pos:]

    def match(self, day):
        if self and self._days[self._pos] == day:
            self._pos += 1
            return True
        return False


def parse_date(text):
    return datetime.strptime(text, "%Y-%m-%d").date()


def parse_weekday(text):
    text = text.strip().lower()
    if text.isdigit():
        if int(text) < 7:
            return int(text)
        raise ValueError(f'weekday out of range: {text}')

    matches = [i for i, name in enumerate(DAY_NAMES) if text and name.startswith(text)]
    if len(matches) != 1:
        raise ValueError(f'unknown weekday: {text!r}')
    return matches[0]


def parse_day_range(text):
    """'7' -> [7], '3-6' -> [3, 4, 5, 6]"""
    first, _, last = text.partition('-')
    first = int(first)
    last = int(last) if last else first
    if not (1 <= first <= last <= 31):
        raise ValueError(f'day out of range: {text}')
    return list(range(first, last + 1))


def month_start(day):
    return day.replace(day=1)


def next_month(day):
    return date(day.year + day.month // 12, day.month % 12 + 1, 1)


def format_day(day, highlight_days, highlight_dates):
    cell = f' {day.day:02d} '

    if day in highlight_dates:
        cell = f'*{day.day:02d}*'

    # a day-number match replaces the date marker
    if highlight_days.match(day.day):
        logger.debug('highlight day %d consumed at %s', day.day, day)
        cell = f'[{day.day:02d}]'

    return cell


def month_block(first, first_weekday, highlight_days, highlight_dates, locale):
    end = next_month(first)

    day = first
    while day.weekday() != first_weekday:
        day -= timedelta(days=1)

    columns = []
    rows = []
    row = {}
    while day < end or day.weekday() != first_weekday:
        label = locale.day_abbr[day.weekday()]
        if label not in columns:
            columns.append(label)
        row[label] = format_day(day, highlight_days, highlight_dates)

        day += timedelta(days=1)
        if day.weekday() == first_weekday:
            rows.append(row)
            row = {}

    label = f'{locale.month_name[first.month]} {first.year}'
    return MonthBlock(label, columns, rows)


def cal(start, end, first_weekday=None, highlight_days=(), highlight_dates=(), locale=None):
    if locale is None:
        locale = Locale.from_system()
    if first_weekday is None:
        first_weekday = locale.first_weekday
    if first_weekday not in range(7):
        raise ValueError(f'weekday out of range: {first_weekday}')

    highlight_days = HighlightDays(highlight_days)
    highlight_dates = set(highlight_dates)

    month = month_start(start)
    last = month_start(end)

    blocks = []
    while month <= last:
        logger.debug('building %s (week starts on %s)', month.strftime('%Y-%m'), DAY_NAMES[first_weekday])
        blocks.append(month_block(month, first_weekday, highlight_days, highlight_dates, locale))
        month = next_month(month)

    if highlight_days:
        logger.debug('highlight days never reached: %s', list(highlight_days.remaining))

    return blocks
