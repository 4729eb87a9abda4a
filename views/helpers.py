from datetime import date

POSTER_PLACEHOLDER = "/api/placeholder/300/450"
ROW_PLACEHOLDER = "/api/placeholder/200/300"

# Months shown in the calendar picker, relative to the current month
MONTHS_BEFORE = 2
MONTHS_AFTER = 12

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def image_url(base_url, path, size="w500", placeholder=POSTER_PLACEHOLDER):
    """Full TMDb image URL for a stored relative path, or the placeholder."""
    if not path:
        return placeholder
    return f"{base_url.rstrip('/')}/{size}{path}"


def month_key(day):
    return f"{day.year}-{day.month:02d}"


def shift_month(day, offset):
    """First day of the month ``offset`` months away from ``day``."""
    index = day.year * 12 + (day.month - 1) + offset
    return date(index // 12, index % 12 + 1, 1)


def month_options(today=None):
    """(value, label) pairs from two months back to twelve months ahead."""
    today = today or date.today()
    options = []
    for offset in range(-MONTHS_BEFORE, MONTHS_AFTER + 1):
        first = shift_month(today, offset)
        options.append((month_key(first), f"{MONTH_NAMES[first.month - 1]} {first.year}"))
    return options


def format_date(iso_date, with_weekday=False):
    """'2025-03-07' -> 'Mar 7, 2025' (or 'Fri, Mar 7, 2025')."""
    try:
        day = date.fromisoformat(iso_date)
    except (TypeError, ValueError):
        return iso_date or ""
    text = f"{day.strftime('%b')} {day.day}, {day.year}"
    if with_weekday:
        text = f"{day.strftime('%a')}, {text}"
    return text


def is_upcoming(iso_date, today):
    return bool(iso_date) and iso_date > today
