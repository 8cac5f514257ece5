"""Number, size, and date formatting for embed fields."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def delimited(number: int) -> str:
    """Format an integer with thousands separators: 1234567 -> '1,234,567'."""
    return f"{number:,}"


def human_size(size: int, precision: int = 3) -> str:
    """Format a byte count in binary-scaled units with significant-digit rounding.

    1 -> '1 Byte', 1023 -> '1023 Bytes', 1536 -> '1.5 KB', 1234567 -> '1.18 MB'.
    """
    if size < 1024:
        return f"{size} {'Byte' if size == 1 else 'Bytes'}"

    exponent = 0
    while exponent < len(SIZE_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = Decimal(size) / Decimal(1024**exponent)
    digits = value.adjusted() + 1
    # half-up, so 1.125 KB shows as 1.13 KB
    rounded = value.quantize(Decimal(1).scaleb(digits - precision), rounding=ROUND_HALF_UP)

    formatted = f"{rounded:f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return f"{formatted} {SIZE_UNITS[exponent]}"


def days_since(timestamp: int, now: datetime | None = None) -> int:
    """Whole calendar days between an epoch timestamp's date and today's date (UTC).

    Dates are compared, not elapsed time: an update at 23:59 yesterday is one
    day old at 00:01 today.
    """
    now = now or datetime.now(timezone.utc)
    then = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return (now.astimezone(timezone.utc).date() - then.date()).days


def freshness_label(days: int) -> str:
    """Human label for a day delta: 'Today', 'Yesterday', or 'N days ago'."""
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"
