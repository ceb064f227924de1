import re
import time
from decimal import Decimal, ROUND_HALF_UP

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def parse_list(value):
    """Split a comma separated setting into a list of unique, trimmed entries."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        entries = value
    else:
        entries = str(value).split(",")

    result = []
    for entry in entries:
        entry = str(entry).strip()
        if entry and entry not in result:
            result.append(entry)
    return result


def serialize_list(values):
    return ",".join(parse_list(values))


def generate_order_number(prefix="TSF", now_ms=None):
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{prefix}-{str(now_ms)[-6:]}"


def to_decimal(value):
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_price(price):
    return "Rs. {:.2f}".format(to_decimal(price))


def is_valid_email(email):
    return bool(email) and bool(EMAIL_PATTERN.match(email))


def digits_only(phone):
    return re.sub(r"\D", "", phone or "")
