"""
Answer formatting
-----------------
Turns a raw submitted value into the string printed next to a field label.
Nothing in here raises: values that cannot be interpreted are printed as-is.
"""
from datetime import datetime

from .model import (
    CHECKBOX, DATE, DROPDOWN, LONG_TEXT, MULTI_CHOICE, NUMBER, RADIO, SHORT_TEXT,
)

DATE_FORMAT = "%d/%m/%Y"

NOT_SELECTED = "Not selected"
NONE_SELECTED = "None selected"
NOT_SPECIFIED = "Not specified"

_DATE_INPUTS = ("%Y-%m-%d", "%d/%m/%Y", "%d.%m.%Y")


# ── dates ─────────────────────────────────────────────────────────────────────
def parse_date(s):
    """Parse an ISO-ish date string; None when it isn't one."""
    s = str(s).strip()
    if not s:
        return None
    iso = s[:-1] + "+00:00" if s.endswith("Z") else s
    try:
        return datetime.fromisoformat(iso).date()
    except ValueError:
        pass
    for fmt in _DATE_INPUTS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def fmt_date(raw, date_format=DATE_FORMAT):
    if raw is None or str(raw).strip() == "":
        return NOT_SPECIFIED
    d = parse_date(raw)
    return d.strftime(date_format) if d else str(raw)


# ── per type ──────────────────────────────────────────────────────────────────
def fmt_checkbox(raw, date_format=DATE_FORMAT):
    return "Yes" if raw else "No"


def fmt_multi_choice(raw, date_format=DATE_FORMAT):
    if isinstance(raw, dict):
        picked = [str(k) for k, v in raw.items() if v]
    elif isinstance(raw, (list, tuple)):
        picked = [str(v) for v in raw if v]
    else:
        picked = []
    return ", ".join(picked) if picked else NONE_SELECTED


def fmt_choice(raw, date_format=DATE_FORMAT):
    if raw is None or raw == "":
        return NOT_SELECTED
    return str(raw)


def fmt_text(raw, date_format=DATE_FORMAT):
    return "" if raw is None else str(raw)


FORMATTERS = {
    CHECKBOX: fmt_checkbox,
    MULTI_CHOICE: fmt_multi_choice,
    RADIO: fmt_choice,
    DROPDOWN: fmt_choice,
    DATE: fmt_date,
    SHORT_TEXT: fmt_text,
    LONG_TEXT: fmt_text,
    NUMBER: fmt_text,
}


def format_value(field_type, raw, date_format=DATE_FORMAT):
    fn = FORMATTERS.get(field_type, fmt_text)
    try:
        return fn(raw, date_format)
    except (ValueError, TypeError):
        return str(raw)
