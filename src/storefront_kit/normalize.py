from __future__ import annotations
import numbers


QUOTE_TRIGGERS = (",", '"', "\n")


def to_text(v) -> str:
    """Render a scalar catalog value the way the import file expects it.

    None -> '', booleans -> 'true'/'false', 120.0 -> '120'.
    """
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, numbers.Number):
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)
    return str(v)


def text_or(v, default: str = "") -> str:
    # Falsy values (missing, '', 0) fall back to the default
    return to_text(v) if v else default


def bool_flag(v) -> str:
    return "true" if v else "false"


def join_tags(tags) -> str:
    if not isinstance(tags, list):
        return ""
    return ", ".join(to_text(t) for t in tags)


def escape_csv(value) -> str:
    if value is None:
        return ""
    s = to_text(value)
    if any(ch in s for ch in QUOTE_TRIGGERS):
        return '"' + s.replace('"', '""') + '"'
    return s


def format_row(cells) -> str:
    return ",".join(escape_csv(c) for c in cells)
