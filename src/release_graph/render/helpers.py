from collections.abc import Mapping

_RECORD_SPECIAL = "{}|<>"


def escape_str(value: str) -> str:
    """Escape backslashes and double quotes for use inside a DOT quoted string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_dot_id(value: str) -> str:
    return f'"{escape_str(value)}"'


def to_dot_attrs(attrs: Mapping[str, str]) -> str:
    """Render ``{"shape": "Mrecord"}`` as ``[shape="Mrecord"]``; keys are sorted for stable output."""
    inner = ", ".join(f"{key}={to_dot_id(attrs[key])}" for key in sorted(attrs))
    return "[" + inner + "]"


def escape_record_field(value: str) -> str:
    """Backslash-escape characters that delimit fields in a record-shaped label.

    Backslashes are left to ``escape_str``, which runs when the label is written out.
    """
    return "".join(f"\\{ch}" if ch in _RECORD_SPECIAL else ch for ch in value)
