from typing import Any


def as_text(value: Any) -> str:
    """
    Loose text coercion for required text fields.
    - missing/null -> "", booleans lowercase, whole floats without ".0"
    - arrays join their items with ",", objects become "[object Object]"
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(as_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def is_truthy(value: Any) -> bool:
    # JSON arrays and objects count as set, even when empty
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def only_string(value: Any):
    return value if isinstance(value, str) else None


def only_bool(value: Any):
    return value if isinstance(value, bool) else None
