from typing import Any, Callable, Optional

from orjson import dumps as orjson_dumps


def dumps(
    obj: Any,
    default: Optional[Callable[[Any], Any]] = None,
    option: int = 0,
) -> str:
    """
    Serializes a Python object to a compact JSON formatted str using orjson.

    Non-finite floats (``NaN``, ``inf``) are written as ``null``.

    Parameters
    ----------
    obj : Any   Must be JSON serializable.
    default : Optional[Callable]   Can use to override the default JSON serializer.
    option: int  orjson options.  Import from orjson import OPT_*.  Add using bitwise or |.

    Returns
    -------
    str  JSON formatted string.
    """
    return orjson_dumps(obj, default, option).decode("utf-8")
