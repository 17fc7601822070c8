"""
db/row_mapper.py
----------------
Translates result rows into model objects by matching column names to
dataclass field names.
"""

from dataclasses import fields
from typing import Any, Mapping, Type, TypeVar

T = TypeVar("T")


def extract(row: Mapping[str, Any], cls: Type[T]) -> T:
    """
    Build an instance of the dataclass `cls` from a dict-like row.

    Columns without a matching field are ignored (e.g. the keys of a
    join table). Fields without a matching column keep their defaults,
    which is how child collections stay empty.

    Args:
        row: A mapping of column name to value, such as a RealDictRow.
        cls: The model dataclass to instantiate.

    Returns:
        A new `cls` instance.
    """
    values = {f.name: row[f.name] for f in fields(cls) if f.init and f.name in row}
    return cls(**values)
