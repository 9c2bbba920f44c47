"""Typed reads over the flat key -> value map returned by the extraction service.

Every read returns a typed default instead of failing: a missing key, a null
value or an unparseable number all degrade to "" / 0 / 0.0. Non-finite values
("NaN", "inf") and underscore digit grouping count as unparseable.
"""

import math
from collections.abc import Mapping
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FieldReader:
    def __init__(self, data: Mapping[str, Any]):
        self.data = data

    def get_str(self, key: str, default: str = "") -> str:
        value = self.data.get(key)
        if value is None:
            return default
        if isinstance(value, str):
            return value
        return str(value)

    def get_int(self, key: str) -> int:
        value = self.data.get(key)
        if _is_number(value):
            return int(value) if math.isfinite(value) else 0
        if isinstance(value, str) and "_" not in value:
            try:
                return int(value.strip())
            except ValueError:
                return 0
        return 0

    def get_float(self, key: str) -> float:
        value = self.data.get(key)
        if _is_number(value):
            result = float(value)
        elif isinstance(value, str) and "_" not in value:
            try:
                result = float(value.strip())
            except ValueError:
                return 0.0
        else:
            return 0.0
        # JSON columns cannot store NaN or infinity
        return result if math.isfinite(result) else 0.0
