"""Field/substring search over normalized records."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, Optional, Sequence

from fsinspect.errors import FilterError
from fsinspect.models import FilterSpec, Record
from fsinspect.utils.timestamps import format_timestamp


def parse_filter(expression: str) -> FilterSpec:
    """Split ``field:substring`` on the first colon."""
    field, sep, substring = expression.partition(":")
    if not sep:
        raise FilterError(
            "malformed expression, expected field:substring",
            path=expression,
            operation="invalid --search flag value",
        )
    if not field:
        raise FilterError(
            "search field is empty", path=expression, operation="invalid --search flag value"
        )
    return FilterSpec(field=field, substring=substring)


def stringify(value: Any) -> Optional[str]:
    """Render a field value as text for substring matching; None never matches."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def matches(spec: FilterSpec, record: Record) -> bool:
    if spec.field not in record:
        return False
    text = stringify(record[spec.field])
    return text is not None and spec.substring in text


def filter_records(expression: str, records: Sequence[Record]) -> List[Record]:
    """Keep matching records in their original relative order."""
    spec = parse_filter(expression)
    return [record for record in records if matches(spec, record)]
