"""JSON and line-oriented output for inspection results."""

from __future__ import annotations

import base64
import json
import sys
from datetime import datetime
from typing import Any, Iterable, Sequence, TextIO

from rich.console import Console
from rich.json import JSON

from fsinspect.models import Record
from fsinspect.utils.timestamps import format_timestamp


def _encode_value(value: Any) -> Any:
    """Encode store value types the json module does not know about."""
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    # GeoPoint
    if hasattr(value, "latitude") and hasattr(value, "longitude"):
        return {"latitude": value.latitude, "longitude": value.longitude}
    # DocumentReference
    if isinstance(getattr(value, "path", None), str):
        return value.path
    return str(value)


def dump_records(records: Sequence[Record]) -> str:
    return json.dumps(list(records), indent=2, ensure_ascii=False, default=_encode_value)


def present_records(
    records: Sequence[Record], *, color: bool = True, file: TextIO | None = None
) -> None:
    """Write records as a 2-space indented JSON array, colorized on request."""
    text = dump_records(records)
    if not color:
        out = file or sys.stdout
        out.write(text + "\n")
        out.flush()
        return

    console = Console(file=file, force_terminal=True, color_system="standard")
    console.print(JSON(text, indent=2), soft_wrap=True)


def present_ids(ids: Iterable[str], *, file: TextIO | None = None) -> None:
    """Write one identifier per line in the order given."""
    out = file or sys.stdout
    for identifier in ids:
        out.write(identifier + "\n")
    out.flush()
