"""Turn raw store documents into canonical records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from fsinspect.models import RESERVED_FIELDS, RawDocument, Record
from fsinspect.utils.timestamps import format_timestamp

LOGGER = logging.getLogger(__name__)


def normalize(raw: RawDocument) -> Optional[Record]:
    """Copy the field mapping and inject the reserved metadata fields.

    Metadata overwrites user fields of the same name. Returns None for a
    document with no fields, which contributes nothing to the output.
    """
    if not raw.data:
        return None

    record: Record = dict(raw.data)
    record["id"] = raw.id
    record["path"] = raw.path
    record["createTime"] = format_timestamp(raw.create_time)
    record["readTime"] = format_timestamp(raw.read_time)
    record["updateTime"] = format_timestamp(raw.update_time)
    return record


def normalize_all(raws: Iterable[RawDocument]) -> List[Record]:
    records: List[Record] = []
    for raw in raws:
        record = normalize(raw)
        if record is None:
            LOGGER.debug("Skipping empty document %s", raw.path)
            continue
        records.append(record)
    return records


def strip_reserved(record: Record) -> Record:
    return {key: value for key, value in record.items() if key not in RESERVED_FIELDS}
