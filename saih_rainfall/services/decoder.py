"""Turn raw table rows into readings.

Gauge labels come in two shapes:
    M13 CAÑADA DE CAÑEPLA (AL)   usual, province code embedded
    B02 LAS ADELFAS-MELILLA      province known only from the name
and sometimes with a doubled space after the code (``A28  PTE. JONTOYA (JA)``).
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

import structlog

from ..errors import DecodeFailure
from ..schemas.readings import Gauge, Province, Reading
from .parser import RawRow
from .provinces import FALLBACK_PROVINCE, ProvinceDirectory, ProvinceEntry

logger = structlog.get_logger()

# Length of a trailing " (XX)" province suffix
_PROVINCE_SUFFIX_LEN = 5


def split_label(label: str) -> Tuple[str, str]:
    """Split a gauge label into (code, name).

    Raises ValueError when the label does not start with a code and a space.
    """
    code, sep, _ = label.partition(" ")
    if not sep or not code:
        raise ValueError(f"no gauge code in label {label!r}")

    # Drop the code and its separator; a doubled space leaves one more behind
    name = label[len(code) + 1:]
    if name.startswith(" "):
        name = name[1:]
    if name.endswith(")"):
        name = name[:-_PROVINCE_SUFFIX_LEN]
    return code, name


def normalize_amount(value: str) -> str:
    return value.replace(",", ".")


def decode_row(raw: RawRow, directory: ProvinceDirectory) -> Reading:
    label = raw.label or ""

    province: ProvinceEntry
    try:
        code, name = split_label(label)
    except ValueError:
        logger.debug("gauge_label_irregular", label=label)
        code, name = label, ""
        province = FALLBACK_PROVINCE
    else:
        province = directory.resolve(label)

    return Reading(
        gauge=Gauge(code=code, name=name),
        province=Province(code=province.code, name=province.name),
        current_hour=normalize_amount(raw.current_hour or ""),
        last_12_hours=normalize_amount(raw.last_12_hours or ""),
        today_accumulated=normalize_amount(raw.today_accumulated or ""),
        yesterday_accumulated=normalize_amount(raw.yesterday_accumulated or ""),
        unit=raw.unit or "",
    )


def decode_rows(rows: Iterable[RawRow], directory: ProvinceDirectory) -> List[Reading]:
    try:
        return [decode_row(raw, directory) for raw in rows]
    except (TypeError, AttributeError) as e:
        raise DecodeFailure("Failed to transform the real-time rainfall data") from e
