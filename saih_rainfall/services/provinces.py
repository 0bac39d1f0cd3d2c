"""Province lookup for gauge labels.

Gauge labels usually end with an embedded province code:
    M13 CAÑADA DE CAÑEPLA (AL)
A few gauges carry no code and are recognised by a fragment of their name:
    B02 LAS ADELFAS-MELILLA
New fragments are added to ``DEFAULT_PROVINCES`` (or through the
``APP_PROVINCE_EXCEPTIONS`` setting) as such gauges show up on the page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class ProvinceEntry:
    code: str
    name: str
    exceptions: FrozenSet[str] = field(default_factory=frozenset)


FALLBACK_PROVINCE = ProvinceEntry(code="ER", name="ERROR")

DEFAULT_PROVINCES: Tuple[ProvinceEntry, ...] = (
    ProvinceEntry("AB", "Albacete"),
    ProvinceEntry("AL", "Almería"),
    ProvinceEntry("BA", "Badajoz"),
    ProvinceEntry("CE", "Ceuta", frozenset({"RENEGADO - CEUTA"})),
    ProvinceEntry("CR", "Ciudad Real"),
    ProvinceEntry("CO", "Córdoba", frozenset({"GUADALQUIVIR CORDOBA"})),
    ProvinceEntry("GR", "Granada"),
    ProvinceEntry("HU", "Huelva"),
    ProvinceEntry("JA", "Jaén"),
    ProvinceEntry("ME", "Melilla", frozenset({"LAS ADELFAS-MELILLA"})),
    ProvinceEntry("SE", "Sevilla"),
)


class ProvinceDirectory:
    def __init__(self, entries: Iterable[ProvinceEntry] = DEFAULT_PROVINCES) -> None:
        self._entries: Tuple[ProvinceEntry, ...] = tuple(entries)
        codes = [e.code for e in self._entries]
        if len(codes) != len(set(codes)):
            raise ValueError("province codes must be unique")
        if FALLBACK_PROVINCE.code in codes:
            raise ValueError(f"{FALLBACK_PROVINCE.code} is reserved for the fallback province")

    @classmethod
    def with_exceptions(
        cls,
        extra: Mapping[str, str],
        entries: Iterable[ProvinceEntry] = DEFAULT_PROVINCES,
    ) -> "ProvinceDirectory":
        """Build a directory whose entries also match the given name fragments.

        ``extra`` maps a gauge-name fragment to the code of an existing entry.
        """
        by_code: Dict[str, ProvinceEntry] = {e.code: e for e in entries}
        for fragment, code in extra.items():
            if code not in by_code:
                raise ValueError(f"unknown province code {code!r} for {fragment!r}")
            entry = by_code[code]
            by_code[code] = replace(entry, exceptions=entry.exceptions | {fragment})
        return cls(by_code.values())

    @property
    def entries(self) -> Tuple[ProvinceEntry, ...]:
        return self._entries

    def resolve(self, label: str) -> ProvinceEntry:
        """Return the province a gauge label belongs to.

        An embedded ``(XX)`` code wins over any name fragment; labels matching
        neither resolve to ``FALLBACK_PROVINCE``.
        """
        for entry in self._entries:
            if f"({entry.code})" in label:
                return entry
        for entry in self._entries:
            if any(fragment and fragment in label for fragment in entry.exceptions):
                return entry
        return FALLBACK_PROVINCE
