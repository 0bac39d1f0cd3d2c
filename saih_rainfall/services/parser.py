from __future__ import annotations

from typing import List, NamedTuple

from bs4 import BeautifulSoup

from ..config import DEFAULT_TABLE_ID
from ..errors import ParseFailure


class RawRow(NamedTuple):
    """Cell texts of one table row, in page column order."""

    label: str
    current_hour: str
    last_12_hours: str
    today_accumulated: str
    yesterday_accumulated: str
    unit: str


def parse_rows(markup: str, table_id: str = DEFAULT_TABLE_ID) -> List[RawRow]:
    """Extract the data rows of the real-time rainfall table.

    The first row is the header and is skipped. Only the first six cells of a
    row are read; missing cells come back as empty strings.
    """
    soup = BeautifulSoup(markup, "html.parser")

    table = soup.find(id=table_id)
    if table is None:
        raise ParseFailure("Rainfall table not found in the retrieved page")

    # Pages rendered without <tbody> keep their rows directly under the table
    body = table.find("tbody", recursive=False) or table
    rows = body.find_all("tr", recursive=False)

    result: List[RawRow] = []
    for tr in rows[1:]:
        cells = [td.get_text().strip() for td in tr.find_all(["td", "th"], recursive=False)[:6]]
        cells += [""] * (6 - len(cells))
        result.append(RawRow(*cells))
    return result
