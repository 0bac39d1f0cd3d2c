# Ensure repo root is on sys.path for absolute imports like `saih_rainfall.services.*`
import sys
import os

import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

TABLE_ID = "ContentPlaceHolder1_GridLluviaTiempoReal"


def make_page(rows, table_id=TABLE_ID, tbody=True):
    header = "<tr><th>Punto</th><th>Hora actual</th><th>Ultimas 12h</th><th>Hoy</th><th>Ayer</th><th>Unidad</th></tr>"
    body = header + "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows
    )
    if tbody:
        body = f"<tbody>{body}</tbody>"
    return f"<html><body><div><table id=\"{table_id}\">{body}</table></div></body></html>"


class FakeFetcher:
    def __init__(self, pages=None, error=None):
        self.pages = list(pages or [])
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.pages[min(self.calls, len(self.pages)) - 1]


class FakeClock:
    def __init__(self, t=1000.0):
        self.t = t

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


@pytest.fixture
def sample_page():
    return make_page(
        [
            ["M13 CAÑADA DE CAÑEPLA (AL)", "0,2", "4,6", "5,0", "0", "mm"],
            ["A28  PTE. JONTOYA (JA)", "0", "1,4", "1,4", "12,8", "mm"],
            ["B02 LAS ADELFAS-MELILLA", "0", "0", "0", "0", "mm"],
        ]
    )


@pytest.fixture
def clock():
    return FakeClock()
