from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gauge(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str


class Province(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Reading(BaseModel):
    """Precipitation figures of one gauge at fetch time.

    Amounts stay as text, exactly as the source renders them, with the decimal
    separator normalized to a period.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gauge: Gauge
    province: Province
    current_hour: str = Field(alias="currentHour")
    last_12_hours: str = Field(alias="last12Hours")
    today_accumulated: str = Field(alias="todayAccumulated")
    yesterday_accumulated: str = Field(alias="yesterdayAccumulated")
    unit: str
    location: Optional[Location] = None


class ReadingsResponse(BaseModel):
    ok: bool = True
    data: List[Reading]

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "ok": True,
                    "data": [
                        {
                            "gauge": {"code": "M13", "name": "CAÑADA DE CAÑEPLA"},
                            "province": {"code": "AL", "name": "Almería"},
                            "currentHour": "0.2",
                            "last12Hours": "4.6",
                            "todayAccumulated": "5.0",
                            "yesterdayAccumulated": "0.0",
                            "unit": "mm",
                        }
                    ],
                }
            ]
        }
    )


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
