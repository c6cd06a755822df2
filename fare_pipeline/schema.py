"""Record shapes for trips and fare predictions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import polars as pl

INPUT_SCHEMA: dict[str, pl.DataType] = {
    "VendorId": pl.Utf8,
    "RateCode": pl.Utf8,
    "PassengerCount": pl.Int64,
    "TripTime": pl.Int64,
    "TripDistance": pl.Float64,
    "PaymentType": pl.Utf8,
    "FareAmount": pl.Float64,
}

OUTPUT_SCHEMA: dict[str, pl.DataType] = {
    **INPUT_SCHEMA,
    "PredictedFareAmount": pl.Float64,
}

INPUT_COLUMNS: list[str] = list(INPUT_SCHEMA)
OUTPUT_COLUMNS: list[str] = list(OUTPUT_SCHEMA)


@dataclass(frozen=True)
class TripRecord:
    """One taxi trip, optionally carrying the model's fare estimate."""

    VendorId: str
    RateCode: str
    PassengerCount: int
    TripTime: int
    TripDistance: float
    PaymentType: str
    FareAmount: float
    PredictedFareAmount: float | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "TripRecord":
        return cls(**{f.name: row[f.name] for f in fields(cls) if f.name in row})

    def as_row(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class FarePrediction:
    FareAmount: float


def records_to_frame(records: list[TripRecord], with_prediction: bool = False) -> pl.DataFrame:
    """Build a typed DataFrame from records, columns in schema order."""
    schema = OUTPUT_SCHEMA if with_prediction else INPUT_SCHEMA
    rows = [r.as_row() for r in records]
    return pl.DataFrame(
        [{c: row[c] for c in schema} for row in rows],
        schema=schema,
    )
