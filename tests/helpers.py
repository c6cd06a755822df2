from __future__ import annotations

from pathlib import Path

HEADER = "VendorId,RateCode,PassengerCount,TripTime,TripDistance,PaymentType,FareAmount"


def write_trips(path: Path, rows: list[str], header: str = HEADER) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join([header, *rows]) + "\n")
    return str(path)


def simple_rows(n: int = 24) -> list[str]:
    rows = []
    for i in range(n):
        distance = 0.5 + 0.5 * i
        fare = 2.5 + 2.5 * distance
        rows.append(f"VTS,1,1,{300 + 60 * i},{distance},CSH,{fare}")
    return rows
