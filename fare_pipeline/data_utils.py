from __future__ import annotations

import os

import numpy as np
import polars as pl

from fare_pipeline.schema import INPUT_SCHEMA


def generate_synthetic_trips(
    path: str,
    n_rows: int = 1_000,
    seed: int = 42,
) -> str:
    """Write a synthetic trip file in the pipeline's input format.

    Fares follow a flat drop charge plus a per-mile rate with noise, so a
    model fitted on the file has something real to learn.

    Args:
        path: Destination CSV path; parent directories are created.
        n_rows: Number of trips to generate.
        seed: Random seed for reproducibility.

    Returns:
        ``path``.
    """
    rng = np.random.default_rng(seed)

    vendor_id = rng.choice(["VTS", "CMT"], size=n_rows, p=[0.55, 0.45])
    rate_code = rng.choice(["1", "2", "5"], size=n_rows, p=[0.9, 0.07, 0.03])
    payment_type = rng.choice(["CRD", "CSH"], size=n_rows, p=[0.6, 0.4])
    passenger_count = rng.choice(
        [1, 2, 3, 4, 5, 6], size=n_rows,
        p=[0.70, 0.14, 0.06, 0.04, 0.03, 0.03],
    )

    trip_distance = rng.lognormal(mean=0.8, sigma=0.7, size=n_rows).clip(0.1, 40).round(2)
    speed_mph = rng.normal(12, 4, size=n_rows).clip(3, 40)
    trip_time = ((trip_distance / speed_mph) * 3600).astype(int).clip(30, 7200)

    fare_amount = 2.5 + 2.5 * trip_distance + rng.normal(0, 0.75, size=n_rows)
    fare_amount = np.where(rate_code == "2", 52.0, fare_amount)
    fare_amount = fare_amount.clip(2.5, 300).round(2)

    df = pl.DataFrame({
        "VendorId": vendor_id,
        "RateCode": rate_code,
        "PassengerCount": passenger_count.astype(np.int64),
        "TripTime": trip_time.astype(np.int64),
        "TripDistance": trip_distance,
        "PaymentType": payment_type,
        "FareAmount": fare_amount,
    }, schema=INPUT_SCHEMA)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.write_csv(path)
    return path
