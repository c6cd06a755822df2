"""Row-at-a-time fare inference and prediction CSV output."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator

from sklearn.pipeline import Pipeline

from fare_pipeline.data_loader import DataLoader
from fare_pipeline.schema import FarePrediction, TripRecord, records_to_frame

logger = logging.getLogger("FarePipeline")


def predict(model: Pipeline, record: TripRecord) -> FarePrediction:
    """Estimate the fare of a single trip."""
    X = records_to_frame([record]).to_pandas()
    return FarePrediction(FareAmount=float(model.predict(X)[0]))


def predict_trips(model: Pipeline, records: Iterable[TripRecord]) -> Iterator[TripRecord]:
    """Lazily attach a predicted fare to a copy of every record."""
    for record in records:
        prediction = predict(model, record)
        yield dataclasses.replace(record, PredictedFareAmount=prediction.FareAmount)


def write_predictions(model: Pipeline, data_path: str, output_path: str) -> int:
    """Predict every trip in ``data_path`` and write them to ``output_path``.

    The input file is read fresh and left untouched. An existing output file
    is overwritten.

    Returns:
        Number of rows written.

    Raises:
        OSError: If ``output_path`` cannot be written.
    """
    predicted = list(predict_trips(model, DataLoader().iter_records(data_path)))
    df = records_to_frame(predicted, with_prediction=True)

    with open(output_path, "wb") as f:
        df.write_csv(f, include_header=True, separator=",")

    logger.info("Wrote %d predictions to %s", df.height, output_path)
    return df.height
