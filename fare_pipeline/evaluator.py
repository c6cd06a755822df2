"""Regression quality metrics on a held-out trip set."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
import polars as pl
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from sklearn.pipeline import Pipeline

from fare_pipeline.config import Config
from fare_pipeline.trainer import EmptyDatasetError, ModelTrainer

logger = logging.getLogger("FarePipeline")


@dataclass(frozen=True)
class RegressionMetrics:
    r_squared: float
    root_mean_squared_error: float
    mean_absolute_error: float
    mean_squared_error: float


def evaluate(model: Pipeline, df: pl.DataFrame, config: Config) -> RegressionMetrics:
    """Score ``df`` with ``model`` and compare against the label.

    A single row has no target variance, so R² falls back to 1.0 for an
    exact prediction and 0.0 otherwise.

    Raises:
        EmptyDatasetError: If ``df`` has no rows.
    """
    if df.height == 0:
        raise EmptyDatasetError("Cannot evaluate on an empty dataset")

    X, y_true = ModelTrainer(config).prepare_arrays(df)
    y_pred = model.predict(X)

    mse = float(mean_squared_error(y_true, y_pred))
    if df.height < 2:
        # Same convention r2_score uses for a constant target.
        logger.warning("R² is degenerate on a single row")
        r2 = 1.0 if math.isclose(y_true[0], y_pred[0]) else 0.0
    else:
        r2 = float(r2_score(y_true, y_pred))

    metrics = RegressionMetrics(
        r_squared=r2,
        root_mean_squared_error=float(np.sqrt(mse)),
        mean_absolute_error=float(mean_absolute_error(y_true, y_pred)),
        mean_squared_error=mse,
    )
    logger.info(
        "Evaluated %d rows: r2=%.4f rmse=%.4f mae=%.4f",
        df.height, metrics.r_squared, metrics.root_mean_squared_error,
        metrics.mean_absolute_error,
    )
    return metrics


def _trim_decimals(value: float, leading_zero: bool = True) -> str:
    """At most two decimals, trailing zeros dropped: 0.90 -> "0.9"."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("", "-", "-0"):
        text = "0"
    if not leading_zero and text.startswith(("0.", "-0.")):
        text = text.replace("0.", ".", 1)
    return text


def format_metrics(metrics: RegressionMetrics) -> str:
    r2 = _trim_decimals(metrics.r_squared)
    rmse = _trim_decimals(metrics.root_mean_squared_error, leading_zero=False)
    return "\n".join([
        "",
        "*************************************************",
        "*       Model quality metrics evaluation         ",
        "*------------------------------------------------",
        f"*       RSquared Score:      {r2}",
        f"*       Root Mean Squared Error:      {rmse}",
    ])
