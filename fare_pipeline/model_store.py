"""Explicit save/load of fitted pipelines."""

from __future__ import annotations

import json
import logging
import os
import pickle
from dataclasses import asdict

from sklearn.pipeline import Pipeline

from fare_pipeline.config import Config
from fare_pipeline.evaluator import RegressionMetrics

logger = logging.getLogger("FarePipeline")


def save(
    model: Pipeline,
    path: str,
    config: Config | None = None,
    metrics: RegressionMetrics | None = None,
) -> None:
    """Pickle ``model`` to ``path``.

    When ``config`` is given, a JSON snapshot of it (plus ``metrics``) is
    written to ``config.config_save_path``.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "wb") as f:
        pickle.dump(model, f)
    logger.info("Model saved to %s", path)

    if config is None:
        return
    config_dir = os.path.dirname(config.config_save_path)
    if config_dir:
        os.makedirs(config_dir, exist_ok=True)
    config_dict = asdict(config)
    if metrics is not None:
        config_dict["test_metrics"] = asdict(metrics)
    with open(config.config_save_path, "w") as f:
        json.dump(config_dict, f, indent=2, default=str)
    logger.info("Config saved to %s", config.config_save_path)


def load(path: str) -> Pipeline:
    with open(path, "rb") as f:
        model = pickle.load(f)
    logger.info("Model loaded from %s", path)
    return model
