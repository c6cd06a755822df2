"""Taxi fare prediction pipeline.

Fits a one-hot encoding + LightGBM regression pipeline on the training
trips, reports its quality on the test trips, and writes per-trip fare
predictions for both files.
"""

from __future__ import annotations

import logging
import sys

from sklearn.pipeline import Pipeline

from fare_pipeline import model_store
from fare_pipeline.config import Config
from fare_pipeline.data_loader import DataLoader
from fare_pipeline.evaluator import RegressionMetrics, evaluate, format_metrics
from fare_pipeline.predictor import write_predictions
from fare_pipeline.trainer import ModelTrainer

logger = logging.getLogger("FarePipeline")


def train(config: Config, data_path: str) -> Pipeline:
    df = DataLoader().load(data_path)
    return ModelTrainer(config).train(df)


def evaluate_model(config: Config, model: Pipeline, test_data_path: str) -> RegressionMetrics:
    df = DataLoader().load(test_data_path)
    metrics = evaluate(model, df, config)
    print(format_metrics(metrics))
    return metrics


def run_pipeline(config: Config) -> RegressionMetrics:
    """Orchestrate the full pipeline; any failure aborts the remaining steps."""
    logger.info("=" * 60)
    logger.info("TRAINING on %s", config.train_data_path)
    logger.info("=" * 60)
    model = train(config, config.train_data_path)

    logger.info("=" * 60)
    logger.info("EVALUATION on %s", config.test_data_path)
    logger.info("=" * 60)
    metrics = evaluate_model(config, model, config.test_data_path)

    write_predictions(model, config.train_data_path, config.train_output_path)
    write_predictions(model, config.test_data_path, config.test_output_path)

    if config.persist_model:
        model_store.save(model, config.model_save_path, config, metrics)

    print("Prediction completed and files saved.")
    return metrics


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        run_pipeline(Config.from_working_directory())
    except (OSError, ValueError) as exc:
        logger.error("Pipeline failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
