"""Feature pipeline construction and model fitting."""

from __future__ import annotations

import logging
import time
from typing import Any

import lightgbm as lgb
import numpy as np
import polars as pl
from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from fare_pipeline.config import Config
from fare_pipeline.schema import INPUT_COLUMNS

logger = logging.getLogger("FarePipeline")


class EmptyDatasetError(ValueError):
    """Raised when a step receives a frame with no rows."""


class ModelTrainer:
    """Builds and fits the encoding + gradient-boosting pipeline.

    The fitted ``Pipeline`` is treated as an immutable value once returned:
    nothing downstream refits or mutates it.

    Args:
        config: Pipeline configuration.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def add_label(self, df: pl.DataFrame) -> pl.DataFrame:
        """Copy the target column into the label column."""
        return df.with_columns(
            pl.col(self._config.target_column).alias(self._config.label_column)
        )

    def prepare_arrays(self, df: pl.DataFrame) -> tuple[Any, np.ndarray]:
        """Split a trip frame into model input and label vector."""
        df = self.add_label(df)
        X = df.select(INPUT_COLUMNS).to_pandas()
        y = df.select(self._config.label_column).to_numpy().ravel()
        return X, y

    def build_features(self) -> ColumnTransformer:
        """One-hot encode each categorical on its own, then concatenate.

        Output columns follow ``config.feature_order``. Categories unseen at
        fit time encode to an all-zero block.
        """
        encoded = {f"{c}Encoded": c for c in self._config.categorical_features}
        transformers: list[tuple[str, Any, list[str]]] = []
        for name in self._config.feature_order:
            if name in encoded:
                encoder = OneHotEncoder(
                    handle_unknown="ignore",
                    sparse_output=False,
                    dtype=np.float64,
                )
                transformers.append((name, encoder, [encoded[name]]))
            else:
                transformers.append((name, "passthrough", [name]))
        return ColumnTransformer(transformers, remainder="drop")

    def build_regressor(self) -> lgb.LGBMRegressor:
        return lgb.LGBMRegressor(
            objective="regression",
            n_estimators=self._config.n_estimators,
            num_leaves=self._config.num_leaves,
            min_child_samples=self._config.min_child_samples,
            learning_rate=self._config.learning_rate,
            random_state=self._config.random_seed,
            deterministic=True,
            force_col_wise=True,
            n_jobs=1,
            verbosity=-1,
        )

    def build_pipeline(self) -> Pipeline:
        return Pipeline([
            ("features", self.build_features()),
            ("regressor", self.build_regressor()),
        ])

    def train(self, df: pl.DataFrame) -> Pipeline:
        """Fit the full pipeline on a trip frame.

        Args:
            df: Loaded training trips.

        Returns:
            The fitted pipeline.

        Raises:
            EmptyDatasetError: If ``df`` has no rows.
        """
        if df.height == 0:
            raise EmptyDatasetError("Cannot train on an empty dataset")

        X, y = self.prepare_arrays(df)
        pipeline = self.build_pipeline()

        started = time.perf_counter()
        pipeline.fit(X, y)
        logger.info(
            "Trained on %d rows, %d features in %.2fs",
            df.height, feature_width(pipeline), time.perf_counter() - started,
        )
        return pipeline


def feature_width(model: Pipeline) -> int:
    """Width of the concatenated feature vector the regressor consumes."""
    features: ColumnTransformer = model.named_steps["features"]
    return len(features.get_feature_names_out())
