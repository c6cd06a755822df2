from __future__ import annotations

from pathlib import Path

import pytest

from fare_pipeline.config import Config
from fare_pipeline.data_loader import DataLoader
from fare_pipeline.data_utils import generate_synthetic_trips
from fare_pipeline.trainer import ModelTrainer


@pytest.fixture(scope="session")
def synthetic_dir(tmp_path_factory) -> Path:
    root = tmp_path_factory.mktemp("synthetic")
    generate_synthetic_trips(str(root / "train.csv"), n_rows=600, seed=7)
    generate_synthetic_trips(str(root / "test.csv"), n_rows=150, seed=8)
    return root


@pytest.fixture(scope="session")
def config() -> Config:
    return Config()


@pytest.fixture(scope="session")
def train_df(synthetic_dir):
    return DataLoader().load(str(synthetic_dir / "train.csv"))


@pytest.fixture(scope="session")
def test_df(synthetic_dir):
    return DataLoader().load(str(synthetic_dir / "test.csv"))


@pytest.fixture(scope="session")
def model(config, train_df):
    return ModelTrainer(config).train(train_df)
