"""Pipeline configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Central configuration for the entire pipeline.

    Created once by the entry script and passed explicitly to every step.

    Args:
        train_data_path: CSV file the model is fitted on.
        test_data_path: CSV file the model is evaluated on.
        model_save_path: Where to persist the trained model.
        config_save_path: Where to persist the config snapshot.
        train_output_path: Predictions for the training file.
        test_output_path: Predictions for the test file.
        target_column: Prediction target.
        label_column: Copy of the target seen by the regressor.
        categorical_features: Columns one-hot encoded, each on its own.
        feature_order: Layout of the concatenated feature vector.
        n_estimators: Number of boosted trees.
        num_leaves: Maximum leaves per tree.
        min_child_samples: Minimum rows per leaf.
        learning_rate: Shrinkage applied to every tree.
        persist_model: Save the fitted model after the run.
        random_seed: Reproducibility seed.
    """

    train_data_path: str = os.path.join("Data", "taxi-fare-train.csv")
    test_data_path: str = os.path.join("Data", "taxi-fare-test.csv")

    # Persistence
    model_save_path: str = os.path.join("Data", "Model.pkl")
    config_save_path: str = os.path.join("Data", "config.json")
    persist_model: bool = False

    # Outputs
    train_output_path: str = "train_predicted.csv"
    test_output_path: str = "test_predicted.csv"

    target_column: str = "FareAmount"
    label_column: str = "Label"

    categorical_features: list[str] = field(default_factory=lambda: [
        "VendorId",
        "RateCode",
        "PaymentType",
    ])

    # Encoded categoricals carry an "Encoded" suffix; the rest pass through.
    feature_order: list[str] = field(default_factory=lambda: [
        "VendorIdEncoded",
        "RateCodeEncoded",
        "PassengerCount",
        "TripDistance",
        "PaymentTypeEncoded",
    ])

    # Boosting params
    n_estimators: int = 100
    num_leaves: int = 20
    min_child_samples: int = 10
    learning_rate: float = 0.2

    random_seed: int = 0

    @classmethod
    def from_working_directory(cls, cwd: str | None = None) -> "Config":
        """Build the default layout rooted at ``cwd``.

        Inputs and the model artifact live under ``<cwd>/Data``; prediction
        files are written straight into ``cwd``.
        """
        cwd = cwd or os.getcwd()
        data_dir = os.path.join(cwd, "Data")
        return cls(
            train_data_path=os.path.join(data_dir, "taxi-fare-train.csv"),
            test_data_path=os.path.join(data_dir, "taxi-fare-test.csv"),
            model_save_path=os.path.join(data_dir, "Model.pkl"),
            config_save_path=os.path.join(data_dir, "config.json"),
            train_output_path=os.path.join(cwd, "train_predicted.csv"),
            test_output_path=os.path.join(cwd, "test_predicted.csv"),
        )

