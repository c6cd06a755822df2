from fare_pipeline.config import Config
from fare_pipeline.data_loader import DataLoader, MalformedRowError
from fare_pipeline.evaluator import RegressionMetrics, evaluate
from fare_pipeline.predictor import predict, predict_trips, write_predictions
from fare_pipeline.trainer import EmptyDatasetError, ModelTrainer

__all__ = [
    "Config",
    "DataLoader",
    "MalformedRowError",
    "RegressionMetrics",
    "evaluate",
    "predict",
    "predict_trips",
    "write_predictions",
    "EmptyDatasetError",
    "ModelTrainer",
]
