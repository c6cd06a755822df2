from __future__ import annotations

import math

import pytest

from fare_pipeline.evaluator import RegressionMetrics, evaluate, format_metrics
from fare_pipeline.trainer import EmptyDatasetError


def test_metrics_are_within_bounds(config, model, test_df):
    metrics = evaluate(model, test_df, config)

    assert metrics.root_mean_squared_error >= 0
    assert metrics.mean_absolute_error >= 0
    assert metrics.r_squared <= 1.0
    assert metrics.r_squared > 0.5
    assert math.isclose(metrics.root_mean_squared_error ** 2, metrics.mean_squared_error)


def test_evaluate_does_not_touch_inputs(config, model, test_df):
    before = test_df.clone()

    evaluate(model, test_df, config)

    assert test_df.equals(before)
    assert "Label" not in test_df.columns


def test_single_row_gives_finite_metrics(config, model, test_df):
    metrics = evaluate(model, test_df.head(1), config)

    assert math.isfinite(metrics.r_squared)
    assert math.isfinite(metrics.root_mean_squared_error)


def test_empty_test_set_is_rejected(config, model, test_df):
    with pytest.raises(EmptyDatasetError):
        evaluate(model, test_df.head(0), config)


def test_format_metrics_banner():
    text = format_metrics(RegressionMetrics(
        r_squared=0.91234,
        root_mean_squared_error=2.3456,
        mean_absolute_error=1.0,
        mean_squared_error=5.5,
    ))

    assert "Model quality metrics evaluation" in text
    assert "RSquared Score:      0.91" in text
    assert "Root Mean Squared Error:      2.35" in text


def test_format_metrics_drops_trailing_zeros():
    text = format_metrics(RegressionMetrics(
        r_squared=0.9,
        root_mean_squared_error=0.5,
        mean_absolute_error=0.4,
        mean_squared_error=0.25,
    ))

    assert text.splitlines()[-2].endswith("RSquared Score:      0.9")
    assert text.splitlines()[-1].endswith("Root Mean Squared Error:      .5")
