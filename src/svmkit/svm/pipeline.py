"""Train an SVM from its configuration, with optional cross-validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from sklearn.model_selection import cross_val_predict

from .config import SVMConfig
from .evaluation import compute_metrics, compute_regression_metrics, get_cv_splitter
from .models import (
    SVMConfigurationError,
    create_svm,
    is_classifier_config,
    is_regression_config,
)

logger = logging.getLogger(__name__)


@dataclass
class TrainResult:
    """Fitted estimator plus the cross-validation metrics, if any were computed."""

    model: object
    config: SVMConfig
    cv_metrics: dict | None = None
    cv_predictions: np.ndarray | None = field(default=None, repr=False)


def cross_validate_svm(
    config: SVMConfig, X: np.ndarray, y: np.ndarray, seed: int | None = None
) -> tuple[dict, np.ndarray]:
    """Run ``config.n_folds``-fold CV and score the out-of-fold predictions.

    Classifiers and one-class models get accuracy-style metrics, regressors get
    mean squared error and squared correlation.
    """
    regression = is_regression_config(config)
    try:
        splitter = get_cv_splitter(
            config.n_folds, seed, stratified=is_classifier_config(config)
        )
        y_pred = cross_val_predict(create_svm(config, seed), X, y, cv=splitter)
    except ValueError as exc:
        raise SVMConfigurationError(f"Solver rejected configuration: {exc}") from exc

    if regression:
        metrics = compute_regression_metrics(y, y_pred)
        logger.info(
            f"  Cross Validation Mean squared error = {metrics['mse']:.4f}, "
            f"squared correlation coefficient = {metrics['squared_correlation']:.4f}"
        )
    else:
        metrics = compute_metrics(y, y_pred)
        logger.info(f"  Cross Validation Accuracy = {100 * metrics['accuracy']:.2f}%")
    metrics["n_folds"] = config.n_folds
    return metrics, y_pred


def train_svm(
    config: SVMConfig, X: np.ndarray, y: np.ndarray, seed: int | None = None
) -> TrainResult:
    """Fit the configured SVM on all data, cross-validating first when enabled."""
    X = np.asarray(X)
    y = np.asarray(y)
    logger.info(f"Training SVM on {len(y)} samples:{config}")

    cv_metrics = None
    cv_predictions = None
    if config.is_cross_validation:
        logger.info(f"  Running {config.n_folds}-fold cross-validation")
        cv_metrics, cv_predictions = cross_validate_svm(config, X, y, seed)

    model = create_svm(config, seed)
    try:
        model.fit(X, y)
    except ValueError as exc:
        raise SVMConfigurationError(f"Solver rejected configuration: {exc}") from exc

    logger.info("  ✓ Model trained")
    return TrainResult(
        model=model,
        config=config,
        cv_metrics=cv_metrics,
        cv_predictions=cv_predictions,
    )
