"""Evaluation metrics and cross-validation splitters."""

from __future__ import annotations

import numpy as np
from scipy.stats import pearsonr
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    mean_absolute_error,
    mean_squared_error,
    precision_recall_fscore_support,
    r2_score,
)
from sklearn.model_selection import KFold, StratifiedKFold


def get_cv_splitter(n_folds: int, seed: int | None, stratified: bool = True):
    """K-fold splitter, stratified for classification problems."""
    shuffle = seed is not None
    if stratified:
        return StratifiedKFold(n_splits=n_folds, shuffle=shuffle, random_state=seed)
    return KFold(n_splits=n_folds, shuffle=shuffle, random_state=seed)


def compute_metrics(y_true, y_pred) -> dict:
    """Compute classification metrics."""
    precision, recall, f1, _ = precision_recall_fscore_support(
        y_true, y_pred, average="weighted", zero_division=0
    )

    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "balanced_accuracy": float(balanced_accuracy_score(y_true, y_pred)),
        "precision": float(precision),
        "recall": float(recall),
        "f1": float(f1),
    }


def compute_regression_metrics(y_true: np.ndarray, y_pred: np.ndarray) -> dict:
    """Compute regression metrics, including libsvm's squared correlation."""
    mse = mean_squared_error(y_true, y_pred)
    metrics = {
        "mse": float(mse),
        "rmse": float(np.sqrt(mse)),
        "mae": float(mean_absolute_error(y_true, y_pred)),
        "r2": float(r2_score(y_true, y_pred)),
    }

    # Constant predictions have no defined correlation
    if len(y_true) > 1 and np.std(y_pred) > 0 and np.std(y_true) > 0:
        r, _ = pearsonr(y_true, y_pred)
        metrics["squared_correlation"] = float(r**2)
    else:
        metrics["squared_correlation"] = 0.0

    return metrics
