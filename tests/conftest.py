"""Pytest fixtures for testing"""

import pytest
import yaml
from sklearn.datasets import make_classification, make_regression


@pytest.fixture
def classification_data():
    """Small, well-separated binary classification problem."""
    X, y = make_classification(
        n_samples=200,
        n_features=6,
        n_informative=4,
        n_redundant=0,
        class_sep=2.0,
        random_state=0,
    )
    return X, y


@pytest.fixture
def regression_data():
    """Linear regression problem with little noise."""
    X, y = make_regression(n_samples=200, n_features=5, noise=0.1, random_state=0)
    return X, y


@pytest.fixture
def svm_section():
    """SVM config section as it appears in configs/svm.yaml."""
    return {
        "formulation": {"type": "c_svc", "C": 2.0},
        "kernel": {"type": "rbf", "gamma": 0.25},
        "execution": {"cache_size": 500, "eps": "1.0e-4", "n_folds": 3},
    }


@pytest.fixture
def mock_repo(tmp_path, svm_section):
    """Temporary repository root with a configs/ folder."""
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    with open(config_dir / "svm.yaml", "w", encoding="utf-8") as fh:
        yaml.safe_dump(svm_section, fh)
    with open(config_dir / "run.yaml", "w", encoding="utf-8") as fh:
        yaml.safe_dump({"run_name": "test", "seed": 7}, fh)
    return tmp_path
