#!/usr/bin/env python3
"""Train an SVM from configs/svm.yaml with optional W&B logging."""

import argparse
import logging

import numpy as np
from sklearn.datasets import make_classification, make_regression

from svmkit.config import initialize_run
from svmkit.svm.models import config_from_dict, is_regression_config
from svmkit.svm.pipeline import train_svm


def load_data(path, config, data_cfg, seed):
    """Load a CSV (label in the last column) or generate a synthetic dataset."""
    if path:
        data = np.loadtxt(path, delimiter=",", skiprows=data_cfg.get("skiprows", 1))
        return data[:, :-1], data[:, -1]
    n_samples = data_cfg.get("n_samples", 400)
    n_features = data_cfg.get("n_features", 10)
    if is_regression_config(config):
        return make_regression(
            n_samples=n_samples, n_features=n_features, noise=0.1, random_state=seed
        )
    return make_classification(
        n_samples=n_samples, n_features=n_features, random_state=seed
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", help="CSV file with the label in the last column")
    parser.add_argument("--run-name", help="Run name")
    parser.add_argument("--new-run-id", action="store_true", help="Generate new run ID")
    parser.add_argument("--wandb", action="store_true", help="Enable W&B logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=" * 60)
    print("SVM Training")
    print("=" * 60)

    print("\nInitializing configuration...")
    env = initialize_run(run_name=args.run_name, regenerate_run_id=args.new_run_id)
    svm_section = env.configs.svm
    seed = env.configs.run.get("seed", 42)

    config = config_from_dict(svm_section)
    print(f"Run: {env.configs.run['run_name']} ({env.configs.run['run_id']})")
    print(f"Seed: {seed}")
    print(f"Configuration:{config}")
    print(f"eps: {config.eps}")
    print(f"CV Folds: {config.n_folds}")

    if args.wandb:
        print("\nInitializing Weights & Biases...")
        import wandb

        wandb.init(
            project="svmkit",
            name=f"{env.configs.run['run_name']}-{env.configs.run['run_id']}",
            config={"seed": seed, **svm_section},
        )

    X, y = load_data(args.data, config, svm_section.get("data", {}), seed)
    result = train_svm(config, X, y, seed=seed)

    if result.cv_metrics is not None:
        print("\nCross-validation:")
        for name, value in result.cv_metrics.items():
            print(f"  {name}: {value}")
        if args.wandb:
            wandb.log(result.cv_metrics)

    if args.wandb:
        print("\nFinalizing W&B run...")
        wandb.finish()

    print("\n" + "=" * 60)
    print(f"Complete. Results in: {env.output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
