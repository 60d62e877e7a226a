"""Synthetic datasets for demos and tests."""

from .generators import DATASETS, DataGenerationConfig, generate_sine_data, generate_sparse_linear_data, train_test_split

__all__ = ["DATASETS", "DataGenerationConfig", "generate_sine_data", "generate_sparse_linear_data", "train_test_split"]
