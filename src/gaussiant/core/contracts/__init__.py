"""
Contract Validation Module

Модуль для валидации JSON контрактов гауссовых целых.
"""

from .validators import (
    ContractValidator,
    GaussianIntBatchValidator,
    GaussianIntValidator,
    SchemaLoader,
    dump_gaussian_int_batch,
    validate_gaussian_int_batch,
    validate_gaussian_int_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GaussianIntValidator",
    "GaussianIntBatchValidator",
    # Functions
    "validate_gaussian_int_payload",
    "validate_gaussian_int_batch",
    "dump_gaussian_int_batch",
]
