"""Kernel functions supported by the solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .parameters import KernelType, SVMConfigItem


class SVMKernel(SVMConfigItem):
    """Base class for kernel selection and kernel hyperparameters."""

    name = "kernel"


@dataclass(frozen=True)
class LinearKernel(SVMKernel):
    name = "linear"

    def fields(self) -> Mapping[str, Any]:
        return {"kernel_type": KernelType.LINEAR}

    def __str__(self):
        return "Linear kernel"


@dataclass(frozen=True)
class RbfKernel(SVMKernel):
    """Radial basis function kernel, exp(-gamma * |u - v|^2)."""

    gamma: float

    name = "rbf"

    def fields(self) -> Mapping[str, Any]:
        return {"kernel_type": KernelType.RBF, "gamma": self.gamma}

    def __str__(self):
        return f"RBF kernel gamma={self.gamma}"


@dataclass(frozen=True)
class SigmoidKernel(SVMKernel):
    """Sigmoid kernel, tanh(gamma * u'v + coef0)."""

    gamma: float
    coef0: float = 0.0

    name = "sigmoid"

    def fields(self) -> Mapping[str, Any]:
        return {"kernel_type": KernelType.SIGMOID, "gamma": self.gamma, "coef0": self.coef0}

    def __str__(self):
        return f"Sigmoid kernel gamma={self.gamma} coef0={self.coef0}"


@dataclass(frozen=True)
class PolynomialKernel(SVMKernel):
    """Polynomial kernel, (gamma * u'v + coef0)^degree."""

    gamma: float
    coef0: float
    degree: int

    name = "poly"

    def fields(self) -> Mapping[str, Any]:
        return {
            "kernel_type": KernelType.POLY,
            "gamma": self.gamma,
            "coef0": self.coef0,
            "degree": self.degree,
        }

    def __str__(self):
        return f"Polynomial kernel gamma={self.gamma} coef0={self.coef0} degree={self.degree}"
