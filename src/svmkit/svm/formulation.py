"""SVM problem formulations (type of problem and its hyperparameters)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .parameters import SVMConfigItem, SVMType


class SVMFormulation(SVMConfigItem):
    """Base class for the formulation of the SVM problem."""

    name = "svm"


@dataclass(frozen=True)
class CSVCFormulation(SVMFormulation):
    """C-support vector classification, optionally with per-class weights."""

    c: float
    class_weights: Mapping[int, float] | tuple = field(default=())

    name = "C-SVC"

    def __post_init__(self):
        # accepts a mapping or (label, weight) pairs
        weights = dict(self.class_weights or {})
        weights = tuple(sorted((int(k), float(v)) for k, v in weights.items()))
        object.__setattr__(self, "class_weights", weights)

    def fields(self) -> Mapping[str, Any]:
        delta: dict[str, Any] = {"svm_type": SVMType.C_SVC, "C": self.c, "nu": 0.5, "p": 0.1}
        if self.class_weights:
            delta["nr_weight"] = len(self.class_weights)
            delta["weight_label"] = [label for label, _ in self.class_weights]
            delta["weight"] = [w for _, w in self.class_weights]
        else:
            delta.update(_empty_weights())
        return delta

    def __str__(self):
        return f"{self.name} C={self.c}"


@dataclass(frozen=True)
class NuSVCFormulation(SVMFormulation):
    """Nu-support vector classification."""

    nu: float
    rho: float

    name = "Nu-SVC"

    def fields(self) -> Mapping[str, Any]:
        return {"svm_type": SVMType.NU_SVC, "C": 1.0, "nu": self.nu, "p": self.rho, **_empty_weights()}

    def __str__(self):
        return f"{self.name} nu={self.nu} rho={self.rho}"


@dataclass(frozen=True)
class OneSVCFormulation(SVMFormulation):
    """One-class SVM for novelty detection."""

    nu: float

    name = "One-class SVC"

    def fields(self) -> Mapping[str, Any]:
        return {"svm_type": SVMType.ONE_CLASS, "C": 1.0, "nu": self.nu, "p": 0.1, **_empty_weights()}

    def __str__(self):
        return f"{self.name} nu={self.nu}"


@dataclass(frozen=True)
class SVRFormulation(SVMFormulation):
    """Epsilon-support vector regression."""

    c: float
    epsilon: float

    name = "Epsilon-SVR"

    def fields(self) -> Mapping[str, Any]:
        return {
            "svm_type": SVMType.EPSILON_SVR,
            "C": self.c,
            "nu": 0.5,
            "p": self.epsilon,
            **_empty_weights(),
        }

    def __str__(self):
        return f"{self.name} C={self.c} epsilon={self.epsilon}"


@dataclass(frozen=True)
class NuSVRFormulation(SVMFormulation):
    """Nu-support vector regression."""

    c: float
    nu: float

    name = "Nu-SVR"

    def fields(self) -> Mapping[str, Any]:
        return {"svm_type": SVMType.NU_SVR, "C": self.c, "nu": self.nu, "p": 0.1, **_empty_weights()}

    def __str__(self):
        return f"{self.name} C={self.c} nu={self.nu}"


def _empty_weights() -> dict:
    # fresh lists so records never share them
    return {"nr_weight": 0, "weight_label": [], "weight": []}
