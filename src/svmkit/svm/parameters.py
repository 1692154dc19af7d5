"""Native solver parameter record and the update capability shared by config items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


class SVMType:
    """libsvm problem type codes."""

    C_SVC = 0
    NU_SVC = 1
    ONE_CLASS = 2
    EPSILON_SVR = 3
    NU_SVR = 4


class KernelType:
    """libsvm kernel type codes."""

    LINEAR = 0
    POLY = 1
    RBF = 2
    SIGMOID = 3


@dataclass
class SVMParameter:
    """Mutable mirror of libsvm's svm_parameter, holding libsvm's defaults.

    Values are stored as given. Whether a combination makes sense is for the
    solver to decide when the parameters are used for training.
    """

    svm_type: int = SVMType.C_SVC
    kernel_type: int = KernelType.RBF
    degree: int = 3
    gamma: float | str = "scale"
    coef0: float = 0.0
    cache_size: float = 100.0
    eps: float = 1e-3
    C: float = 1.0
    nr_weight: int = 0
    weight_label: list[int] = field(default_factory=list)
    weight: list[float] = field(default_factory=list)
    nu: float = 0.5
    p: float = 0.1
    shrinking: bool = True
    probability: bool = False


class SVMConfigItem:
    """Anything that contributes fields to an SVMParameter.

    Subclasses implement ``fields`` and return the delta they apply; the
    delta is written onto the record by ``update``.
    """

    def fields(self) -> Mapping[str, Any]:
        raise NotImplementedError

    def update(self, param: SVMParameter) -> None:
        """Write this item's fields onto the parameter record."""
        for name, value in self.fields().items():
            if not hasattr(param, name):
                raise AttributeError(f"SVMParameter has no field '{name}'")
            setattr(param, name, value)
