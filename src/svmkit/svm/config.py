"""Configuration of an SVM training run: formulation, kernel and execution."""

from __future__ import annotations

from .execution import SVMExecution
from .formulation import SVMFormulation
from .kernel import SVMKernel
from .parameters import SVMParameter


class SVMConfig:
    """Owns one SVMParameter populated by the formulation, kernel and execution.

    Updates run in the order formulation, kernel, execution. If two items
    write the same field, the later one wins, so execution settings take
    precedence. Nothing here validates the resulting combination; the solver
    rejects bad parameters when training starts.
    """

    def __init__(
        self,
        formulation: SVMFormulation,
        kernel: SVMKernel,
        execution: SVMExecution | None = None,
    ):
        if execution is None:
            execution = SVMExecution.default()
        self._formulation = formulation
        self._kernel = kernel
        self._execution = execution

        self._param = SVMParameter()
        for item in (formulation, kernel, execution):
            item.update(self._param)

    @property
    def formulation(self) -> SVMFormulation:
        return self._formulation

    @property
    def kernel(self) -> SVMKernel:
        return self._kernel

    @property
    def execution(self) -> SVMExecution:
        return self._execution

    @property
    def param(self) -> SVMParameter:
        """Parameter record handed to the solver."""
        return self._param

    @property
    def eps(self) -> float:
        """Convergence threshold of the execution parameters."""
        return self.execution.eps

    @property
    def n_folds(self) -> int:
        return self.execution.n_folds

    @property
    def is_cross_validation(self) -> bool:
        return self.execution.n_folds > 0

    def __str__(self):
        return f"\nSVM Formulation: {self.formulation}\n{self.kernel}"

    def __repr__(self):
        return (
            f"SVMConfig(formulation={self.formulation!r}, kernel={self.kernel!r}, "
            f"execution={self.execution!r})"
        )
