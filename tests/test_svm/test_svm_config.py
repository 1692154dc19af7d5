"""Tests for SVMConfig and its formulation, kernel and execution items."""

from dataclasses import dataclass

import pytest

from svmkit.svm.config import SVMConfig
from svmkit.svm.execution import SVMExecution
from svmkit.svm.formulation import (
    CSVCFormulation,
    NuSVCFormulation,
    NuSVRFormulation,
    OneSVCFormulation,
    SVMFormulation,
    SVRFormulation,
)
from svmkit.svm.kernel import (
    LinearKernel,
    PolynomialKernel,
    RbfKernel,
    SigmoidKernel,
    SVMKernel,
)
from svmkit.svm.parameters import KernelType, SVMParameter, SVMType


@dataclass(frozen=True)
class EagerFormulation(SVMFormulation):
    """C-SVC that also sets solver fields owned by the kernel and execution."""

    def fields(self):
        return {"svm_type": SVMType.C_SVC, "C": 3.0, "eps": 0.5, "gamma": 9.0, "cache_size": 1}


@dataclass(frozen=True)
class EagerKernel(SVMKernel):
    """RBF kernel that also sets the convergence threshold."""

    def fields(self):
        return {"kernel_type": KernelType.RBF, "gamma": 0.1, "eps": 0.25}


@pytest.mark.parametrize(
    "execution",
    [SVMExecution(100, 1e-4, 0), SVMExecution(200, 0.01, 5), SVMExecution(eps=0.5, n_folds=2)],
)
def test_accessors_pass_through_execution(execution):
    config = SVMConfig(CSVCFormulation(1.0), RbfKernel(0.5), execution)

    assert config.eps == execution.eps
    assert config.n_folds == execution.n_folds
    assert config.is_cross_validation == (execution.n_folds > 0)


def test_execution_fields_written_to_param():
    config = SVMConfig(CSVCFormulation(1.0), LinearKernel(), SVMExecution(512, 1e-5, 4))

    assert config.param.cache_size == 512
    assert config.param.eps == 1e-5
    assert not hasattr(config.param, "n_folds")


def test_later_updates_override_earlier_ones():
    config = SVMConfig(EagerFormulation(), EagerKernel(), SVMExecution(300, 1e-4, 0))

    # execution beats kernel and formulation, kernel beats formulation
    assert config.param.eps == 1e-4
    assert config.param.cache_size == 300
    assert config.param.gamma == 0.1
    assert config.param.C == 3.0


def test_default_execution_matches_explicit_default():
    implicit = SVMConfig(CSVCFormulation(1.0), RbfKernel(0.5))
    explicit = SVMConfig(CSVCFormulation(1.0), RbfKernel(0.5), SVMExecution.default())

    assert implicit.execution == explicit.execution
    assert implicit.eps == explicit.eps
    assert implicit.n_folds == explicit.n_folds
    assert implicit.is_cross_validation == explicit.is_cross_validation
    assert implicit.param == explicit.param
    assert not implicit.is_cross_validation


def test_each_config_owns_its_param():
    formulation = CSVCFormulation(1.0, class_weights={0: 1.0, 1: 2.0})
    first = SVMConfig(formulation, LinearKernel())
    second = SVMConfig(formulation, LinearKernel())

    assert first.param is not second.param
    first.param.weight.append(9.0)
    assert second.param.weight == [1.0, 2.0]


@pytest.mark.parametrize(
    "formulation, expected",
    [
        (CSVCFormulation(2.0), {"svm_type": SVMType.C_SVC, "C": 2.0, "nu": 0.5, "p": 0.1}),
        (NuSVCFormulation(0.3, 0.2), {"svm_type": SVMType.NU_SVC, "C": 1.0, "nu": 0.3, "p": 0.2}),
        (OneSVCFormulation(0.1), {"svm_type": SVMType.ONE_CLASS, "C": 1.0, "nu": 0.1, "p": 0.1}),
        (SVRFormulation(5.0, 0.05), {"svm_type": SVMType.EPSILON_SVR, "C": 5.0, "nu": 0.5, "p": 0.05}),
        (NuSVRFormulation(4.0, 0.4), {"svm_type": SVMType.NU_SVR, "C": 4.0, "nu": 0.4, "p": 0.1}),
    ],
)
def test_formulation_update(formulation, expected):
    param = SVMParameter()
    formulation.update(param)

    for name, value in expected.items():
        assert getattr(param, name) == value
    assert param.nr_weight == 0


def test_class_weights_fill_weight_arrays():
    param = SVMParameter()
    CSVCFormulation(1.0, class_weights={1: 5.0, 0: 1.0}).update(param)

    assert param.nr_weight == 2
    assert param.weight_label == [0, 1]
    assert param.weight == [1.0, 5.0]

    # a later unweighted formulation clears them
    NuSVCFormulation(0.5, 0.1).update(param)
    assert param.nr_weight == 0
    assert param.weight_label == []


@pytest.mark.parametrize(
    "kernel, expected",
    [
        (LinearKernel(), {"kernel_type": KernelType.LINEAR}),
        (RbfKernel(0.7), {"kernel_type": KernelType.RBF, "gamma": 0.7}),
        (SigmoidKernel(0.2, 1.5), {"kernel_type": KernelType.SIGMOID, "gamma": 0.2, "coef0": 1.5}),
        (
            PolynomialKernel(0.5, 1.0, 4),
            {"kernel_type": KernelType.POLY, "gamma": 0.5, "coef0": 1.0, "degree": 4},
        ),
    ],
)
def test_kernel_update(kernel, expected):
    param = SVMParameter()
    kernel.update(param)

    for name, value in expected.items():
        assert getattr(param, name) == value


def test_items_are_immutable():
    kernel = RbfKernel(0.5)
    with pytest.raises(AttributeError):
        kernel.gamma = 1.0

    execution = SVMExecution.default()
    with pytest.raises(AttributeError):
        execution.eps = 1.0


def test_negative_folds_rejected():
    with pytest.raises(ValueError, match="n_folds"):
        SVMExecution(n_folds=-1)


def test_unknown_field_rejected():
    @dataclass(frozen=True)
    class BadKernel(SVMKernel):
        def fields(self):
            return {"bandwidth": 1.0}

    with pytest.raises(AttributeError, match="bandwidth"):
        SVMConfig(CSVCFormulation(1.0), BadKernel())


def test_str_describes_formulation_and_kernel():
    text = str(SVMConfig(SVRFormulation(1.0, 0.1), RbfKernel(0.5)))

    assert "SVM Formulation: Epsilon-SVR" in text
    assert "RBF kernel gamma=0.5" in text


@pytest.mark.parametrize(
    "class_weights",
    [{1: 5.0, 0: 1.0}, [(1, 5.0), (0, 1.0)], ((1, 5.0), (0, 1.0))],
)
def test_class_weights_accept_mapping_or_pairs(class_weights):
    formulation = CSVCFormulation(1.0, class_weights=class_weights)

    assert formulation.class_weights == ((0, 1.0), (1, 5.0))
    assert formulation == CSVCFormulation(1.0, class_weights={0: 1.0, 1: 5.0})


def test_config_parts_are_read_only():
    config = SVMConfig(CSVCFormulation(1.0), RbfKernel(0.5), SVMExecution(100, 1e-4, 3))

    for name in ("formulation", "kernel", "execution", "param"):
        with pytest.raises(AttributeError):
            setattr(config, name, None)
    assert config.eps == config.param.eps == 1e-4
    assert config.n_folds == 3
