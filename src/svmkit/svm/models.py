"""Build scikit-learn SVM estimators from SVM configurations."""

from __future__ import annotations

import logging

from sklearn.svm import SVC, SVR, NuSVC, NuSVR, OneClassSVM

from .config import SVMConfig
from .execution import DEFAULT_CACHE_SIZE, DEFAULT_EPS, DEFAULT_N_FOLDS, SVMExecution
from .formulation import (
    CSVCFormulation,
    NuSVCFormulation,
    NuSVRFormulation,
    OneSVCFormulation,
    SVRFormulation,
)
from .kernel import LinearKernel, PolynomialKernel, RbfKernel, SigmoidKernel
from .parameters import KernelType, SVMParameter, SVMType

logger = logging.getLogger(__name__)


class SVMConfigurationError(ValueError):
    """Raised when the solver rejects a configuration."""


KERNEL_NAMES = {
    KernelType.LINEAR: "linear",
    KernelType.POLY: "poly",
    KernelType.RBF: "rbf",
    KernelType.SIGMOID: "sigmoid",
}


def _kernel_kwargs(param: SVMParameter) -> dict:
    if param.kernel_type not in KERNEL_NAMES:
        raise SVMConfigurationError(f"Unknown kernel type: {param.kernel_type}")
    return {
        "kernel": KERNEL_NAMES[param.kernel_type],
        "degree": param.degree,
        "gamma": param.gamma,
        "coef0": param.coef0,
        "tol": param.eps,
        "cache_size": param.cache_size,
        "shrinking": param.shrinking,
    }


def _class_weight(param: SVMParameter) -> dict | None:
    if param.nr_weight == 0:
        return None
    return dict(zip(param.weight_label[: param.nr_weight], param.weight[: param.nr_weight]))


def create_svm(config: SVMConfig, seed: int | None = None, max_iter: int = -1):
    """Estimator matching the configured problem type, with libsvm fields translated."""
    param = config.param
    common = _kernel_kwargs(param)
    common["max_iter"] = max_iter

    classifier = {"class_weight": _class_weight(param), "random_state": seed}
    # probability is deprecated in scikit-learn, only pass it when requested
    if param.probability:
        classifier["probability"] = True

    if param.svm_type == SVMType.C_SVC:
        return SVC(C=param.C, **classifier, **common)
    if param.svm_type == SVMType.NU_SVC:
        return NuSVC(nu=param.nu, **classifier, **common)
    if param.svm_type == SVMType.ONE_CLASS:
        return OneClassSVM(nu=param.nu, **common)
    if param.svm_type == SVMType.EPSILON_SVR:
        return SVR(C=param.C, epsilon=param.p, **common)
    if param.svm_type == SVMType.NU_SVR:
        return NuSVR(C=param.C, nu=param.nu, **common)
    raise SVMConfigurationError(f"Unknown SVM type: {param.svm_type}")


def is_classifier_config(config: SVMConfig) -> bool:
    return config.param.svm_type in (SVMType.C_SVC, SVMType.NU_SVC)


def is_regression_config(config: SVMConfig) -> bool:
    return config.param.svm_type in (SVMType.EPSILON_SVR, SVMType.NU_SVR)


def create_c_svc(cfg: dict) -> CSVCFormulation:
    return CSVCFormulation(
        c=cfg.get("C", 1.0),
        class_weights=cfg.get("class_weights") or (),
    )


def create_nu_svc(cfg: dict) -> NuSVCFormulation:
    return NuSVCFormulation(nu=cfg.get("nu", 0.5), rho=cfg.get("rho", 0.1))


def create_one_class(cfg: dict) -> OneSVCFormulation:
    return OneSVCFormulation(nu=cfg.get("nu", 0.5))


def create_svr(cfg: dict) -> SVRFormulation:
    return SVRFormulation(c=cfg.get("C", 1.0), epsilon=cfg.get("epsilon", 0.1))


def create_nu_svr(cfg: dict) -> NuSVRFormulation:
    return NuSVRFormulation(c=cfg.get("C", 1.0), nu=cfg.get("nu", 0.5))


FORMULATION_REGISTRY = {
    "c_svc": create_c_svc,
    "nu_svc": create_nu_svc,
    "one_class": create_one_class,
    "epsilon_svr": create_svr,
    "nu_svr": create_nu_svr,
}

KERNEL_REGISTRY = {
    "linear": lambda cfg: LinearKernel(),
    "rbf": lambda cfg: RbfKernel(gamma=cfg.get("gamma", "scale")),
    "sigmoid": lambda cfg: SigmoidKernel(
        gamma=cfg.get("gamma", "scale"), coef0=cfg.get("coef0", 0.0)
    ),
    "poly": lambda cfg: PolynomialKernel(
        gamma=cfg.get("gamma", "scale"),
        coef0=cfg.get("coef0", 0.0),
        degree=cfg.get("degree", 3),
    ),
}


def config_from_dict(section: dict) -> SVMConfig:
    """SVMConfig from a config section with formulation, kernel and execution entries."""
    formulation_cfg = dict(section.get("formulation", {}))
    kernel_cfg = dict(section.get("kernel", {}))

    formulation_type = formulation_cfg.get("type", "c_svc")
    if formulation_type not in FORMULATION_REGISTRY:
        raise SVMConfigurationError(
            f"Unknown formulation '{formulation_type}'. "
            f"Available: {sorted(FORMULATION_REGISTRY)}"
        )
    kernel_type = kernel_cfg.get("type", "rbf")
    if kernel_type not in KERNEL_REGISTRY:
        raise SVMConfigurationError(
            f"Unknown kernel '{kernel_type}'. Available: {sorted(KERNEL_REGISTRY)}"
        )

    formulation = FORMULATION_REGISTRY[formulation_type](formulation_cfg)
    kernel = KERNEL_REGISTRY[kernel_type](kernel_cfg)

    execution = None
    execution_cfg = section.get("execution")
    if execution_cfg is not None:
        execution = SVMExecution(
            cache_size=execution_cfg.get("cache_size", DEFAULT_CACHE_SIZE),
            eps=float(execution_cfg.get("eps", DEFAULT_EPS)),
            n_folds=int(execution_cfg.get("n_folds", DEFAULT_N_FOLDS)),
        )

    config = SVMConfig(formulation, kernel, execution)
    logger.debug(f"Built SVM configuration: {config!r}")
    return config
