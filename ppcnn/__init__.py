"""Configuration files, wire parameters, data containers, MNIST/CIFAR-10 readers and option flags for encrypted CNN inference."""

__version__ = "0.1.0"

__all__ = [
    "cifar",
    "config",
    "constants",
    "data",
    "datasets",
    "mapqueue",
    "mnist",
    "optoption",
    "params",
    "preprocess",
    "utility",
]