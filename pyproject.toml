[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppcnn"
version = "0.1.0"
description = "Shared building blocks for privacy-preserving CNN inference: configuration files, wire parameters, data containers and MNIST/CIFAR-10 readers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnn", "homomorphic-encryption", "mnist", "cifar-10", "privacy", "dataset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ppcnn"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
