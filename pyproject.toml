[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexen"
version = "0.1.0"
description = "Safety guards, envelopes and evidence checks for neuromorphic BCI upgrade workflows"
requires-python = ">=3.10"
keywords = ["bci", "neuromorphic", "safety", "risk-of-harm", "viability-kernel", "envelope"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]
dependencies = [
    "pyyaml>=6.0",
    "jsonschema>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "hypothesis>=6.0",
]

[project.scripts]
hexen-evolution = "hexen.evolution_cli:main"
hexen-xbox-client = "hexen.xbox_client:main"

[tool.hatch.build.targets.wheel]
packages = ["hexen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
