[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linalgkit"
version = "0.1.0"
description = "Small pure-Python vectors, matrices, inverses and QR decomposition"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "vector",
    "matrix",
    "determinant",
    "inverse",
    "qr decomposition",
    "pseudoinverse",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linalgkit-selfcheck = "linalgkit.selfcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["linalgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
