[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "optionlab"
version = "0.1.0"
description = "Option pricing with Black-Scholes, binomial tree and Monte Carlo engines, strategy P&L analysis and an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["options", "black-scholes", "binomial", "monte-carlo", "greeks", "derivatives", "pricing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
optionlab = "optionlab.cli:main"

[tool.setuptools.packages.find]
include = ["optionlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
