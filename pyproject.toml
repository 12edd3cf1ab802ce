[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletbank"
version = "1.0.0"
description = "A small HTTP service for wallet deposits, withdrawals and balance lookups"
requires-python = ">=3.10"
keywords = ["wallet", "bank", "balance", "rest", "flask", "http", "sqlalchemy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask",
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
walletbank = "walletbank.server:main"

[tool.hatch.build.targets.wheel]
packages = ["walletbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
