[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quotedb"
version = "0.1.0"
description = "Record exchange bid/ask quotes in a SQLite database, one table per exchange."
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "quotes", "bid", "ask", "exchange", "arbitrage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quotedb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
