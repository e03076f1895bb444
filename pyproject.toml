[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfrtkit"
version = "0.1.0"
description = "Typed model of BFRuntime pipeline descriptions and P4 compiler configuration files"
requires-python = ">=3.10"
dependencies = []
keywords = ["p4", "bfruntime", "bfrt", "tofino", "switch", "networking", "schema"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bfrtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
