[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nacoskit"
version = "0.1.0"
description = "Building blocks for service-discovery and configuration clients: RFC 4122 UUIDs, request parameter mapping, models and helpers"
requires-python = ">=3.10"
keywords = ["uuid", "rfc4122", "service discovery", "configuration", "request parameters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nacoskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
