[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwtoken"
version = "0.1.0"
description = "Message types, responses and validation rules for fungible-token contracts and proxy/group interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["token", "cw20", "cw1", "cw4", "smart-contract", "messages", "json", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwtoken"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
