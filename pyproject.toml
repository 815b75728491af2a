[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpkit"
version = "0.1.0"
description = "Functor, Applicative and Monad abstractions with Option and Either types"
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "monad", "functor", "applicative", "option", "either"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
