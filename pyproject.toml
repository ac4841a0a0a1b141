[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "risp"
version = "0.1.0"
description = "Runtime core of a small Clojure-flavoured Lisp: persistent lists, values, builtins and namespaced environments"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "clojure", "interpreter", "persistent-list", "namespaces"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["risp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
