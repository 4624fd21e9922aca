[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clnrpc"
version = "0.1.0"
description = "JSON-RPC client, configuration manager and plugin toolkit for Core Lightning"
requires-python = ">=3.10"
dependencies = []
keywords = ["lightning", "bitcoin", "core-lightning", "json-rpc", "plugin", "unix-socket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clnrpc-hello-plugin = "clnrpc.hello_plugin:main"

[tool.hatch.build.targets.wheel]
packages = ["clnrpc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
