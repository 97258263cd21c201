[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "futurebridge"
version = "1.0.0"
description = "Await blocking concurrent futures from asyncio coroutines without stalling the event loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["asyncio", "future", "awaitable", "thread pool", "concurrency", "coroutine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
futurebridge-basic-usage = "futurebridge.basic_usage:main"
futurebridge-database-example = "futurebridge.database_example:main"
futurebridge-error-handling = "futurebridge.error_handling:main"

[tool.hatch.build.targets.wheel]
packages = ["futurebridge"]

[tool.hatch.build.targets.sdist]
include = ["futurebridge", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
