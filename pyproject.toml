[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgo"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, deadlock avoidance, memory allocation, page replacement, disk scheduling and readers-writers locking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "banker's algorithm",
    "page replacement",
    "disk scheduling",
    "memory allocation",
    "readers-writers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgo-commands = "osalgo.commands:main"
osalgo-redirect = "osalgo.redirection:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
