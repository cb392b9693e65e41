[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vidarscan"
version = "0.1.0"
description = "Concurrent web path, host and TCP port scanner with adaptive request rate"
requires-python = ">=3.10"
keywords = ["scanner", "port-scan", "host-discovery", "directory-scan", "security"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Networking",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
vidarscan = "vidarscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vidarscan"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
