[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kingkai"
version = "0.1.0"
description = "Send text between processes one bit at a time over SIGUSR1 and SIGUSR2, with a small set of string and formatting helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "sigusr1", "sigusr2", "chat", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kingkai-server = "kingkai.server:main"
kingkai-client = "kingkai.client:main"

[tool.hatch.build.targets.wheel]
packages = ["kingkai"]

[tool.pytest.ini_options]
addopts = "-ra"
