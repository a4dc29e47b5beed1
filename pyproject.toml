[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topgrade"
version = "8.2.0"
description = "Building blocks for keeping a machine up to date: distribution detection, executable lookup, terminal reporting and upgrade command lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["upgrade", "update", "package-manager", "system-administration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["topgrade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
