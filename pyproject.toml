[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coscli"
version = "0.1.0"
description = "Helpers for a cloud object storage command-line client: URLs, paths, metadata, secrets and transfer progress."
requires-python = ">=3.10"
keywords = ["cos", "object-storage", "cli", "transfer", "progress"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["coscli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
