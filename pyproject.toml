[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splitcrypt"
version = "0.1.0"
description = "Split large files into parts, encrypt them with ChaCha20 and SHA-256 integrity checks, and reassemble them"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["backup", "encryption", "chacha20", "split", "archive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["splitcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
