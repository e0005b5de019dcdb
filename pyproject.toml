[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toyrsa"
version = "0.1.0"
description = "A small teaching RSA toolkit: Miller-Rabin prime generation, key pairs and an interactive encrypt/decrypt session"
requires-python = ">=3.10"
dependencies = []
keywords = ["rsa", "miller-rabin", "primes", "caesar", "cryptography", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toyrsa = "toyrsa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toyrsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
