[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigprime"
version = "0.1.0"
description = "Probabilistic primality testing, prime search and Montgomery modular exponentiation for arbitrary-size integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "primes", "miller-rabin", "lucas", "baillie-psw", "montgomery", "modpow", "extended-gcd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bigprime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
