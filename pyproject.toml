[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roomate"
version = "0.1.0"
description = "Hotel room booking core: booking storage and pricing, tokens, password hashing and spreadsheet reports"
requires-python = ">=3.10"
keywords = ["hotel", "booking", "reservation", "rooms", "jwt", "bcrypt", "reports"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "bcrypt",
    "pyjwt",
    "cryptography",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["roomate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
