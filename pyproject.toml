[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swiftqr"
version = "0.1.0"
description = "Pure Python QR code generator with automatic mode, version and mask selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "barcode", "reed-solomon", "2d-code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swiftqr = "swiftqr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swiftqr"]

[tool.hatch.build.targets.sdist]
include = ["swiftqr", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
