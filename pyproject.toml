[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crstoolchain"
version = "2.0.0"
description = "Helpers for Core Rule Set regex-assembly files: configuration, root discovery, formatting checks and regex comparison"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["crs", "modsecurity", "waf", "regex", "regex-assembly", "toolchain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["crstoolchain"]

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
