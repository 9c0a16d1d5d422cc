[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuxtv"
version = "0.1.0"
description = "Core logic of a television and radio stream viewer: channel catalog, logos, recordings and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["iptv", "television", "radio", "recordings", "channels", "logos"]
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
    "Topic :: Multimedia :: Video :: Display",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuxtv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
