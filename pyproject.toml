[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifestuff"
version = "0.2.3"
description = "Everyday command-line helpers: unit conversions, date arithmetic, mortgage interest, mileage, currency and e-mail aliases."
requires-python = ">=3.10"
keywords = ["cli", "units", "dates", "mortgage", "currency", "mileage", "email-alias"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "requests",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
lifestuff = "lifestuff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lifestuff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
