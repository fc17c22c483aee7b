[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialhue"
version = "0.4.2"
description = "Material color utilities: color spaces, contrast math and dynamic color resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "palette", "color-scheme", "material", "contrast", "theme"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["materialhue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
