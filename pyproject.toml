[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "registro_autos"
version = "1.0.0"
description = "Interactive console register of vehicles stored in fixed-size binary records with a CSV export"
requires-python = ">=3.10"
dependencies = []
keywords = ["vehicles", "register", "csv", "console", "records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
registro-autos = "registro_autos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["registro_autos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
