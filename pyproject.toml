[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mongocommon"
version = "0.1.0"
description = "Read preferences, write concerns and option merging for MongoDB command documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["mongodb", "read-preference", "write-concern", "database"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mongocommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
