[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordpodium"
version = "0.1.0"
description = "Count word occurrences in text files and rank the most frequent words on a podium"
requires-python = ">=3.10"
dependencies = []
keywords = ["word count", "frequency", "text processing", "podium", "ranking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordpodium = "wordpodium.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["wordpodium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
