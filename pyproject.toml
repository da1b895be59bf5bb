[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meili"
version = "0.1.0"
description = "Search engine building blocks: schemas, tokenizer, settings and search result formatting"
requires-python = ">=3.10"
keywords = ["search", "indexing", "tokenizer", "schema", "highlighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Indexing",
]
dependencies = [
    "unidecode",
    "toml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meili"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
