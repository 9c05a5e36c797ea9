[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codesuggest"
version = "0.1.0"
description = "Compiler phases for a small C subset: a lexer with keyword suggestions, a parse-tree builder, semantic checks and accumulator target code from three-address code"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "semantic-analysis", "code-generation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codesuggest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
