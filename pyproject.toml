[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cminlex"
version = "0.1.0"
description = "Lexical analyser for the C-- teaching language, with a token-dumping command line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "scanner", "compiler", "c-minus-minus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cminlex = "cminlex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cminlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
