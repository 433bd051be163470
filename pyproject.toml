[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combiparse"
version = "0.1.0"
description = "Small parser combinators with a JSON parser built from them"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "combinator", "json", "parsing"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
combiparse = "combiparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["combiparse"]

[tool.pytest.ini_options]
addopts = "-ra"
