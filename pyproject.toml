[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyi_stubgen"
version = "0.7.1"
description = "Generate Python type stub files (*.pyi) from declared type metadata of extension modules"
requires-python = ">=3.11"
dependencies = []
keywords = ["stubs", "pyi", "typing", "type hints", "code generation", "extension modules"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pyi_stubgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
