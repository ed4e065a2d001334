[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "communityapps"
version = "0.1.0"
description = "Manifests, validation rules and scaffolding tools for a catalogue of community display applets."
requires-python = ">=3.10"
dependencies = []
keywords = ["applets", "manifest", "scaffolding", "code generation", "starlark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
community-tools = "communityapps.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["communityapps"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
