[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svckit"
version = "0.1.0"
description = "Building blocks for layered services: repositories, transactions, tokens, password hashing, caching helpers and SQL-to-model generation."
requires-python = ">=3.10"
keywords = [
    "repository",
    "sqlalchemy",
    "jwt",
    "bcrypt",
    "transactions",
    "code-generation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Database",
]
dependencies = [
    "bcrypt>=4.0",
    "pyjwt>=2.8",
    "sqlalchemy>=2.0",
    "pydantic>=2.5",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
svckit-genmodels = "svckit.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["svckit"]

[tool.hatch.build.targets.sdist]
include = ["svckit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
