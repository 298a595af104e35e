[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mercado"
version = "1.0.0"
description = "Dates, people, groups, customers, products and branches, with command interpreters to drive them"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "sorted collections", "command interpreter", "data structures"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mercado-grupo = "mercado.consola_grupo:main"
mercado = "mercado.consola_mercado:main"

[tool.hatch.build.targets.wheel]
packages = ["mercado"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
