[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursoapps"
version = "0.1.0"
description = "Small applications: inventory, bank accounts, price fetcher, site monitor and several Flask web services"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["education", "inventory", "rest-api", "flask", "sqlite", "monitoring", "bank-accounts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cursoapps-estoque = "cursoapps.estoque.cli:main"
cursoapps-contas = "cursoapps.contas.accounts:main"
cursoapps-buscador = "cursoapps.buscador.prices:main"
cursoapps-monitor = "cursoapps.monitor.monitor:main"
cursoapps-pizzaria = "cursoapps.pizzaria.app:main"
cursoapps-loja = "cursoapps.loja.web:main"
cursoapps-personalidades = "cursoapps.personalidades.api:main"
cursoapps-alunos = "cursoapps.alunos.app:main"
cursoapps-itens = "cursoapps.itens.api:main"

[tool.hatch.build.targets.wheel]
packages = ["cursoapps"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
