[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fismed"
version = "0.1.0"
description = "JSON-over-HTTP back end for a medical-supply distributor: customers, warehouses, price lists, purchase orders and payables/receivables"
requires-python = ">=3.10"
keywords = ["accounting", "inventory", "purchase-order", "price-list", "flask", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = [
    "flask>=2.2",
    "pyjwt>=2.4",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
fismed = "fismed.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fismed"]

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
