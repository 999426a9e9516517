[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "contestsolvers"
version = "0.1.0"
description = "Solvers for a collection of algorithmic contest problems, usable as functions or as commands"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "graphs",
    "min-cost-flow",
    "dynamic-programming",
    "union-find",
    "xor-basis",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestsolvers-arboriculture = "contestsolvers.arboriculture:main"
contestsolvers-dragonball = "contestsolvers.dragonball:main"
contestsolvers-halloween-loot = "contestsolvers.halloween_loot:main"
contestsolvers-holmes = "contestsolvers.holmes:main"
contestsolvers-howls-castle = "contestsolvers.howls_castle:main"
contestsolvers-infection-estimation = "contestsolvers.infection_estimation:main"
contestsolvers-interconnectivity = "contestsolvers.interconnectivity:main"
contestsolvers-jinxed-betting = "contestsolvers.jinxed_betting:main"
contestsolvers-sequences = "contestsolvers.sequences:main"
contestsolvers-wine = "contestsolvers.wine:main"
contestsolvers-winter-roads = "contestsolvers.winter_roads:main"
contestsolvers-xor-maximization = "contestsolvers.xor_maximization:main"
contestsolvers-xorisland = "contestsolvers.xorisland:main"

[tool.setuptools.packages.find]
include = ["contestsolvers*"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
