[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "1.0.0"
description = "Classic data structures and algorithms with small interactive menu programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "binary-search-tree",
    "avl-tree",
    "expression-tree",
    "graphs",
    "minimum-spanning-tree",
    "optimal-bst",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalab-obst = "dsalab.obst:main"
dsalab-bst = "dsalab.bst:main"
dsalab-expression-tree = "dsalab.expression_tree:main"
dsalab-dictionary = "dsalab.dictionary_bst:main"
dsalab-flights = "dsalab.flights:main"
dsalab-offices = "dsalab.offices:main"
dsalab-avl = "dsalab.avl_dictionary:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

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
