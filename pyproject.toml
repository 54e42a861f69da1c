[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillkit"
version = "0.1.0"
description = "Small building blocks: NUL-terminated string helpers, djb2 hash tables and classic array and list search algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "hash table", "djb2", "search", "binary search", "jump search", "skip list"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillkit-strlen = "drillkit.textlib:main"
drillkit-school = "drillkit.school:main"
drillkit-search = "drillkit.search:main"

[tool.hatch.build.targets.wheel]
packages = ["drillkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
