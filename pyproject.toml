[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gerpy"
version = "0.1.0"
description = "Index a directory tree by word and answer case-sensitive or case-insensitive line queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "index", "text", "files"]
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
    "Topic :: Text Processing :: Indexing",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gerpy = "gerpy.engine:main"
gerpy-tree = "gerpy.tree:main"

[tool.hatch.build.targets.wheel]
packages = ["gerpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
