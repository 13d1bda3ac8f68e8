[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vocabdrill"
version = "0.1.0"
description = "Terminal flashcard drill for English vocabulary with highlighted example sentences"
requires-python = ">=3.10"
keywords = ["vocabulary", "flashcards", "english", "terminal", "study"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "blessed",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vocabdrill = "vocabdrill.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vocabdrill"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
