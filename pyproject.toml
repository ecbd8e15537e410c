[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursebook"
version = "0.1.0"
description = "Book tooling for a programming course (course structure, timings, exercise extraction) and reference solutions to its exercises."
requires-python = ">=3.10"
keywords = ["mdbook", "markdown", "preprocessor", "renderer", "course", "exercises", "frontmatter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "pyyaml",
    "markdown-it-py",
    "requests",
    "beautifulsoup4",
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "responses",
]

[project.scripts]
coursebook-course = "coursebook.preprocessor:main"
coursebook-exerciser = "coursebook.exerciser:main"
coursebook-dining-philosophers = "coursebook.exercises.philosophers:main"
coursebook-link-checker = "coursebook.exercises.link_checker:main"
coursebook-chat-server = "coursebook.exercises.chat:main_server"
coursebook-chat-client = "coursebook.exercises.chat:main_client"

[tool.hatch.build.targets.wheel]
packages = ["coursebook"]

[tool.hatch.build.targets.sdist]
include = ["coursebook", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
