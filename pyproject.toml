[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bomberman"
version = "0.1.0"
description = "A multiplayer Bomberman game played over plain TCP, with a server and a line-based client"
requires-python = ">=3.10"
keywords = ["bomberman", "game", "tcp", "multiplayer", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
bomberman-server = "bomberman.server_cli:main"
bomberman-client = "bomberman.client_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bomberman"]

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
