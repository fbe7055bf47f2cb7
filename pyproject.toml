[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastchat"
version = "0.1.0"
description = "An in-memory chat-room model with user registration, login, rooms and a ping HTTP endpoint"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "chat-room", "messaging", "users", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fastchat = "fastchat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fastchat"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
