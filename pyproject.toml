[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telekit"
version = "0.1.0"
description = "Building blocks for Telegram bots: keyboards, media, polls, payments, middleware, configuration and webhook settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["telegram", "bot", "chat", "keyboard", "middleware", "webhook"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["telekit"]

[tool.pytest.ini_options]
addopts = "-ra"
