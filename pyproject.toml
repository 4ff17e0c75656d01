[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mailjetsend"
version = "0.3.1"
description = "Asynchronous client for the Mailjet Send API: build messages, attach files and send them"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["mailjet", "email", "send-api", "transactional-email", "async"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
mailjetsend-example = "mailjetsend.example:main"

[tool.hatch.build.targets.wheel]
packages = ["mailjetsend"]

[tool.hatch.build.targets.sdist]
include = ["mailjetsend", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
