[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cozesdk"
version = "0.1.0"
description = "Client library for the Coze open API: workflow runs, streamed workflow events, run histories, templates and users"
requires-python = ">=3.10"
keywords = ["coze", "api", "client", "sdk", "workflow", "streaming", "server-sent events"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cozesdk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
