[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "h2frames"
version = "0.1.0"
description = "HTTP/2 frame parsing, validation and building, flow-control windows and an asyncio TLS connection negotiating h2"
requires-python = ">=3.10"
dependencies = []
keywords = ["http2", "h2", "frames", "protocol", "flow-control", "tls", "alpn", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["h2frames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
