[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogsim"
version = "0.1.0"
description = "A small simulator of a music catalog search API with pluggable music providers."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "catalog", "search", "api", "simulator", "wsgi"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catalogsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
