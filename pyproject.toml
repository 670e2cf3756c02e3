[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steammarket"
version = "0.1.0"
description = "Fetch Steam Community Market listings and serve them over a small web page and JSON API"
requires-python = ">=3.10"
keywords = ["steam", "market", "aiohttp", "jinja2", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "aiohttp>=3.9",
    "jinja2>=3.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[project.scripts]
steammarket = "steammarket.server:main"

[tool.hatch.build.targets.wheel]
packages = ["steammarket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
