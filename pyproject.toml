[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structpatterns"
version = "1.0.0"
description = "Runnable examples of the seven structural design patterns: adapter, bridge, composite, decorator, facade, flyweight and proxy."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "structural patterns",
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "flyweight",
    "proxy",
    "education",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structpatterns-adapter = "structpatterns.adapter:main"
structpatterns-bridge = "structpatterns.bridge:main"
structpatterns-composite = "structpatterns.composite:main"
structpatterns-decorator = "structpatterns.decorator:main"
structpatterns-facade = "structpatterns.facade:main"
structpatterns-flyweight = "structpatterns.flyweight:main"
structpatterns-proxy = "structpatterns.proxy:main"

[tool.hatch.build.targets.wheel]
packages = ["structpatterns"]

[tool.hatch.build.targets.sdist]
include = ["structpatterns", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["structpatterns"]
