[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterncraft"
version = "1.0.0"
description = "Small, runnable examples of the classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "object-oriented",
    "factory",
    "builder",
    "singleton",
    "visitor",
    "observer",
    "strategy",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
patterncraft-simple-factory = "patterncraft.simple_factory:main"
patterncraft-factory-method = "patterncraft.factory_method:main"
patterncraft-abstract-factory = "patterncraft.abstract_factory:main"
patterncraft-builder = "patterncraft.builder:main"
patterncraft-prototype = "patterncraft.prototype:main"
patterncraft-singleton = "patterncraft.singleton:main"
patterncraft-adapter = "patterncraft.adapter:main"
patterncraft-bridge = "patterncraft.bridge:main"
patterncraft-composite = "patterncraft.composite:main"
patterncraft-decorator = "patterncraft.decorator:main"
patterncraft-facade = "patterncraft.facade:main"
patterncraft-flyweight = "patterncraft.flyweight:main"
patterncraft-proxy = "patterncraft.proxy:main"
patterncraft-chain = "patterncraft.chain:main"
patterncraft-command = "patterncraft.command:main"
patterncraft-interpreter = "patterncraft.interpreter:main"
patterncraft-iterator = "patterncraft.iterator:main"
patterncraft-state = "patterncraft.state:main"
patterncraft-strategy = "patterncraft.strategy:main"
patterncraft-template-method = "patterncraft.template_method:main"
patterncraft-visitor = "patterncraft.visitor:main"

[tool.hatch.build.targets.wheel]
packages = ["patterncraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
