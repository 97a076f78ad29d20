[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castkit"
version = "0.1.0"
description = "Scalar literal conversion, object handle round-tripping and runtime type identification utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["conversion", "scalar", "literal", "serialization", "type identification", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
castkit-convert = "castkit.converter:main"
castkit-serialize = "castkit.serialization:main"
castkit-identify = "castkit.identify:main"

[tool.hatch.build.targets.wheel]
packages = ["castkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
