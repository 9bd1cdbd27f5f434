[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtscene"
version = "0.1.0"
description = "Reader, validator and reporter for .rt ray-tracing scene files"
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracing", "scene", "parser", "rt"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtscene = "rtscene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
