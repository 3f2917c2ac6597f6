[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cocalc"
version = "0.1.3"
description = "Circle of Confusion calculator giving the convolution radius in pixels for depth of field processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["coc", "camera", "photography", "depth of field", "circle of confusion"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cocalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
