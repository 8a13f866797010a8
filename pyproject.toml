[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshkit"
version = "0.1.0"
description = "Wavefront OBJ mesh loading with indexed vertex deduplication, plus BMP and DDS image helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "wavefront", "mesh", "bmp", "dds", "texture", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
