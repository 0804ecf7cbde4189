[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geometrize"
version = "0.1.0"
description = "Building blocks for approximating images with geometric primitives: RGBA bitmaps, scanline rasterization, colour fitting, error measures and BMP export."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometrize", "image", "rasterizer", "scanline", "bitmap", "bmp", "primitives"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["geometrize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
