[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matcolors"
version = "0.4.2"
description = "Material color utilities: HCT color space, CAM16, tonal palettes and k-means color quantization"
requires-python = ">=3.10"
keywords = ["color", "palette", "color-scheme", "material", "hct", "cam16", "quantization", "k-means"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matcolors"]

[tool.pytest.ini_options]
addopts = "-ra"
