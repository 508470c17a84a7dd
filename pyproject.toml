[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hbondprofile"
version = "0.1.0"
description = "Hydrogen-bond profiles in slabs along a box axis or in spherical shells, computed from molecular simulation frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["hydrogen bond", "molecular dynamics", "profile", "analysis", "chemistry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hbondprofile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
