[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "galaxysim"
version = "0.1.0"
description = "Particle, SPH material, wall and BVH building blocks for 2D galaxy and fluid simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "particles", "galaxy", "sph", "bvh", "ray intersection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["galaxysim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
