[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxlearn"
version = "0.1.0"
description = "Speech audio I/O, feature extraction and data preparation tools for machine learning"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "speech",
    "audio",
    "wav",
    "pcm",
    "butterworth",
    "lpc",
    "delta features",
    "svd",
    "pca",
    "timit",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxlearn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
