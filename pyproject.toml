[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splmeter"
version = "0.1.0"
description = "Sound level meter: Z-, A- and C-weighted equivalent levels from calibrated microphone samples"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "sound level meter",
    "spl",
    "leq",
    "a-weighting",
    "c-weighting",
    "acoustics",
    "microphone calibration",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
splmeter = "splmeter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splmeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
