[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stompbox"
version = "0.1.0"
description = "Guitar-pedal style audio effects, pitch shifting, FFT helpers and WAV tools"
requires-python = ">=3.10"
keywords = ["audio", "dsp", "effects", "guitar", "pitch-shift", "fft", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stompbox-sine-table = "stompbox.sine_table:main"
stompbox-fft = "stompbox.tools:fft_main"
stompbox-compare = "stompbox.tools:compare_main"
stompbox-diff = "stompbox.tools:diff_main"
stompbox-dump = "stompbox.tools:dump_main"
stompbox-sine = "stompbox.tools:sine_main"
stompbox-graph = "stompbox.graphing:main"

[tool.hatch.build.targets.wheel]
packages = ["stompbox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
