[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beacnmic"
version = "0.1.0"
description = "Message encoding, device protocol and hot plug tracking for Beacn Mic and Beacn Studio audio devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["beacn", "microphone", "audio", "usb", "mixer", "dsp"]
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
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["beacnmic"]

[tool.pytest.ini_options]
addopts = "-ra"
