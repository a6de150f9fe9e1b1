[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketboy"
version = "0.1.0"
description = "Building blocks of a handheld console emulator: clock cycles, divider, cartridge header, interrupts, joypad and audio unit"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "handheld", "dmg", "audio", "apu", "cartridge"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketboy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
