[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small command-line programs and libraries covering text, numbers, images, HTTP fetching, value formatting, deep equality and compression"
requires-python = ">=3.10"
keywords = [
    "examples",
    "command-line",
    "palindrome",
    "mandelbrot",
    "lissajous",
    "bzip2",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
primer-echo = "primer.echo:main"
primer-dup1 = "primer.dup:dup1_main"
primer-dup2 = "primer.dup:dup2_main"
primer-dup3 = "primer.dup:dup3_main"
primer-basename = "primer.textutil:basename_main"
primer-comma = "primer.textutil:comma_main"
primer-boiling = "primer.tempconv:boiling_main"
primer-ftoc = "primer.tempconv:ftoc_main"
primer-cf = "primer.tempconv:cf_main"
primer-netflag = "primer.netflag:main"
primer-append = "primer.slices:append_main"
primer-nonempty = "primer.slices:nonempty_main"
primer-rev = "primer.slices:rev_main"
primer-charcount = "primer.charcount:main"
primer-dedup = "primer.dedup:main"
primer-graph = "primer.graph:main"
primer-lissajous = "primer.lissajous:main"
primer-mandelbrot = "primer.mandelbrot:main"
primer-jpeg = "primer.jpeg:main"
primer-fetch = "primer.fetch:fetch_main"
primer-fetchall = "primer.fetch:fetchall_main"
primer-printints = "primer.printints:main"
primer-bzipper = "primer.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
