[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small command-line tools and library modules: text filters, converters, image generators, tiny HTTP servers, deep equality and bzip2 compression."
requires-python = ">=3.10"
keywords = [
    "text-processing",
    "deep-equality",
    "fractals",
    "lissajous",
    "temperature",
    "popcount",
    "bzip2",
    "http-server",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Filters",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]
dependencies = [
    "pillow",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
primer-echo = "primer.echo:main"
primer-dup = "primer.dup:main"
primer-dedup = "primer.dup:dedup_main"
primer-charcount = "primer.dup:charcount_main"
primer-comma = "primer.textutil:main"
primer-basename = "primer.textutil:basename_main"
primer-cf = "primer.tempconv:main"
primer-append = "primer.slices:main"
primer-movie = "primer.movie:main"
primer-sha256 = "primer.digest:main"
primer-surface = "primer.surface:main"
primer-mandelbrot = "primer.mandelbrot:main"
primer-lissajous = "primer.lissajous:main"
primer-jpeg = "primer.jpegconv:main"
primer-fetch = "primer.fetch:main"
primer-fetchall = "primer.fetch:fetchall_main"
primer-server = "primer.servers:main"
primer-cross = "primer.sysinfo:main"
primer-issues = "primer.issues:main"
primer-issueshtml = "primer.issues:html_main"
primer-issuesreport = "primer.issues:report_main"
primer-search = "primer.search:main"
primer-bzipper = "primer.bzipper:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
