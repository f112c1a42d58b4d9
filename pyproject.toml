[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractol"
version = "0.1.0"
description = "An interactive Julia and Mandelbrot set viewer with mouse-wheel zoom"
requires-python = ">=3.10"
keywords = ["fractal", "julia", "mandelbrot", "viewer", "pygame", "escape-time"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractol = "fractol.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
