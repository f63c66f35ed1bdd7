[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilestat"
version = "0.1.0"
description = "Status-line components and a tiling window-management model"
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["status", "statusbar", "tiling", "window-manager", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilestat = "tilestat.status:main"

[tool.hatch.build.targets.wheel]
packages = ["tilestat"]

[tool.pytest.ini_options]
addopts = "-ra"
