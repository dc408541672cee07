[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sprite2d"
version = "0.1.0"
description = "Small 2D drawing toolkit on pygame: TGA loading, shape vertices, sprite-sheet quads, frame animation and a demo game"
requires-python = ">=3.10"
keywords = ["2d", "sprite", "tga", "targa", "animation", "pygame", "game"]
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
    "Topic :: Software Development :: Libraries :: pygame",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sprite2d-demo = "sprite2d.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sprite2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
