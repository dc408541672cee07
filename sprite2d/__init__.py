"""2D drawing on pygame: TGA loading, shape vertices, sprite quads, frame animation and a demo game."""

__version__ = "0.1.0"