"""A small first-person block world with gravity, box collision and an OpenGL viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]