"""An interactive file manager confined to a single root directory."""

__version__ = "0.1.0"
__all__ = ["__version__"]