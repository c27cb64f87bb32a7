"""A tiny interactive toy shell with a calculator and a customisable prompt."""

__version__ = "0.1.0"

__all__ = ["__version__"]