"""Online-judge problem solutions as Python functions, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]