"""Parse shell command lines into pipelines of commands with redirections."""

__version__ = "0.1.0"

__all__ = ["__version__"]