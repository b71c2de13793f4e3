from .console import console

name = "cli"

__all__ = [
    "console",
]
