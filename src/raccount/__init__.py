"""Raccount: movements, accounts and concepts kept in SQLite."""

__version__ = "0.1.0"

__all__ = ["__version__", "main"]


def __getattr__(name):
    # The CLI pulls in click and every command; load it on first use only
    if name == "main":
        from raccount.cli.main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
