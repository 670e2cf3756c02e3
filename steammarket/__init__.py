"""Client and web front end for Steam Community Market listings."""

__version__ = "0.1.0"
__all__ = ["client", "models", "server", "steam_request"]