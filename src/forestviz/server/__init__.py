"""Browser app. Requires ``pip install forestviz[server]``."""

from forestviz.server.app import create_app

__all__ = ["create_app"]
