"""Network module for restservice."""

from .app import create_app
from .http_server import RestServer

__all__ = ["RestServer", "create_app"]
