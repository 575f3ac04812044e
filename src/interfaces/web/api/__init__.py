"""HTTP API."""

from src.interfaces.web.api.app import create_app


__all__ = ["create_app"]
