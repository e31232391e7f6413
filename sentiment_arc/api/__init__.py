"""HTTP API exposing the lexical and contextual scorers."""

from sentiment_arc.api.app import create_app

__all__ = ["create_app"]
