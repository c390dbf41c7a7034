"""Webhook service for tube2notion."""

from tube2notion.api.app import create_app

__all__ = ["create_app"]
