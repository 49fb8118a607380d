"""Data models for passim."""

from passim.models.item import Item

__all__ = ["Item"]
