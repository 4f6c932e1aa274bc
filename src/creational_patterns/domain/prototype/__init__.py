"""Prototype domain."""

from .prototype import ComponentWithBackReference, Prototype

__all__ = ["ComponentWithBackReference", "Prototype"]
