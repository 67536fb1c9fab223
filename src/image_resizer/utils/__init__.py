"""Shared helpers for image_resizer."""
