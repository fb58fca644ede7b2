"""Application wide configuration and logging helpers."""
