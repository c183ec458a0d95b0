"""Themeable widget model for small status panels, built from JSON layouts and themes."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "style",
    "theme",
    "label",
    "icon",
    "value",
    "button",
    "container",
    "spinner",
    "toggle",
    "ticker",
    "image",
    "bar",
    "gauge",
    "sparkline",
    "graph",
    "factory",
]