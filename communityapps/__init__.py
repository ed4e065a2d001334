"""Applet manifests and their validation, a built-in applet catalogue, and tools to scaffold, remove and index applets."""

__version__ = "0.1.0"

__all__ = [
    "catalog_first",
    "catalog_second",
    "catalog_third",
    "catalog_fourth",
    "cli",
    "generator",
    "manifest",
    "registry",
]