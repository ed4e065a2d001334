"""Lookup across the whole community app catalogue."""

from __future__ import annotations

from communityapps import catalog_first, catalog_fourth, catalog_second, catalog_third
from communityapps.manifest import Manifest

_CATALOGUES = (catalog_first, catalog_second, catalog_third, catalog_fourth)


def all_manifests() -> list[Manifest]:
    """Return fresh manifests for every app in the catalogue."""
    return [app for catalogue in _CATALOGUES for app in catalogue.manifests()]


def find_manifest(app_id: str) -> Manifest:
    """Return the manifest whose id is ``app_id``.

    Raises LookupError when no app has that id.
    """
    for app in all_manifests():
        if app.id == app_id:
            return app
    raise LookupError(f"could not find app: {app_id}")