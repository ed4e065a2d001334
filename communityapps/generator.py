"""Creates, removes and indexes app packages inside an apps directory."""

from __future__ import annotations

import shutil
from pathlib import Path
from string import Template

from communityapps.manifest import Manifest

_PY_EXT = ".py"
_INDEX_NAME = "apps"
_EXCLUDED_DIRS = {"manifest"}

_STAR_TEMPLATE = Template(
    '''"""
Applet: $name
Summary: $summary
Description: $desc
Author: $author
"""

load("render.star", "render")

def main():
    return render.Root(
        child = render.Text("Hello, World!"),
    )
'''
)

_MODULE_TEMPLATE = Template(
    '''"""Provides details for the $name applet."""

from pathlib import Path

from communityapps.manifest import Manifest

_SOURCE = Path(__file__).with_name($file_name_literal)


def new() -> Manifest:
    """Create a new instance of the $name applet."""
    return Manifest(
        id=$id_literal,
        name=$name_literal,
        author=$author_literal,
        summary=$summary_literal,
        desc=$desc_literal,
        file_name=$file_name_literal,
        package_name=$package_name_literal,
        source=_SOURCE.read_bytes(),
    )
'''
)

_INDEX_TEMPLATE = Template(
    '''"""Index of every app in this directory."""

from __future__ import annotations

$imports


def manifests():
    """Return the manifest of every app, in package order."""
    return [
$entries
    ]
'''
)


class Generator:
    """Writes app packages and the app index under ``apps_dir``."""

    def __init__(self, apps_dir: str | Path = "apps") -> None:
        self.apps_dir = Path(apps_dir)

    def generate_app(self, app: Manifest) -> Path:
        """Create the app's directory, starlark source and module, then reindex."""
        app_dir = self._app_dir(app)
        app_dir.mkdir(parents=True, exist_ok=True)
        self._generate_starlark(app)
        self._generate_module(app)
        self.update_apps()
        return app_dir

    def remove_app(self, app: Manifest) -> None:
        """Delete the app's directory, if present, then reindex."""
        app_dir = self._app_dir(app)
        if app_dir.exists():
            shutil.rmtree(app_dir)
        self.update_apps()

    def update_apps(self) -> Path:
        """Regenerate the app index from the package directories present."""
        packages = sorted(
            entry.name
            for entry in self.apps_dir.iterdir()
            if entry.is_dir()
            and entry.name not in _EXCLUDED_DIRS
            and not entry.name.startswith(("_", "."))
        )
        imports = "\n".join(f"from .{pkg} import {pkg}" for pkg in packages)
        entries = "\n".join(f"        {pkg}.new()," for pkg in packages)
        index_path = self.apps_dir / (_INDEX_NAME + _PY_EXT)
        index_path.write_text(
            _INDEX_TEMPLATE.substitute(imports=imports, entries=entries),
            encoding="utf-8",
        )
        return index_path

    def _app_dir(self, app: Manifest) -> Path:
        return self.apps_dir / app.package_name

    def _generate_starlark(self, app: Manifest) -> Path:
        path = self._app_dir(app) / app.file_name
        path.write_text(
            _STAR_TEMPLATE.substitute(
                name=app.name, summary=app.summary, desc=app.desc, author=app.author
            ),
            encoding="utf-8",
        )
        return path

    def _generate_module(self, app: Manifest) -> Path:
        path = self._app_dir(app) / (app.package_name + _PY_EXT)
        literals = {f"{key}_literal": repr(value) for key, value in app.to_dict().items()}
        path.write_text(
            _MODULE_TEMPLATE.substitute(name=app.name, **literals), encoding="utf-8"
        )
        return path