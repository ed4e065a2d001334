import pytest

from communityapps.catalog_third import manifests
from communityapps.manifest import (
    validate_desc,
    validate_file_name,
    validate_id,
    validate_package_name,
)

ALL = manifests()
IDS = [m.id for m in ALL]


def _by_id(app_id):
    return next(m for m in manifests() if m.id == app_id)


def test_catalogue_size():
    assert len(manifests()) == 27


def test_ids_are_unique():
    ids = [m.id for m in manifests()]
    assert len(ids) == len(set(ids))


def test_package_names_are_unique():
    names = [m.package_name for m in manifests()]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("app", ALL, ids=IDS)
def test_id_is_valid(app):
    assert validate_id(app.id) == app.id


@pytest.mark.parametrize("app", ALL, ids=IDS)
def test_file_name_is_valid(app):
    assert validate_file_name(app.file_name) == app.file_name


@pytest.mark.parametrize("app", ALL, ids=IDS)
def test_package_name_is_valid(app):
    assert validate_package_name(app.package_name) == app.package_name


@pytest.mark.parametrize("app", ALL, ids=IDS)
def test_desc_is_valid(app):
    assert validate_desc(app.desc) == app.desc


@pytest.mark.parametrize("app_id", IDS)
def test_package_name_follows_id(app_id):
    app = next(m for m in manifests() if m.id == app_id)
    assert app.package_name == app_id.replace("-", "")


def test_tartan_entry():
    assert _by_id("tartan").to_dict() == {
        "id": "tartan",
        "name": "Tartan",
        "summary": "Weaves tartans to look at",
        "desc": (
            "Renders a tartan based on thread count instructions and displays "
            "it on screen."
        ),
        "author": "dinosaursrarr",
        "file_name": "tartan.star",
        "package_name": "tartan",
    }


def test_step_counter_file_name_differs_from_id():
    app = _by_id("step-counter")
    assert app.file_name == "stepcounter.star"
    assert app.name == "Step Counter"


def test_non_ascii_author_kept():
    assert _by_id("surflive").author == "Rémi Carton"


def test_manifests_are_fresh_copies():
    first = manifests()
    first[0].name = "Changed"
    assert manifests()[0].name == "Random Cats"


def test_source_is_empty_and_not_serialised():
    app = _by_id("roblox")
    assert app.source == b""
    assert "source" not in app.to_dict()