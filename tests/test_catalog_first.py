import pytest

from communityapps.catalog_first import manifests
from communityapps.manifest import Manifest, generate_file_name


def _by_id():
    return {m.id: m for m in manifests()}


def test_every_manifest_validates():
    for app in manifests():
        assert app.validate() is app


def test_ids_are_unique():
    apps = manifests()
    assert len({m.id for m in apps}) == len(apps)


def test_package_names_are_unique():
    apps = manifests()
    assert len({m.package_name for m in apps}) == len(apps)


def test_catalogue_size():
    assert len(manifests()) == 21


def test_all_entries_are_manifests_with_star_files():
    for app in manifests():
        assert isinstance(app, Manifest)
        assert app.file_name.endswith(".star")


def test_manifests_returns_independent_copies():
    first = manifests()
    first[0].name = "Changed"
    assert manifests()[0].name != "Changed"
    assert manifests()[0].name == "IFPARank"


@pytest.mark.parametrize(
    "app_id, name, package_name, file_name",
    [
        ("ifparank", "IFPARank", "ifparank", "ifparank.star"),
        ("is-it-christmas", "Is It Christmas", "isitchristmas", "is_it_christmas.star"),
        ("mind-the-gap", "Mind The Gap", "mindthegap", "mind_the_gap.star"),
        ("mn-light-rail", "MN Light Rail", "mnlightrail", "mn_light_rail.star"),
    ],
)
def test_pinned_entries(app_id, name, package_name, file_name):
    app = _by_id()[app_id]
    assert app.name == name
    assert app.package_name == package_name
    assert app.file_name == file_name


def test_kickstarter_fields():
    app = _by_id()["kickstarter"]
    assert app.author == "sethvargo"
    assert app.summary == "Kickstarter project status"
    assert app.to_dict()["desc"].endswith("The project must be publicly visible.")


def test_file_names_follow_generated_form_for_dashed_ids():
    for app in manifests():
        if "-" in app.id:
            assert app.file_name == generate_file_name(app.id)


def test_to_dict_leaves_out_source():
    for app in manifests():
        data = app.to_dict()
        assert "source" not in data
        assert data["id"] == app.id
        assert data["package_name"] == app.package_name