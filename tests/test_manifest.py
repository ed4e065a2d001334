import pytest

from communityapps.manifest import (
    Manifest,
    ManifestError,
    generate_file_name,
    generate_id,
    generate_package_name,
    validate_author,
    validate_desc,
    validate_file_name,
    validate_id,
    validate_name,
    validate_package_name,
    validate_summary,
)

SOURCE = b'load("render.star", "render")\n\ndef main():\n    return render.Root()\n'


def _foo_tracker(**overrides):
    fields = dict(
        id="foo-tracker",
        name="Foo Tracker",
        summary="Track realtime foo",
        desc="The foo tracker provides realtime feeds for foo.",
        author="Tidbyt",
        file_name="foo_tracker.star",
        package_name="footracker",
        source=SOURCE,
    )
    fields.update(overrides)
    return Manifest(**fields)


def test_manifest_keeps_source():
    m = _foo_tracker()
    assert m.source == SOURCE


def test_manifest_validate_returns_self():
    m = _foo_tracker()
    assert m.validate() is m


def test_to_dict_excludes_source():
    assert _foo_tracker().to_dict() == {
        "id": "foo-tracker",
        "name": "Foo Tracker",
        "summary": "Track realtime foo",
        "desc": "The foo tracker provides realtime feeds for foo.",
        "author": "Tidbyt",
        "file_name": "foo_tracker.star",
        "package_name": "footracker",
    }


def test_validate_checks_id_first():
    m = _foo_tracker(id="Foo", name="bad name")
    with pytest.raises(ManifestError, match="ids should be lower case"):
        m.validate()


def test_validate_reports_bad_package_name():
    with pytest.raises(ManifestError, match="package names"):
        _foo_tracker(package_name="foo_tracker").validate()


def test_validate_reports_empty_author():
    with pytest.raises(ManifestError, match="author cannot be empty"):
        _foo_tracker(author="").validate()


@pytest.mark.parametrize(
    "name, want",
    [("Cool App", "coolapp"), ("CoolApp", "coolapp"), ("cool-app", "coolapp"), ("cool_app", "coolapp")],
)
def test_generate_package_name(name, want):
    assert generate_package_name(name) == want


@pytest.mark.parametrize(
    "name, want",
    [
        ("Cool App", "cool_app.star"),
        ("CoolApp", "coolapp.star"),
        ("cool-app", "cool_app.star"),
        ("cool_app", "cool_app.star"),
    ],
)
def test_generate_file_name(name, want):
    assert generate_file_name(name) == want


@pytest.mark.parametrize(
    "name, want",
    [("Cool App", "cool-app"), ("CoolApp", "coolapp"), ("cool-app", "cool-app"), ("cool_app", "cool-app")],
)
def test_generate_id(name, want):
    assert generate_id(name) == want


def test_generated_values_validate():
    name = "Word Of The Day"
    assert validate_id(generate_id(name)) == "word-of-the-day"
    assert validate_file_name(generate_file_name(name)) == "word_of_the_day.star"
    assert validate_package_name(generate_package_name(name)) == "wordoftheday"


@pytest.mark.parametrize(
    "name",
    ["Cool App", "Mind of Gap", "Mind Of Gap", "A Clock", "MBTA", "Abcdefghijklmnopq"],
)
def test_validate_name_accepts(name):
    assert validate_name(name) == name


@pytest.mark.parametrize(
    "name",
    ["Cool app", "cool app", "coolApp", "Really Really Long App Name", "", "a Clock", "Abcdefghijklmnopqr"],
)
def test_validate_name_rejects(name):
    with pytest.raises(ManifestError):
        validate_name(name)


def test_validate_name_title_message():
    with pytest.raises(ManifestError, match="should be title case"):
        validate_name("Cool app")


def test_validate_name_length_message():
    with pytest.raises(ManifestError, match="less then 17 characters"):
        validate_name("Really Really Long App Name")


@pytest.mark.parametrize(
    "summary",
    ["A cool app", "NYC Subway departures", "Shows the phase of the moon", "3 stocks scrolling"],
)
def test_validate_summary_accepts(summary):
    assert validate_summary(summary) == summary


@pytest.mark.parametrize(
    "summary",
    ["A really really really cool app", "A cool app.", "A cool app!", "A cool app?", "a cool app", ""],
)
def test_validate_summary_rejects(summary):
    with pytest.raises(ManifestError):
        validate_summary(summary)


def test_validate_summary_punctuation_message():
    with pytest.raises(ManifestError, match="should not end in punctuation"):
        validate_summary("A cool app!")


@pytest.mark.parametrize(
    "desc",
    ["A really cool app that does really cool app things.", "Is it christmas: yes/no?"],
)
def test_validate_desc_accepts(desc):
    assert validate_desc(desc) == desc


@pytest.mark.parametrize(
    "desc",
    [
        "a really cool app that does really cool app things.",
        "A really cool app that does really cool app things",
        "",
    ],
)
def test_validate_desc_rejects(desc):
    with pytest.raises(ManifestError):
        validate_desc(desc)


def test_validate_desc_end_message():
    with pytest.raises(ManifestError, match="should end in punctuation"):
        validate_desc("No ending")


def test_validate_author():
    assert validate_author("dinosaursrarr") == "dinosaursrarr"
    with pytest.raises(ManifestError, match="author cannot be empty"):
        validate_author("")


@pytest.mark.parametrize("app_id", ["foo-bar", "foobar"])
def test_validate_id_accepts(app_id):
    assert validate_id(app_id) == app_id


@pytest.mark.parametrize("app_id", ["FooBar", "foo$", ""])
def test_validate_id_rejects(app_id):
    with pytest.raises(ManifestError):
        validate_id(app_id)


def test_validate_id_case_message():
    with pytest.raises(ManifestError, match="FooBar != foobar"):
        validate_id("FooBar")


def test_validate_file_name_accepts():
    assert validate_file_name("foo_bar.star") == "foo_bar.star"


@pytest.mark.parametrize("file_name", ["foo_bar", "FooBar.star", "foo$.star", "", "foo-bar.star"])
def test_validate_file_name_rejects(file_name):
    with pytest.raises(ManifestError):
        validate_file_name(file_name)


def test_validate_file_name_suffix_message():
    with pytest.raises(ManifestError, match="should end in .star: 'foo_bar'"):
        validate_file_name("foo_bar")


def test_validate_package_name_accepts():
    assert validate_package_name("foobar") == "foobar"


@pytest.mark.parametrize("package_name", ["foo_bar", "FooBar", "foo$", ""])
def test_validate_package_name_rejects(package_name):
    with pytest.raises(ManifestError):
        validate_package_name(package_name)


def test_manifest_error_is_value_error():
    with pytest.raises(ValueError):
        validate_package_name("")