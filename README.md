# communityapps

Tools for maintaining a catalogue of community applets. Every applet is
described by a manifest, manifests are checked against a fixed set of
presentation rules, and a small command line tool scaffolds new applets,
removes old ones and regenerates the applet index.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Manifests

`communityapps.manifest.Manifest` is a dataclass holding an applet's `id`,
`name`, `summary`, `desc`, `author`, `file_name`, `package_name` and
`source` (bytes). `Manifest.validate()` checks the fields in that order
(id, name, summary, desc, author, file name, package name), raises
`ManifestError` (a `ValueError`) on the first one that breaks a rule and
otherwise returns the manifest. `Manifest.to_dict()` returns every field
except `source` as a plain dictionary.

```python
from communityapps.manifest import (
    Manifest,
    ManifestError,
    generate_file_name,
    generate_id,
    generate_package_name,
)

name = "Foo Tracker"
app = Manifest(
    id=generate_id(name),                      # "foo-tracker"
    name=name,
    summary="Track realtime foo",
    desc="The foo tracker provides realtime feeds for foo.",
    author="Tidbyt",
    file_name=generate_file_name(name),        # "foo_tracker.star"
    package_name=generate_package_name(name),  # "footracker"
)
app.validate()
```

The individual checks are available on their own as `validate_name`,
`validate_summary`, `validate_desc`, `validate_author`, `validate_id`,
`validate_file_name` and `validate_package_name`; each returns its argument
when it passes. The rules in short:

- names are title case (small words such as "of" or "the" may stay lower
  case) and at most 17 bytes long in UTF-8;
- summaries are at most 27 bytes long, start with an uppercased first word
  and do not end in `.`, `!` or `?`;
- descriptions start with an uppercased first word and do end in `.`, `!`
  or `?`;
- authors are not empty;
- ids are lower case letters, digits and dashes;
- file names end in `.star`, with a lower case stem of letters, digits and
  underscores;
- package names are lower case letters and digits only.

`generate_id`, `generate_file_name` and `generate_package_name` derive
those fields from an applet name: for example "Cool App" becomes
`cool-app`, `cool_app.star` and `coolapp`.

## The catalogue

`communityapps.registry.all_manifests()` returns a fresh manifest for every
applet in the built-in catalogue, and `find_manifest(app_id)` returns the
one with that id or raises `LookupError`. The catalogue is split across
`catalog_first`, `catalog_second`, `catalog_third` and `catalog_fourth`,
each with its own `manifests()` function.

## The command line tool

Run from the directory that holds the `apps` directory:

```
community-tools create
```

asks for a name, summary, description and author, asking again (after
printing why) until each passes its check. It then derives the id, file
name and package name and writes `apps/<package>/<file>.star` (a starter
applet that shows "Hello, World!") and `apps/<package>/<package>.py` (a
module whose `new()` returns the applet's manifest, reading the `.star`
file beside it as the source), and regenerates the index.

```
community-tools remove --id foo-tracker
```

looks the id up in the built-in catalogue, deletes `apps/<package>` if it
exists and regenerates the index.

```
community-tools sync
```

regenerates the index only.

The index is `apps/apps.py`: it imports every package directory under
`apps` (skipping `manifest` and names starting with `_` or `.`) in sorted
order, and its `manifests()` returns their manifests. On failure the tool
prints a message and exits with status 1; with no command it prints help.

The same operations are available from Python through
`communityapps.generator.Generator(apps_dir="apps")` (`generate_app`,
`remove_app`, `update_apps`) and the `prompt`, `create`, `remove` and
`sync` functions in `communityapps.cli`. `create` takes an `input_func`
so that answers can be supplied without a terminal.

## What it does not do

The package does not run or render applets, and the manifests in the
built-in catalogue carry no applet source (`source` is empty). `remove`
only knows about applets in the built-in catalogue, not about ones created
later in an `apps` directory.