# mongocommon

Small building blocks for assembling MongoDB command documents, all in the
module `mongocommon.common`:

- `ReadMode`: an enum of how a server is chosen for reads. Its members are
  `PRIMARY`, `PRIMARY_PREFERRED`, `SECONDARY`, `SECONDARY_PREFERRED` and
  `NEAREST`, whose values (and `str()`) are `"Primary"`, `"PrimaryPreferred"`,
  `"Secondary"`, `"SecondaryPreferred"` and `"Nearest"`.
- `parse_read_mode(text)`: returns the `ReadMode` whose value is exactly
  `text`. Any other text raises `ArgumentError` (a subclass of `ValueError`).
- `ReadPreference(mode, tag_sets=None)`: a frozen, hashable pairing of a read
  mode with a tuple of tag sets. Each tag set is copied into a dict with its
  keys in sorted order. `to_document()` returns
  `{"mode": <lower-cased mode name>, "tag_sets": [...]}`.
- `WriteConcern(w=1, w_timeout=0, j=False, fsync=False)`: a frozen dataclass.
  `to_bson()` returns `{"w": ..., "wtimeout": ..., "j": ...}`; `fsync` is not
  part of that document.
- `merge_options(document, options)`: returns a new dict holding the entries
  of `document` followed by those of `options`. Where a key appears in both,
  the option's value wins. `options` may be a mapping or any object with a
  `to_document()` or `to_bson()` method; anything else raises `ArgumentError`.

## Installation

```
pip install .
```

## Example

```python
from mongocommon.common import (
    ReadPreference,
    WriteConcern,
    merge_options,
    parse_read_mode,
)

mode = parse_read_mode("SecondaryPreferred")
pref = ReadPreference(mode, [{"dc": "east"}])
pref.to_document()
# {"mode": "secondarypreferred", "tag_sets": [{"dc": "east"}]}

concern = WriteConcern()
concern.to_bson()                   # {"w": 1, "wtimeout": 0, "j": False}

merge_options({"find": "movies"}, {"limit": 5})
# {"find": "movies", "limit": 5}

merge_options({"insert": "movies"}, WriteConcern(w=2))
# {"insert": "movies", "w": 2, "wtimeout": 0, "j": False}
```

## What this package does not do

It only builds plain dict documents. It does not connect to a server, send
commands, select servers by read preference, or encode documents as BSON.

## Running the tests

```
pip install .[test]
pytest
```