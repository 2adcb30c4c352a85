# zkutil

Small helpers for building note-taking tools, using only the standard
library.

## Modules

- `zkutil.opt`: optional values that tell "unset" apart from "empty".
  `OptString` and `OptBool` offer `is_null`, `unwrap`, `to_json` and
  fallback chaining through `or_`, `or_string` and `or_bool`;
  `OptString` also has `is_empty` and `non_empty`. `not_empty_string(value)`
  treats `""` as unset. Ready-made values: `NULL_STRING`, `NULL_BOOL`,
  `TRUE`, `FALSE`.
- `zkutil.osenv`: `get_opt_env(key)` reads an environment variable as an
  `OptString`, an empty value counting as unset; `environ_map()` returns a
  copy of the environment as a dict.
- `zkutil.errors`: `wrap(err, msg)` and `wrapf(err, format, *args)` return a
  `WrappedError` whose text is `"<msg>: <cause>"` and which keeps the original
  exception as `cause` and `__cause__`; `None` stays `None`. `wrapper(msg)`
  and `wrapperf(format, *args)` return functions doing the same.
- `zkutil.logger`: `NullLogger` (discards messages, counting them in
  `discarded`), `StdLogger(prefix="", stream=None, timestamps=False)` (writes
  lines to the stream, stderr by default; `err` prints `warning: <error>`)
  and `ProxyLogger`, which forwards to a `logger` attribute that can be
  swapped at any time. All three have `printf`, `println` and `err`.
- `zkutil.shell`: `command_from_string(command, *args)` builds the command
  line that runs a string through the user's shell (`ZK_SHELL`, then `SHELL`,
  then `sh`), the extra arguments becoming `$1`, `$2`...; on Windows it
  returns a `cmd` command line string.
- `zkutil.textutil`: `prepend`, `pluralize`, `split_lines`, `join_lines`,
  `join_ints`, `is_url`, `remove_duplicates`, `remove_blank`,
  `expand_whitespace_literals`, `contains`, `word_at`, `copy_list` and
  `byte_index_to_rune_index`.
- `zkutil.fts5`: `convert_query` turns a search-engine-like query into an
  SQLite FTS5 query (quoting terms, `-` for `NOT`, `|` for `OR`, prefix `*`,
  `^` and column filters).
- `zkutil.dates`: `NowProvider` and `FrozenProvider` give a date through
  `date()`. `time_from_natural(text)` parses RFC 3339 timestamps, local
  dates and times such as `2021-03-04`, `2021-03`, `2021` or `15:04`, and
  phrases such as `yesterday`, `3 days ago`, `in two weeks`, `last month` or
  `last monday`; an empty string gives the current time and anything else
  raises `ValueError`.
- `zkutil.paths`: `exists`, `dir_exists`, `filename_stem`, `drop_ext`,
  `write_string` (creates missing parent directories), and:
  - `walk(base_path, logger, notebook_root, should_ignore_path)`, a generator
    of `Metadata(path, modified)` for the files under a directory in lexical
    order, skipping hidden entries (a directory named `notebook_root`
    excepted) and files for which `should_ignore_path` returns true;
  - `diff(source, target, force_modified, callback)`, which compares two
    listings sorted by path, calls `callback` with a `DiffChange(path, kind)`
    for each file (`DiffKind.ADDED`, `MODIFIED`, `REMOVED`, `UNCHANGED`) and
    returns the number of source files. An exception raised by the callback
    stops the comparison.
- `zkutil.yamlcompat`: `convert_to_json_compatible` makes the keys of nested
  mappings strings (`1` and `2.0` become `"1"` and `"2"`), walking lists too;
  `convert_map_to_json_compatible` does so for every value of a mapping.
- `zkutil.pager`: `open_pager(pager_cmd, logger)` starts the user's pager
  (`ZK_PAGER`, the given `OptString`, `PAGER`, then `less -FIRX` or
  `more -R` if found) and returns a `Pager` with `write`, `write_string` and
  `close`; it is also a context manager. Without any pager the shared
  `PASSTHROUGH_PAGER` writes to standard output. If the pager exits with an
  error, `close` reports it to the logger and raises `SystemExit(1)`.
  `select_pager_cmd` and `select_default_pager` expose the choice.

## Installation

```
pip install zkutil
```

## Examples

```python
from zkutil.fts5 import convert_query

convert_query("foo -bar")      # '"foo"  NOT "bar"'
convert_query("col:foo ba*")   # 'col:"foo" "ba"*'
```

```python
from zkutil.textutil import prepend, pluralize

prepend("One line\nTwo lines", "> ")  # '> One line\n> Two lines'
pluralize("note", 3)                  # 'notes'
```

```python
from zkutil.logger import NullLogger
from zkutil.paths import diff, walk

changes = []
files = walk("notes", NullLogger(), "notes", lambda path: not path.endswith(".md"))
count = diff(files, iter(indexed_files), False, changes.append)
```

```python
from zkutil.logger import NullLogger
from zkutil.opt import OptString
from zkutil.pager import open_pager

with open_pager(OptString(), NullLogger()) as pager:
    pager.write_string("Hello")
```

## What it does not do

This is a library of building blocks only. It has no command-line program,
does not create or edit notes, and keeps no note index or database: `diff`
compares listings that the caller supplies, and `convert_query` only
produces query text for an FTS5 table the caller manages.

## Running the tests

```
pip install -e ".[test]"
pytest
```