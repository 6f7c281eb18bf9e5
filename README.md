# fsshell

The pieces behind a small Unix-like filesystem shell, written as plain
functions over bytes, strings and lists. Nothing here touches a disk, so
each piece can be used and tested on its own. There are no third-party
dependencies.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `fsshell.textutil`

- `decode_name(raw)` decodes a NUL-padded name field as UTF-8 and strips
  trailing NULs. Bytes that are not valid UTF-8 give the marker string
  `"[err invaild utf-8]"` rather than an exception.
- `pretty_byte(size)` formats a byte count as `"N B"` below 1024, otherwise
  as `KB` or `MB` with two decimals.

### `fsshell.packing`

- `compress_data(data)` returns an empty result for empty input. Otherwise it
  prefixes the data with a marker byte: `0x00` means the raw bytes follow,
  `0x01` means run-length-coded bytes follow. Inputs shorter than 10 bytes
  are always stored raw. Runs of 4 to 255 equal bytes become
  `0xFF, count, byte`, and a literal `0xFF` is written as `0xFF, 0x00, 0xFF`.
  If the coded form does not save at least a tenth of the size, the raw form
  is used instead.
- `create_archive(files)` takes `(path, data)` pairs. For tiny inputs (under
  100 bytes of data, where the per-entry overhead outweighs the data) it
  builds the compact layout. Otherwise it builds the standard layout: `0xFF`,
  a u32 entry count, then for each entry a u16 path length, the path, the u16
  original size, the u16 stored size and the stored blob from
  `compress_data`.
- `create_compact_archive(files)` builds the compact layout: `0xCC`, a u8
  count, an index of (u8 path length, u16 data length) pairs, the paths each
  followed by a NUL byte, and then the raw data.

All integers are little-endian. Length fields are truncated to their width.
Directory entries are written as paths ending in `/` with empty data.

### `fsshell.unpacking`

- `decompress_data(data, original_size)` reverses `compress_data` and
  produces at most `original_size` bytes. A blob with an unknown marker is
  decoded as run-length data from its first byte.
- `parse_archive(data)` reads the compact and standard layouts. Any other
  first byte is read as an older layout: a u32 count, then entries with u32
  length fields. Every entry is decoded, and the result is a list of
  `(path, data)` pairs.
- `unpack_legacy(data)` reads a single-file archive made of a u32 size
  followed by a stored blob. It returns a `LegacyPayload` with `data`,
  `expected_size` and a `complete` property.

Truncated or malformed input raises `ArchiveError`, a `ValueError`.

### `fsshell.extracting`

- `select_entries(files, patterns)` keeps the entries whose path contains any
  of the patterns. With no patterns, it keeps every entry.
- `target_path(output_dir, path)` returns `path` when the output directory is
  `.`, and `output_dir/path` otherwise.
- `plan_directories(output_dir, paths)` lists the directories to create,
  ordered so that parents come first.
- `legacy_output_name(archive_name)` drops a trailing `.zip`, or appends
  `.out` if there is none.
- `format_listing(archive_name, files)` renders the table of lengths and
  names, with totals at the end.

### `fsshell.completion`

- `split_command(line)` splits a line on spaces and drops empty words.
- `complete(line, pos, commands, filenames)` completes the first word against
  command names and later words against file names. It never offers `.` or
  `..`. It returns the position where the replaced word starts, together with
  the candidates.

### `fsshell.grep`

- `parse_grep_args(argv)` accepts a pattern, one or more files and the flags
  `-i -n -v -c -l -H -h`. Short flags can be combined, as in `-in`, and each
  has a long form such as `--ignore-case`. `--help` returns options with
  `show_help` set. Unknown short flags, a missing pattern or a missing file
  raise `GrepUsageError`.
- `GrepOptions.show_filename()` is true with `-H` or with several files,
  unless `-h` is given.
- `grep_text(text, options, filename, show_filename)` does a plain substring
  search. It returns the lines to print, or the count with `-c`, or the file
  name with `-l`.

### `fsshell.history`

- `CommandHistory` keeps up to 1000 commands, dropping the oldest when full,
  and ignores a command that repeats the one before it. It supports `len()`,
  iteration, `add`, `clear` and `recent(limit)`.
- `parse_history_args(argv)` understands `-c`/`--clear`,
  `-n`/`--no-numbers`, and `N` or `-N` as a limit. Anything else raises
  `HistoryUsageError`.
- `format_history(history, options)` returns the numbered or plain lines to
  print. With `clear` set, it empties the history.

### `fsshell.diskusage`

- `DiskUsage` holds the block and inode counters. It derives the used counts,
  byte totals and usage percentages from them.
- `parse_df_args(argv)` understands `-h`, `-i`, `-v` and their long forms,
  plus `--help`. Unknown options and path arguments raise `DfUsageError`.
- `format_bytes(size, human_readable)` prints a plain count, or a size
  scaled to B/K/M/G/T.
- `filesystem_report(usage, human_readable, show_inodes)` and
  `detailed_report(usage)` return the lines of a `df`-style report.

## Example

```python
from fsshell.packing import create_archive
from fsshell.unpacking import parse_archive

files = [("docs/", b""), ("docs/a.txt", b"hello " * 40)]
archive = create_archive(files)
assert parse_archive(archive) == files
```

## What this package does not do

There is no filesystem storage here: no disk image, inodes, directories,
users or permissions. There is also no interactive shell and no command to
run. The modules compute the results and the output text of shell commands.
Reading files, writing files and printing are left to the caller.