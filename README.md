# kdutils

A small collection of everyday helpers for Python applications. It has no
dependencies outside the standard library.

## What is in it

- `kdutils.flags.Flags`: a set of bit flags. Build one from a flag value or
  with `Flags.from_int`, read it back with `to_int`, check bits with
  `test_flag` (a zero flag only matches an empty set) and change them in place
  with `set_flag`. Supports `&`, `|`, `^`, `~`, their in-place forms,
  comparison with other `Flags` or plain ints, and hashing.
- `kdutils.byte_array.ByteArray`: a mutable byte buffer built from bytes, a
  string (encoded as UTF-8) or an iterable of ints. Offers `filled`, `mid`,
  `left`, `remove`, `clear`, `resize`, `is_empty`, `index_of`, `starts_with`,
  `ends_with`, `to_bytes`, `to_str`, `+` and `+=`. `to_base64` gives the
  standard padded encoding; `from_base64` accepts the standard and URL-safe
  alphabets and stops at the first padding or foreign character.
- `kdutils.elapsed_timer.ElapsedTimer`: a monotonic stopwatch with `start`,
  `restart`, `elapsed` (a `timedelta`), `nsec_elapsed` and `msec_elapsed`.
- `kdutils.log`: `get_logger(name, default_level)` returns an existing logger
  of that name or creates one that writes to stdout; `set_logger_factory`
  installs a factory that takes over, and `logger_factory` returns it.
- `kdutils.color`: `hex_to_int`, `hex_to_rgb` and `hex_to_rgba` turn
  `#rrggbb` codes into tuples of floats in 0..1, or ints in 0..255 with
  `integral=True`. Bad input raises `ValueError`.
- `kdutils.tailwind_colors`: the `TailwindColor` enumeration (`Black`,
  `White`, and names such as `Slate50` … `Rose950`), with
  `tailwind_color_to_hex`, `tailwind_color_to_rgb` and
  `tailwind_color_to_rgba`.
- `kdutils.dir.Dir`: a directory path (a trailing separator is dropped) with
  `exists`, `mkdir`, `rmdir` (removes the whole tree), `path`, `dir_name`,
  `absolute_file_path`, `Dir.application_dir()` (the directory of the running
  interpreter) and `Dir.from_native_separators`.
- `kdutils.url.Url`: splits a URL into `scheme`, `path` and `file_name`;
  `is_local_file`, `to_local_file`, `is_empty` and `Url.from_local_file`.
- `kdutils.file.File`: a file opened in binary mode, with `open`, `is_open`,
  `flush`, `close`, `remove`, `read_all` (returns a `ByteArray`), `write`,
  `file_name`, `size`, the static `File.path_exists` and `File.path_size`, and
  use as a context manager.
- `kdutils.file_mapper.FileMapper`: memory-maps a region of a file, read-only
  or writable, as a `memoryview`; `map`, `unmap`, `size`, `close` and use as a
  context manager.
- `kdutils.keys`: the `Key` and `KeyboardModifier` enumerations. `Key.NUMPAD_7`
  shares its code with `Key.NUMPAD_6` and is an alias of it.
- `kdutils.scancodes`: `windows_scan_code_to_key` maps a Windows keyboard scan
  code (bit 8 marks an extended key) to a `Key`, giving `Key.UNKNOWN` for codes
  that are unmapped or outside 0..511.

## Installation

```
pip install .
```

## Examples

```python
from kdutils.byte_array import ByteArray
from kdutils.flags import Flags
from kdutils.tailwind_colors import TailwindColor, tailwind_color_to_rgb
from kdutils.url import Url

encoded = ByteArray(b"hello").to_base64()
assert ByteArray.from_base64(encoded) == ByteArray(b"hello")

flags = Flags(1) | 4
assert flags.test_flag(4) and flags.to_int() == 5

red, green, blue = tailwind_color_to_rgb(TailwindColor.Red500, integral=True)

url = Url.from_local_file("/tmp/data.txt")
assert url.is_local_file()
assert url.to_local_file() == "/tmp/data.txt"
```

## What it does not do

The key codes and scan-code table are data only: the package opens no
windows, reads no keyboard or mouse input and runs no event loop.

## Running the tests

```
pip install ".[test]"
pytest
```