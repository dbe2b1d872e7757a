# primer

A collection of small, self-contained tools and library modules. Each one does
a single job: filtering text, converting units, drawing images, serving a few
HTTP endpoints, comparing values deeply, compressing streams.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

| Command | What it does |
| --- | --- |
| `primer-echo [-n] [-s SEP] ARGS...` | Prints its arguments joined by a separator; `-n` omits the trailing newline. |
| `primer-dup [FILES...]` | Prints the count and text of every line that appears more than once, reading files or standard input. |
| `primer-dedup` | Prints each line of standard input once, dropping later repeats. |
| `primer-charcount` | Counts Unicode characters on standard input, with a table of UTF-8 encoding lengths and a count of invalid bytes. |
| `primer-comma NUMBERS...` | Inserts a comma at every power of 1000 in each decimal integer. |
| `primer-basename` | Reads paths from standard input and prints each one without directories and suffix. |
| `primer-cf NUMBERS...` | Shows each number both as a Fahrenheit and as a Celsius temperature, converted to the other scale. |
| `primer-append` | Shows how a growable integer slice doubles its capacity, then reverses the integers on each line of standard input. |
| `primer-movie` | Prints a small list of movies as compact and as indented JSON, then the titles read back. |
| `primer-sha256` | Prints the SHA-256 digests of `x` and `X` and whether they match. |
| `primer-surface > surface.svg` | Renders an SVG of the 3-D surface sin(r)/r. |
| `primer-mandelbrot > mandelbrot.png` | Renders the Mandelbrot set as a PNG. |
| `primer-lissajous > out.gif` | Writes an animated GIF of a random Lissajous figure; run with `web` to serve one per request on localhost:8000. |
| `primer-jpeg < in.png > out.jpg` | Converts a PNG on standard input to JPEG; any other input is rejected. |
| `primer-fetch URLS...` | Prints the body and status found at each URL, adding `http://` when it is missing. |
| `primer-fetchall URLS...` | Fetches URLs concurrently into `<url>-dump.html` files, reporting time and size for each. |
| `primer-server [echo\|count\|request]` | Runs a small HTTP server on localhost:8000: `echo` (default) replies with the path, `count` also counts requests and answers `/count`, `request` describes the whole request. |
| `primer-cross` | Prints the operating system and architecture of the running machine. |
| `primer-issues TERMS...` | Prints a table of GitHub issues matching the search terms. |
| `primer-issueshtml TERMS...` | Prints the same search as an HTML table. |
| `primer-issuesreport TERMS...` | Prints a plain-text report with each issue's age in days. |
| `primer-search` | Serves `/search` on port 12345, decoding `l`, `max` and `x` query parameters. |
| `primer-bzipper < in > out.bz2` | bzip2-compresses standard input to standard output. |

Example:

```
$ primer-comma 1 12 123 1234 1234567890
  1
  12
  123
  1,234
  1,234,567,890
```

## Library modules

- `primer.echo` — `echo(newline, sep, args, out)`, `join_args`, `hello_world`.
- `primer.dup` — `count_lines`, `count_files`, `split_count`, `duplicates`,
  `dedup`, and `char_count(data)` returning `CharCounts` with `report()`.
- `primer.textutil` — `basename`, `comma`, `ints_to_string`.
- `primer.tempconv` — `Celsius`, `Fahrenheit`, `c_to_f`, `f_to_c`,
  `boiling_point`.
- `primer.bits` — `pop_count(x)` and the `Flags` bit field with `is_up`,
  `turn_down`, `set_broadcast`, `is_cast`.
- `primer.word` — `is_palindrome(s)` ignores case and non-letters;
  `is_palindrome_bytes(s)` compares raw UTF-8 bytes.
- `primer.slices` — `IntSlice` with `append`, `growth_table`, `nonempty`,
  `reverse`, `rotate_left`.
- `primer.treesort` — `tree_sort(values)` sorts a list in place with a binary
  tree.
- `primer.graph` — `Graph` with `add_edge` and `has_edge`.
- `primer.embed` — `Point`, `Circle` and `Wheel`, whose inner fields are
  reachable from the outer object.
- `primer.movie` — `Movie`, `to_json`, `titles_from_json`.
- `primer.digest` — `sha256_sum`.
- `primer.surface`, `primer.mandelbrot`, `primer.lissajous` — image
  generators (`render_svg`, `render`, `lissajous`).
- `primer.jpegconv` — `to_jpeg(src, dst)`.
- `primer.fetch` — `normalize_url`, `dump_filename`, `fetch`, `fetch_to_file`,
  `fetch_all`.
- `primer.servers` — `EchoHandler`, `CountingHandler`, `RequestEchoHandler`,
  `format_path`, `format_request`, `serve`.
- `primer.github` — `search_issues`, `search_url`, `parse_search_result` and
  the `User`, `Issue`, `IssuesSearchResult` records; a failed query raises
  `SearchError`.
- `primer.issues` — `format_table`, `render_html`, `render_report`, `days_ago`,
  `render_autoescape`.
- `primer.params` — `unpack(form, obj)` fills a dataclass instance's fields
  from request parameters; bad values raise `ParamError`.
- `primer.search` — `SearchParams`, `search(query)`, `SearchHandler`.
- `primer.equal` — `equal(x, y)`, a deep equality that copes with cycles.
- `primer.formatting` — `format_any` / `format_atom` describe a value without
  looking inside it.
- `primer.methods` — `method_signatures(x)` and `print_methods(x, out)` list a
  value's public methods.
- `primer.bzip` — `new_writer(out)` returns a bzip2-compressing `Writer`
  (usable as a context manager); `primer.bzipper.compress_stream(src, dst)`.
- `primer.sysinfo` — `target()` returns the (system, architecture) pair.

```python
from primer.word import is_palindrome
from primer.equal import equal

is_palindrome("A man, a plan, a canal: Panama")  # True
equal([1, 2, 3], [1, 2, 3])                      # True
```

## What is not included

The package has no S-expression encoder or decoder, and no function that walks
a nested value and prints every leaf with its path; `primer.formatting` only
describes a value at the top level.