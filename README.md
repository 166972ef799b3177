# gerpy

`gerpy` walks a directory tree, indexes every word of every file, and then
answers word queries interactively. Each match is written to an output file
as `path:line: text`, with line numbers counted from 1.

## Installing

```
pip install .
```

## Searching a directory

```
gerpy DIRECTORY OUTPUT_FILE
```

The index is built first; a directory that holds nothing is reported by
printing its path. The output file is then created (or emptied), and the
program shows `Query? ` and reads whitespace-separated queries from standard
input:

| Query              | Effect                                                  |
|--------------------|---------------------------------------------------------|
| `word`             | case-sensitive search for `word`                        |
| `@i word`          | case-insensitive search (`@insensitive` also works)     |
| `@f FILE`          | close the current output file and send later results to `FILE` |
| `@q` / `@quit`     | stop (any query starting with `@q` does)                |

Other queries starting with `@` are ignored. Reaching the end of standard
input also stops the program. On stopping it prints
`Goodbye! Thank you and have a nice day.`

Leading and trailing characters that are not ASCII letters or digits are
removed from both the query and the indexed words, so `hello,` and `hello`
match each other. A line that holds a word several times is reported once.
A word that is not found writes a "Not Found" line to the output file.

If a file cannot be read or written, the program prints
`Cannot open file: ...` to standard error and exits with status 1. With the
wrong number of arguments it prints a usage line and exits with status 1.

Example:

```
$ gerpy notes results.txt
Query? meeting
Query? @i TODO
Query? @q
Goodbye! Thank you and have a nice day.
```

## Listing a tree

```
gerpy-tree DIRECTORY
```

This prints every file path under `DIRECTORY`, one per line, visiting entries
in name order. Subdirectories are listed before the files of their parent,
and an empty directory is shown by its own path.

## Using it from Python

```python
from gerpy.engine import Gerp
from gerpy.tree import build_tree

gerp = Gerp()
gerp.index_tree(build_tree("notes"), "notes")
print(gerp.search("meeting"))
print(gerp.search_insensitive("todo"))
```

- `gerpy.engine.Gerp` holds the indexed files (`IndexedFile` records), their
  lines, and two word indexes. `add_file` indexes a single file,
  `file_for_line` maps a global line index to its file, and `query_loop`
  runs the query commands above over any iterable of tokens.
- `gerpy.tree` has `DirNode`, `build_tree` and `iter_paths`.
- `gerpy.index.WordIndex` maps words to the lines they occur on.
- `gerpy.text` holds the word-normalising helpers (`strip_non_alpha_num`,
  `ascii_lower`, `is_alpha_char`).

## What it does not do

Queries are single whole words: there are no patterns, regular expressions or
phrase searches. The index lives in memory only and is rebuilt on every run.