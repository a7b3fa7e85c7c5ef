# wordpodium

wordpodium reads a text file and counts how many times each word appears. It
also counts spaces and punctuation marks. It then ranks the words by how often
they occur and shows the top places as a podium. Words that tie share a place.

## Installation

```
pip install .
```

## Interactive use

```
wordpodium
```

The command takes no arguments other than `--help`. It opens a menu of test
batches:

```
BIENVENIDO AL PROCESADOR DE TEXTOS
Elija un lote de pruebas:
A - LOTE 1
B - LOTE 2
C - LOTE 3
D - LOTE 4
S - Salir
-->
```

Only the first character of the answer matters, and case is ignored. Each of
the options `A` to `D` reads a file from the current directory: `lote1.txt`,
`lote2.txt`, `lote3.txt` or `lote4.txt`. The file is read as Latin-1. For that
file the program prints:

- the number of words, spaces and punctuation marks;
- every word with its number of occurrences, in the order the words were
  first seen;
- a podium of five places.

If the file cannot be opened, nothing is printed for it. After each batch, and
after an invalid option, the program waits for Enter. Enter `S`, or end the
input, to quit.

## How text is processed

- A word is a run of ASCII letters (`A`–`Z`, `a`–`z`). Words are changed to
  lower case before they are counted.
- Spaces are counted separately.
- These characters count as punctuation marks: `. , ; : ? ! ( ) [ ] { } ' "`
- Any other character ends the current word and is not counted.
- Lines are read in pieces of at most 99 characters, so a word that crosses a
  piece boundary is counted as two words.

### The podium

Words are ordered by count, highest first; among words with equal counts the
one inserted later comes first. Words with the same count share a place. The
number of extra tied words is carried forward, so each later place moves on by
all the ties seen so far. Places are added while the next place number is no
greater than the number of steps.

## Using it from Python

```python
from wordpodium.text import process_text, generate_podium, format_podium

counts = {}
with open("lote1.txt", encoding="utf-8") as fh:
    stats = process_text(fh, counts)

print(stats.words, stats.spaces, stats.punctuation)
print(format_podium(generate_podium(counts, 5)), end="")
```

`wordpodium.text` also provides `is_letter`, `is_space`, `is_punctuation`,
`read_word`, `process_line`, `format_counts`, and the `TextStats` and
`PodiumEntry` dataclasses. `wordpodium.ordered.OrderedList` is the list that
keeps items in descending order of a key.

To process one file and write the whole report to a stream, call
`wordpodium.menu.run_batch(path, capacity, steps, out)`. It returns the list
of `PodiumEntry` items, or `None` if the file cannot be opened. `capacity` must
be positive; otherwise `ValueError` is raised.

## Limitations

The `wordpodium` command only offers the four fixed batch files. To process any
other file, call `run_batch` or the functions in `wordpodium.text` from Python.

## Running the tests

```
pip install .[test]
pytest
```