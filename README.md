# genfunctions

A handful of small helpers for everyday text and console work.

## Modules

### `genfunctions.chararray`

`CharArray` is an ordered collection of strings with an explicit capacity.
It starts with room for one entry (`INIT_SIZE`) and `append` doubles the
capacity whenever the array is full. Each stored string is cut to
`STRING_SIZE - 1` (1023) characters.

- `append(text)` adds a string at the end.
- `grow()` doubles the capacity.
- `clear()` drops every string and returns to the initial capacity.
- `capacity` is the current capacity; `len()`, iteration and indexing
  (including slices) work as on a list.

```python
from genfunctions.chararray import CharArray

items = CharArray()
items.append("Hello, World")
items.append("from function!")
for position, element in enumerate(items):
    print(position, element)
print(len(items), items.capacity)   # 2 2
```

### `genfunctions.text`

- `trim(text)` removes leading and trailing white space
  (space, tab, newline, vertical tab, form feed, carriage return).
- `split(text, delimiter)` splits on any character of `delimiter`, trims
  each piece and drops empty pieces produced by runs of delimiters. At most
  `MAX_TOKENS_IN_ARRAY` (200) tokens are returned, each cut to 1023
  characters.

```python
from genfunctions.text import split, trim

print(trim("    Hello, World!   "))                        # 'Hello, World!'
print(split("apple, banana, cherry, pineapple", ","))
# ['apple', 'banana', 'cherry', 'pineapple']
```

### `genfunctions.prompt`

`read_input(message, kind, stdin=None, stdout=None)` writes `message`, reads
one line (at most 1023 characters, up to the first newline) and returns it
converted by `parse_input(text, kind)`. It raises `EOFError` when no input
is left. `kind` is an `InputType` (`INT`, `STR`, `FLOAT`, `DOUBLE`) or its
value as a string (`"int"`, `"str"`, `"float"`, `"double"`).

- `INT` accepts a non-negative decimal integer up to 2**31 - 1.
- `DOUBLE` accepts a non-negative decimal or hexadecimal floating-point
  number; `FLOAT` does the same and rounds it to single precision.
- `STR` returns the line as it is, and rejects an empty line.
- An empty line read as a number gives `0`.

Errors all derive from `InputError` (a `ValueError`) and carry a numeric
`code`:

| Exception               | `code` | Raised when                               |
|-------------------------|--------|-------------------------------------------|
| `NumberRangeError`      | 2      | the number is malformed, negative or too large |
| `EmptyInputError`       | 3      | a string was expected but the line was empty |
| `InvalidInputTypeError` | 4      | the requested kind is not supported       |

```python
from genfunctions.prompt import InputError, InputType, read_input

try:
    age = read_input("Input AGE: ", InputType.INT)
except InputError as error:
    print("bad input:", error, error.code)
```

### `genfunctions.readfile`

`read_file(filename)` returns the whole contents of a file as `bytes`.

```python
from genfunctions.readfile import read_file

data = read_file("notes.txt")
```

## Demo command

`genfunctions-demo` runs one of four demonstrations, named as its argument:

```
genfunctions-demo chararray
genfunctions-demo split
genfunctions-demo trim
genfunctions-demo input
```

`input` asks for a name, an age, pi and a payment and echoes them; on
rejected input or end of input it prints an error to standard error and
exits with status 1. The same demonstrations are available as
`chararray_demo`, `input_demo`, `split_demo` and `trim_demo` in
`genfunctions.demo`.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```