# drillkit

A small collection of well-known building blocks. Each one keeps its exact
behaviour, including the trace output of the search functions:

- `drillkit.charclass`: ASCII character tests (`is_upper`, `is_lower`,
  `is_alpha`, `is_digit`). Each takes a one-character string or an integer
  code. Also `abs_value`.
- `drillkit.arithmetic`: `add`, `sub`, `mul`, `div` and `mod`. `div`
  truncates toward zero, and `mod` gives the matching remainder. Dividing by
  zero gives `0`.
- `drillkit.textlib`: string helpers that stop at the first NUL character:
  `strlen`, `strcpy`, `strcat`, `strncat`, `strncpy`, `strcmp`, `strchr`,
  `strspn`, `strpbrk`, `strstr` and `atoi`. Searches return the rest of the
  string from the match, or `None`. `memset` and `memcpy` work on a
  `bytearray` in place. `putchar` and `puts` write to a stream, which is
  standard output by default.
- `drillkit.school`: `print_school` writes the school banner to a stream.
- `drillkit.hashing`: the 64-bit djb2 hash (`djb2`) and `key_index`.
- `drillkit.hash_table`: `HashTable`, a fixed-size chained hash table that
  uses djb2. It has `set`, `get`, `in`, `len`, iteration in bucket order,
  `str` and `clear`.
- `drillkit.sorted_hash_table`: `SortedHashTable`. It works the same way,
  but iterates in ascending key order. It also supports `reversed()` and
  `format_reversed()`.
- `drillkit.search`: `linear_search`, `binary_search`, `jump_search`,
  `interpolation_search`, `exponential_search` and `advanced_binary`. Each
  returns an index, or `-1` when the value is missing. Each writes a line for
  every value it checks.
- `drillkit.linked_search`: `ListNode`, `build_list` and `jump_list` run a
  jump search over a singly linked list. `SkipNode`, `build_skip_list` and
  `linear_skip` search a list with an express lane.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Examples

```python
from drillkit.hash_table import HashTable
from drillkit.sorted_hash_table import SortedHashTable
from drillkit.search import binary_search

table = HashTable(1024)
table.set("betty", "cool")
print(table.get("betty"))       # cool
print(table)                    # {'betty': 'cool'}

ordered = SortedHashTable(1024)
ordered.set("y", "0")
ordered.set("c", "1")
print(ordered)                  # {'c': '1', 'y': '0'}
print(ordered.format_reversed())  # {'y': '0', 'c': '1'}

index = binary_search([0, 1, 2, 3, 4, 5, 6, 7, 8, 9], 2)
# Searching in array: 0, 1, 2, 3, 4, 5, 6, 7, 8, 9
# Searching in array: 0, 1, 2, 3
# Searching in array: 2, 3
print(index)                    # 2
```

The search functions take an optional `stream` argument. Use it to send the
trace somewhere other than standard output.

Using an empty key with `set` raises `ValueError`, and so does a value of
`None`. Creating a table with a size below 1 also raises `ValueError`.

## Commands

```
drillkit-strlen    # prints the length of "My Dyn Lib" (10)
drillkit-school    # prints the school banner
drillkit-search    # runs the linear and binary search demonstrations
```

## Limits

The hash tables cannot remove a single key. `clear` empties the whole
table. The tables are kept in memory only and are never saved.

## Tests

```
pytest
```