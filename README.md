# dsbasics

A compact collection of the classic first-course data structures and
algorithms, written as plain, readable Python with no dependencies
outside the standard library.

## What is inside

| Module                  | Contents                                                          |
|-------------------------|-------------------------------------------------------------------|
| `dsbasics.cell`         | `IntCell` and `MemoryCell`: dataclasses that hold a single `value` |
| `dsbasics.factorial`    | `factorial`, `factorial_iterative`, `factorial_approx` (Stirling) |
| `dsbasics.findmax`      | `find_max` with a pluggable "less than", `case_insensitive_less`  |
| `dsbasics.sorting`      | `bubble_sort`, `random_list`, `time_sort`                         |
| `dsbasics.linked_list`  | `SinglyLinkedList` with `Cursor` positions                        |
| `dsbasics.matrix`       | `Matrix`, a column-major two-dimensional grid                     |
| `dsbasics.vector`       | `DynamicArray`, a growable array with explicit capacity           |
| `dsbasics.basics`       | `average`, `random_item`, `describe_arguments`, `read_lines`, `list_directory` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A quick tour

```python
from dsbasics.cell import IntCell, MemoryCell
from dsbasics.factorial import factorial, factorial_iterative, factorial_approx
from dsbasics.findmax import find_max, case_insensitive_less
from dsbasics.sorting import bubble_sort, random_list, time_sort
from dsbasics.linked_list import SinglyLinkedList
from dsbasics.matrix import Matrix
from dsbasics.vector import DynamicArray

cell = IntCell(5)
cell.value = 12               # a non-int value raises TypeError
greeting = MemoryCell("hello")

factorial(10)                 # 3628800, exact int
factorial_iterative(100)      # float, about 9.33e157
factorial_approx(5)           # Stirling's approximation
factorial_iterative(-1)       # raises ValueError

words = ["ZEBRA", "alligator", "crocodile"]
find_max(words, case_insensitive_less)   # "ZEBRA"
find_max(words)                          # "crocodile" (default "<")

data = [5, 3, 9, 1]
bubble_sort(data)             # sorts in place
for size, micros in time_sort(bubble_sort, range(0, 5001, 1000)):
    print(size, micros)

lst = SinglyLinkedList([1, 2, 3, 4])
lst.insert_front(0)           # 0 1 2 3 4
cursor = lst.find(2)
lst.insert_after(cursor, 99)  # 0 1 2 99 3 4
lst.remove_after(cursor)      # returns 99
cursor.value = 20             # 0 1 20 3 4
backup = lst.copy()           # independent copy
3 in lst                      # True

m = Matrix(3, 4, 0)
m[0, 0] = 1
m[1, 1] = 1
print(m)                      # rows of space-separated values

v = DynamicArray([5, 6, 7])
v.append(8)                   # capacity doubles from 3 to 6
v.back()                      # 8
v.pop()                       # 8
v.resize(10, fill=0)
```

### Errors

- `Matrix` indices outside the shape raise `IndexError`; a key that is not a
  `(row, col)` pair raises `TypeError`.
- `DynamicArray` indices outside `[0, len)` raise `IndexError`; `back()` and
  `pop()` on an empty array raise `IndexError`.
- `SinglyLinkedList.remove_front()` on an empty list raises `IndexError`;
  `insert_after` / `remove_after` with a cursor at the end, or `remove_after`
  with nothing after the cursor, raise `IndexError`; a cursor from another
  list raises `ValueError`.
- `find_max` of an empty sequence raises `ValueError`.
- `describe_arguments` with fewer than two entries raises `ValueError` with a
  usage message.

## Command-line tools

Installing the package provides four commands:

```
dsbasics-factorial                  # factorials and Stirling approximations, then the (-1)! error
dsbasics-findmax                    # maximum search with default and case-insensitive ordering
dsbasics-sort                       # bubble-sort a random list of 10 numbers (--size N to change)
dsbasics-sort --timing bubble       # CSV table "N, time [micro sec.]"; also --timing builtin
dsbasics args a b c=d               # list the given arguments
dsbasics read notes.txt             # print each line of a file as "I read: ..."
dsbasics ls .                       # list a directory
dsbasics average 1 2                # average two numbers
dsbasics pick Hello World           # pick a random word
```

`dsbasics-sort --timing` also takes `--max-size` (default 20000) and
`--step` (default 1000). Timings are measured wall-clock for a single run per
size; there is no repetition or statistical summary.