# blockdeque

`blockdeque` provides `Deque`, a double-ended queue whose elements are kept
in fixed-size blocks. A central map of blocks grows at either end as needed,
so existing blocks are never copied when the deque grows. Pushing and popping
at the front and back is cheap, and any element can be reached by position.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
from blockdeque.deque import Deque, swap

d = Deque(3, 0)          # three elements, each 0
d.push_back(1)
d.push_front(-1)

list(d)                  # [-1, 0, 0, 0, 1]
len(d)                   # 5
d.front(), d.back()      # (-1, 1)

d[1] = 7                 # indexed access; negative indices count from the end
d.at(1)                  # 7; negative or out-of-range positions raise IndexError

d.pop_front()            # returns -1
d.pop_back()             # returns 1
list(reversed(d))        # [0, 0, 7]

d.insert(0, 42)          # insert before a position; returns that position
d.erase(0)               # remove the element at a position; returns that position
d.resize(5, 9)           # grow with 9s, or shrink from the back

other = d.copy()
other == d               # True; deques also compare with <, <=, > and >=

e = Deque(2, "x")
swap(d, e)               # exchange the contents of two deques
d.clear()
d.empty()                # True
```

`Deque()` with no arguments is empty; `Deque(count, value)` holds `count`
copies of `value` (`value` defaults to `None`). A negative count raises
`ValueError`.

## Operations

- Element access: `at`, indexing with `[]` (read and assign), `front`, `back`
- Iteration: `iter(d)`, `reversed(d)`
- Capacity: `len(d)`, `empty`, `max_size` (returns `sys.maxsize`),
  `shrink_to_fit` (drops unused map slots)
- Modifiers: `clear`, `insert`, `erase`, `push_back`, `push_front`,
  `pop_back`, `pop_front`, `resize`, `swap`
- Copying: `copy`
- Comparison: `==`, `<`, `<=`, `>`, `>=` in lexicographic order; deques are
  not hashable

`front`, `back`, `pop_back` and `pop_front` raise `IndexError` on an empty
deque. `insert` accepts positions `0` to `len(d)`; `erase` accepts `0` to
`len(d) - 1`; other positions raise `IndexError`.

The module-level function `swap(lhs, rhs)` does the same as `lhs.swap(rhs)`.

## Command line

The package installs a `blockdeque` command. It takes no options beyond
`--help`, prints `Hello, World!` and exits with status 0:

```
blockdeque
```

The command does not read input or operate on deques; the deque is used
from Python through `blockdeque.deque`.