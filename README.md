# pushswap

A small library built around the *push_swap* exercise. It has two integer
stacks, **a** and **b**, the fixed set of operations on them, and a greedy
solver. The solver moves every element of **b** into **a**, choosing at each
step the element with the fewest estimated rotations.

It also has small helpers for characters, byte buffers, C-style strings, a
singly linked list and a minimal `printf`-style formatter.

## Installation

```
pip install .
```

## Command line

```
pushswap
```

This runs a built-in example. Stack **a** starts as `89 104 94 52 105` and
stack **b** as `1`. Elements of **a** are pushed to **b** until **a** holds
two. Then they are inserted back one at a time. The output shows each
operation (`pb`, `pa`, `rb`, `rra`, ...), each element's estimated cost, the
chosen position, and both stacks before and after every move. The command
takes no arguments other than `--help`.

## Stacks and operations

```python
from pushswap.stacks import Stacks, StackError, format_stack, insert_index

stacks = Stacks([3, 2, 1], [])
stacks.sa()     # a == [2, 3, 1], writes "sa"
stacks.pb()     # a == [3, 1], b == [2], writes "pb"
stacks.ra()     # a == [1, 3], writes "ra"
stacks.rra()    # a == [3, 1], writes "rra"
```

A stack is a plain list whose first element is the top. The lists are
available as `stacks.a` and `stacks.b`.

The operations are `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`,
`rrb` and `rrr`. Each one that succeeds writes its name and a newline to the
stream given as `Stacks(a, b, stream)`, or to standard output when none is
given. The combined operations (`ss`, `rr`, `rrr`) write both single names
and then their own.

An operation that cannot be carried out raises `StackError`. Examples are
swapping or rotating a stack with fewer than two elements, and pushing from
an empty stack.

- `insert_index(values, n)` gives the position before which `n` belongs. This
  is the first place where the previous element is smaller than `n` and the
  next one larger. Failing that, `n` goes at the end if it is larger than the
  last element, and at the start otherwise.
- `format_stack(values)` renders a stack as `"1--2--3\n"`, or `""` when it
  is empty.

## Solver

```python
import io
from pushswap.stacks import Stacks
from pushswap import solver

log = io.StringIO()
stacks = Stacks([89, 104, 94, 52, 105], [1], stream=log)
solver.push_all_but_two(stacks)
solver.push_all(stacks, stream=log)
```

Functions in `pushswap.solver`:

- `rotation_cost(size, pos)`: the rotations needed to bring `pos` to the top,
  counted from whichever end is nearer.
- `total_moves(stacks, pos)`: the estimated cost of inserting element `pos`
  of **b** into **a**. Rotations in the same direction are shared.
- `best_element(stacks)`: the position in **b** with the lowest cost. Each
  cost and the chosen position are written to the stacks' stream.
- `rotate_a_to(stacks, pos)` and `rotate_b_to(stacks, index)`: rotate the
  given position to the top.
- `movement(stacks, index)`: rotate both stacks into place, then `pa`. It
  raises `IndexError` for a position not in **b**.
- `push_all(stacks, stream=None)`: repeats the above until **b** is empty.
  The before and after views go to `stream`.
- `push_all_but_two(stacks)`: `pb` until **a** holds at most two elements.
- `main(argv=None)`: the command above.

## Helpers

- `pushswap.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` accept an int code or a
  one-character str. `atoi(text)` parses a leading integer. `itoa(n)` gives
  its decimal text.
- `pushswap.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memset` on `bytes`/`bytearray`. `memmove(buffer, dest, src, n)` copies
  within one buffer, between offsets. `memchr` returns an index or `None`.
- `pushswap.text`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `strlcpy` and `strlcat`. These follow C-string rules: a NUL
  character ends the text. Searches return indexes or `None`. `strlcpy`
  and `strlcat` return the resulting text and the length they tried to
  create.
- `pushswap.transform`: `split`, `strjoin`, `strtrim`, `substr`, `strmapi`,
  and `striteri`, which edits a mutable sequence of characters in place.
- `pushswap.linked`: `LinkedList` supports `add_front`, `add_back`, `last`,
  `pop_front`, `clear`, `iterate`, `map`, `len()` and iteration.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `format_printf` and `printf`. These support `%c %s %p %d %i %u %x %X %%`
  with 32-bit integer wrapping. `printf` returns the number of characters
  written. It returns 0 when the format holds `"% "`, and output stops
  there.

## What it does not do

- The command reads no numbers. It always runs the fixed example.
- There is no checking of input values and no detection of duplicates.
- The solver only inserts **b** back into **a** by estimated cost. It does
  not sort the remaining elements of **a**, does not rotate the smallest
  element to the top at the end, and does not check that the result is
  sorted.

## Running the tests

```
pip install .[test]
pytest
```