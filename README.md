# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
moves. It prints every move it makes, one per line.

## Installing

```
pip install .
```

## Running

Pass the numbers as separate arguments, as one quoted string, or mixed:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
push-swap 10 "9 8" 7
```

The output is the list of moves. For `push-swap 3 2 1` it is:

```
ra
sa
```

Each argument must be an integer with an optional sign. Its value must fit in
32 bits, and no value may repeat. If a token is not a number, the program
prints a message saying the arguments are not valid. If a value repeats or
falls outside the 32-bit range, it prints a message saying there are
duplicates. If the input is already in order, it prints that the list is
sorted and makes no moves. All messages go to standard output, coloured red
with terminal escape codes, and the exit status is always 0. Running the
program with no arguments prints nothing.

## Moves

| Move  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

A move that changes nothing is not printed. This happens, for example, when
you swap or rotate a stack that holds fewer than two elements. The combined
moves `ss`, `rr` and `rrr` only touch `b` if `a` could be changed first. They
are printed only when both stacks changed.

## Using it from Python

```python
import io

from pushswap.parsing import assign_indices, parse_arguments
from pushswap.sorting import check_moves
from pushswap.stacks import Stacks

out = io.StringIO()
values = parse_arguments(["3", "1", "2"])
stacks = Stacks(assign_indices(values), out)
already_sorted = check_moves(stacks)
print(out.getvalue())
```

The modules do the following:

- `pushswap.parsing`:
  - `parse_arguments` turns the arguments into integers. It raises
    `InvalidArgumentError` or `DuplicateArgumentError` when the input is bad.
  - `assign_indices` builds `Node` objects, each ranked by how many values are
    smaller than it.
- `pushswap.stacks`:
  - `Stacks` holds `a` and `b` as deques and provides the eleven moves as
    methods.
  - Moves are written to `out`, which is standard output by default.
- `pushswap.sorting`:
  - `check_moves` picks the strategy by size. It returns `True` without
    moving anything when `a` is already sorted.
  - `sort_three`, `sort_four` and `sort_five` are used for three, four and
    five elements.
  - `chunk_sort` handles longer lists. It pushes elements to `b` in sliding
    rank windows, then brings the biggest back to `a` one at a time.
- `pushswap.printf`:
  - `printf` and `format_string` do formatted output with the conversions
    `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`.
- Small helper modules:
  - `pushswap.chars` classifies and changes the case of ASCII characters.
  - `pushswap.conversions` has `atoi`, `itoa`, `split`, `strtrim`, `substr`,
    `strjoin` and `strdup`.
  - `pushswap.strings` works on NUL-terminated text.
  - `pushswap.memory` works on byte buffers.
  - `pushswap.linkedlist` provides `LinkedList`.
  - `pushswap.output` has `put_char`, `put_str`, `put_endl` and `put_nbr`.

## What it does not do

The package only produces moves. It has no checker command that reads a list
of moves and verifies that they sort the input. The moves are not optimised
for the shortest possible sequence.