# pushswap

A solver for the push_swap puzzle. Given a list of distinct integers on
stack **a** and an empty stack **b**, it prints a sequence of operations
that leaves **a** sorted in ascending order (smallest on top) and **b**
empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a upwards (top goes to bottom)               |
| `rb`  | rotate b upwards                                    |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate a downwards (bottom goes to top)             |
| `rrb` | rotate b downwards                                  |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

The numbers can be given as separate arguments or as one
space-separated argument:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

One operation is printed per line. If the input is already sorted,
nothing is printed. Each number may have leading whitespace and one
`+` or `-` sign. On invalid input (not an integer, outside the 32-bit
signed range, duplicate values, or no numbers at all) the command writes
`Error` to standard error and exits with status 1.

## Library use

```python
from pushswap.cli import solve

ops = solve([3, 2, 1])
print(" ".join(str(op) for op in ops))
```

`solve` returns a list of `Operation` members; `str()` of a member gives
its printed name (`"sa"`, `"rra"`, ...). The lower level pieces are
available as well:

- `pushswap.parse`: `parse_arguments`, `parse_int`, `split_words`,
  `rank` and `build_elements`, raising `InputError` (a `ValueError`) on
  bad input.
- `pushswap.stacks`: `Operation`, `Element` (a value and its rank) and
  `Stacks`, whose methods (`pa`, `pb`, `sa`, `ra`, `rra`, ...) apply one
  operation each and append it to `Stacks.operations`. `a_is_sorted`,
  `a_values` and `b_values` inspect the stacks.
- `pushswap.small`: `sort_three` and `small_sort`, used when stack a
  holds ten values or fewer.
- `pushswap.large`: `Sorter`, the strategy used for larger inputs, with
  the helpers `find_median` and `choose_rotation`.

The package only produces operations; it does not include a checker
that reads operations back and verifies them against a list of numbers.

## Running the tests

```
pip install ".[test]"
pytest
```