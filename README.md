# drills

A small collection of classic programming exercises: printable text patterns
and a handful of array algorithms. It has no dependencies outside the
standard library.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Patterns

`drills.patterns` builds the usual triangle and pyramid figures for a given
height `n`. Each function returns the figure as a list of lines:

- `star_triangle(n)`, `inverted_star_triangle(n)`: rows of `"* "`
- `counting_triangle(n)`: row `i` counts `1 2 ... i`
- `repeated_number_triangle(n)`: row `i` repeats `i`, `i` times
- `floyd_triangle(n)`: consecutive numbers in rows of growing length
- `right_aligned_triangle(n)`, `pyramid(n)`, `inverted_pyramid(n)`
- `arrow(n)`: rows growing to `n` stars and shrinking back to one
- `mirrored_numbers(n)`: counting up on the left and down on the right

```python
from drills.patterns import pyramid

for line in pyramid(3):
    print(line)
```

`PATTERNS` maps each function's name to the function.

From the command line, give a pattern name (default `star_triangle`) and the
number of rows with `-n`/`--rows` (default 5):

```
drills-patterns
drills-patterns pyramid -n 7
```

## Sums

`drills.sums` holds the two-pointer k-sum problems. The inputs are not
modified; each function works on a sorted copy.

- `two_sum(arr, target)`: `True` if two elements add up to `target`, else `False`
- `three_sum(arr)`: the distinct sorted triplets that add up to zero
- `four_sum(nums, target)`: the distinct sorted quadruplets that add up to `target`

```python
from drills.sums import three_sum

three_sum([-1, 0, 1, 2, -1, -4])  # [[-1, -1, 2], [-1, 0, 1]]
```

`drills-sums` runs these functions on fixed example inputs and prints the
answers:

```
drills-sums
```

## Merging

`drills.merging` holds merge-based array problems:

- `merge_sorted_in_place(arr1, arr2)`: merges two sorted lists in place with
  the gap method, so that `arr1` holds the smallest values and `arr2` the
  rest, both sorted
- `count_inversions(arr)`: the number of pairs `i < j` with `arr[i] > arr[j]`
- `count_reverse_pairs(arr)`: the number of pairs `i < j` with
  `arr[i] > 2 * arr[j]`

The counting functions leave their input unchanged.

`drills-merging` runs these functions on fixed example inputs and prints the
results:

```
drills-merging
```

## Sections

`drills.sections` lists the topics of the collection through the `Section`
enumeration: `ARRAYS`, `STRINGS`, `OOPS`, `LINKED_LIST`, `RECURSION`,
`HEAPS`, `GRAPHS`, `TRIES` and `STRINGS_HARD`. `section_title(name)` gives the
title of one of them, taking either a `Section` member or its name in any
case, with spaces or hyphens in place of underscores; an unknown name raises
`ValueError`.

```
drills-sections
drills-sections linked-list
```

## What it does not do

A section is only a title: apart from the arrays problems above, the
package holds no exercises for strings, object orientation, linked lists,
recursion, heaps, graphs or tries. The `drills-sums` and `drills-merging`
commands take no input of their own; they only run the built-in examples.