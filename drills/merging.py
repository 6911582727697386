"""Merge-based array problems: gap merging, inversions and reverse pairs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, MutableSequence, Sequence


def merge_sorted_in_place(
    arr1: MutableSequence[int], arr2: MutableSequence[int]
) -> None:
    """Merge two sorted sequences in place using the gap method.

    Afterwards arr1 holds the smallest values and arr2 the rest, both sorted.
    """
    first_len = len(arr1)
    total = first_len + len(arr2)

    def locate(index: int) -> tuple[MutableSequence[int], int]:
        if index < first_len:
            return arr1, index
        return arr2, index - first_len

    gap = (total + 1) // 2
    while gap > 0:
        for left in range(total - gap):
            seq_a, i = locate(left)
            seq_b, j = locate(left + gap)
            if seq_a[i] > seq_b[j]:
                seq_a[i], seq_b[j] = seq_b[j], seq_a[i]
        if gap == 1:
            break
        gap = (gap + 1) // 2


def _merge(left: Sequence[int], right: Sequence[int]) -> tuple[list[int], int]:
    """Merge two sorted runs, counting pairs where a left item exceeds a right one."""
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_counting_inversions(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_counting_inversions(values[:mid])
    right, right_count = _sort_counting_inversions(values[mid:])
    merged, cross = _merge(left, right)
    return merged, left_count + right_count + cross


def _count_doubled(left: Sequence[int], right: Sequence[int]) -> int:
    count = 0
    pointer = 0
    for value in left:
        while pointer < len(right) and value > 2 * right[pointer]:
            pointer += 1
        count += pointer
    return count


def _sort_counting_reverse_pairs(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_counting_reverse_pairs(values[:mid])
    right, right_count = _sort_counting_reverse_pairs(values[mid:])
    cross = _count_doubled(left, right)
    merged, _ = _merge(left, right)
    return merged, left_count + right_count + cross


def count_inversions(arr: Iterable[int]) -> int:
    """Number of index pairs i < j with arr[i] > arr[j]."""
    return _sort_counting_inversions(list(arr))[1]


def count_reverse_pairs(arr: Iterable[int]) -> int:
    """Number of index pairs i < j with arr[i] > 2 * arr[j]."""
    return _sort_counting_reverse_pairs(list(arr))[1]


def main(argv: list[str] | None = None) -> int:
    """Run the merge examples and print their results."""
    parser = argparse.ArgumentParser(description="Run the merge examples.")
    parser.parse_args(argv)
    arr1, arr2 = [1, 4, 8, 10], [2, 3, 9]
    merge_sorted_in_place(arr1, arr2)
    print("The merged arrays are: ")
    print("arr1[] = " + "".join(f"{x} " for x in arr1))
    print("arr2[] = " + "".join(f"{x} " for x in arr2))
    print(f"The number of inversions are: {count_inversions([5, 4, 3, 2, 1])}")
    print(f"The number of reverse pair is: {count_reverse_pairs([4, 1, 2, 3, 1])}")
    return 0