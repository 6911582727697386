"""Pair, triplet and quadruplet sums with two pointers over sorted data."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence


def two_sum(arr: Iterable[int], target: int) -> bool:
    """Tell whether two distinct elements add up to target."""
    values = sorted(arr)
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def three_sum(arr: Iterable[int]) -> list[list[int]]:
    """All distinct sorted triplets summing to zero."""
    values = sorted(arr)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruplets summing to target."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            k, m = j + 1, n - 1
            while k < m:
                total = values[i] + values[j] + values[k] + values[m]
                if total == target:
                    result.append([values[i], values[j], values[k], values[m]])
                    k += 1
                    m -= 1
                    while k < m and values[k] == values[k - 1]:
                        k += 1
                    while k < m and values[m] == values[m + 1]:
                        m -= 1
                elif total < target:
                    k += 1
                else:
                    m -= 1
    return result


def _format_groups(groups: Sequence[Sequence[int]]) -> str:
    return "".join("[" + "".join(f"{x} " for x in group) + "] " for group in groups)


def main(argv: list[str] | None = None) -> int:
    """Run the sum examples and print their answers."""
    parser = argparse.ArgumentParser(description="Run the array sum examples.")
    parser.parse_args(argv)
    print(f"answer : {'YES' if two_sum([2, 6, 5, 8, 11], 14) else 'NO'}")
    print(_format_groups(three_sum([-1, 0, 1, 2, -1, -4])))
    print("The quadruplets are: ")
    print(_format_groups(four_sum([4, 3, 3, 4, 4, 2, 1, 2, 1, 1], 9)))
    return 0