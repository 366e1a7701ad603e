"""String algorithms: palindromes, prefix function and bracket balance."""

from bisect import bisect_left, bisect_right
from collections import defaultdict
from itertools import accumulate

_OPENING = {"(": 1, "{": 2, "[": 3, "<": 4}
_CLOSING = {")": 1, "}": 2, "]": 3, ">": 4}


def longest_palindromic_substring(s):
    """Longest palindromic substring of ``s``; the leftmost one on ties."""
    t = "#" + "".join(c + "#" for c in s)
    n = len(t)
    radius = [0] * n
    center = right = 0
    best_len = best_center = 0
    for i in range(1, n - 1):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while (
            i + radius[i] + 1 < n
            and i - radius[i] - 1 >= 0
            and t[i + radius[i] + 1] == t[i - radius[i] - 1]
        ):
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
        if radius[i] > best_len:
            best_len, best_center = radius[i], i
    start = (best_center - best_len) // 2
    return s[start:start + best_len]


def prefix_function(s):
    """Border lengths: entry ``i`` is the longest proper border of ``s[:i]``; entry 0 is -1."""
    table = [-1] * (len(s) + 1)
    j = -1
    for i, char in enumerate(s):
        while j != -1 and char != s[j]:
            j = table[j]
        j += 1
        table[i + 1] = j
    return table


def is_balanced(s):
    """Whether every bracket in ``s`` is closed by its matching partner in order."""
    stack = []
    for char in s:
        if char in _OPENING:
            stack.append(_OPENING[char])
        elif not stack:
            return False
        elif _CLOSING.get(char) == stack[-1]:
            stack.pop()
    return not stack


def count_balanced_substrings(s):
    """Number of non-empty substrings of ``s`` that are balanced parenthesis strings."""
    depth = list(accumulate((1 if c == "(" else -1 for c in s), initial=0))
    positions = defaultdict(list)
    for index, level in enumerate(depth):
        positions[level].append(index)
    total = 0
    stack = []
    for i, level in enumerate(depth):
        while stack and depth[stack[-1]] >= level:
            stack.pop()
        left = stack[-1] + 1 if stack else 0
        same = positions[level]
        total += bisect_right(same, i - 1) - bisect_left(same, left)
        stack.append(i)
    return total