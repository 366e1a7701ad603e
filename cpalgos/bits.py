"""Bit tricks: subset masks, per-bit contributions, Gray codes and binary counting."""

from functools import reduce
from itertools import accumulate
from operator import or_

MOD = 10**9 + 7
_WIDTH = 31
_SQUARE_BITS = 21
_COUNT_BITS = 60
_AND_BITS = 30
_GRAY_MAX = 20


def subset_masks(arr):
    """Every mask from 0 to 2**n - 1 with the values its set bits select."""
    items = list(arr)
    return [
        (mask, [value for i, value in enumerate(items) if mask >> i & 1])
        for mask in range(1 << len(items))
    ]


def _ones_per_bit(values, width):
    return [sum(value >> bit & 1 for value in values) for bit in range(width)]


def pairwise_xor_sum(arr):
    """Sum of ``a ^ b`` over unordered pairs, modulo MOD."""
    values = list(arr)
    n = len(values)
    total = 0
    for bit, ones in enumerate(_ones_per_bit(values, _WIDTH)):
        total += (ones * (n - ones) % MOD) << bit
    return total % MOD


def pairwise_and_sum(arr):
    """Sum of ``a & b`` over unordered pairs, modulo MOD."""
    total = 0
    for bit, ones in enumerate(_ones_per_bit(list(arr), _WIDTH)):
        total += ((ones * (ones - 1) // 2 % MOD) << bit) % MOD
    return total % MOD


def subset_xor_sum(arr):
    """Sum of the XOR of every subset, modulo MOD."""
    values = list(arr)
    if not values:
        return 0
    present = reduce(or_, values, 0) & ((1 << _WIDTH) - 1)
    return present % MOD * pow(2, len(values) - 1, MOD) % MOD


def max_sum_of_squares(arr):
    """Largest sum of squares reachable by moving bits between the values."""
    values = list(arr)
    counts = _ones_per_bit(values, _SQUARE_BITS)
    total = 0
    for _ in values:
        large = 0
        for bit, count in enumerate(counts):
            if count:
                large |= 1 << bit
                counts[bit] -= 1
        total += large * large
    return total


def bits_string(x):
    """Binary digits of ``x``, most significant first; ``"0"`` for zero."""
    if x < 0:
        raise ValueError("negative numbers have no binary string here")
    return format(x, "b")


def count_ones_upto(x):
    """Total number of set bits in the numbers 0 to ``x``."""
    total = x + 1
    ones = 0
    for bit in range(_COUNT_BITS):
        half = 1 << bit
        full, rest = divmod(total, half << 1)
        ones += full * half + max(rest - half, 0)
    return ones


def number_with_kth_one(x):
    """Smallest number in ``[0, x]`` whose running count of ones exceeds ``x``, or None."""
    lo, hi = 0, x
    answer = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if count_ones_upto(mid) > x:
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def kth_one_position(x, k):
    """Index in ``bits_string(x)`` where the running count of ones reaches ``k``,
    or the string's length if it never does."""
    digits = bits_string(x)
    count = 0
    for index, digit in enumerate(digits):
        if digit == "1":
            count += 1
        if count == k:
            return index
    return len(digits)


def total_bit_length(x):
    """Length of the binary strings of 1 to ``x`` written one after another."""
    total = 0
    length = 1
    start = 1
    while start <= x:
        end = min(2 * start - 1, x)
        total += length * (end - start + 1)
        start *= 2
        length += 1
    return total


def locate_kth_one(x):
    """``(number, position in number, index in the concatenation)`` for the x-th one."""
    number = number_with_kth_one(x)
    if number is None:
        raise ValueError(f"no number in [0, {x}] holds the {x}-th one")
    position = x - count_ones_upto(number - 1)
    index = total_bit_length(number - 1) + kth_one_position(number, position)
    return number, position, index


def gray_code(n):
    """All n-bit strings in reflected Gray code order."""
    if not 0 <= n <= _GRAY_MAX:
        raise ValueError(f"bit length must be between 0 and {_GRAY_MAX}")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def max_and_subsequence(arr, k):
    """Largest AND reachable by choosing ``k`` of the values (bits 0..29)."""
    candidates = list(arr)
    result = 0
    for bit in reversed(range(_AND_BITS)):
        kept = [value for value in candidates if value >> bit & 1]
        if len(kept) >= k:
            result |= 1 << bit
            candidates = kept
    return result


class BitPrefixCounts:
    """Per-bit prefix counts of ones, answering range queries in O(bits)."""

    def __init__(self, arr):
        rows = ([value >> bit & 1 for bit in range(_WIDTH)] for value in arr)
        self._prefix = list(
            accumulate(
                rows,
                lambda acc, row: [a + b for a, b in zip(acc, row)],
                initial=[0] * _WIDTH,
            )
        )

    def __len__(self):
        return len(self._prefix) - 1

    def range_score(self, left, right):
        """Score of the 1-based inclusive range: minority-ones bits, not-all-ones
        bits and any-ones bits, added together."""
        if not 1 <= left <= right <= len(self):
            raise IndexError("range out of bounds")
        length = right - left + 1
        score = 0
        upper = self._prefix[right]
        lower = self._prefix[left - 1]
        for bit, (high, low) in enumerate(zip(upper, lower)):
            ones = high - low
            weight = 1 << bit
            if ones < length - ones:
                score += weight
            if ones != length:
                score += weight
            if ones > 0:
                score += weight
        return score