"""Modular arithmetic and binomial coefficients modulo a prime."""

MOD = 10**9 + 7
DEFAULT_LIMIT = 1_000_000


def factorial_mod(n):
    """``n!`` modulo MOD."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for i in range(2, n + 1):
        result = result * i % MOD
    return result


def power_mod(a, b):
    """``a ** b`` modulo MOD by fast exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, MOD)


def inverse(x):
    """Multiplicative inverse of ``x`` modulo the prime MOD."""
    if x % MOD == 0:
        raise ValueError("zero has no modular inverse")
    return power_mod(x, MOD - 2)


def ncr_single(n, r):
    """``C(n, r)`` modulo MOD in O(r) multiplications and one inverse."""
    if r < 0:
        raise ValueError("r must be non-negative")
    numerator = 1
    denominator = 1
    for i in range(1, r + 1):
        numerator = numerator * (n - i + 1) % MOD
        denominator = denominator * i % MOD
    if numerator == 0:
        return 0
    return numerator * inverse(denominator) % MOD


def ncr_basic(n, r):
    """Exact ``C(n, r)`` by the multiplicative formula, without a modulus."""
    if r < 0:
        raise ValueError("r must be non-negative")
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result


def ncr_table(n, r):
    """``C(n, r)`` modulo MOD from Pascal's triangle; 0 when ``r > n``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    row = [1]
    for _ in range(n):
        row = [1] + [(a + b) % MOD for a, b in zip(row, row[1:])] + [1]
    return row[r] if r <= n else 0


def modular_expression(a, b, c, d, e, f):
    """``(a + b - c * e**d + f)`` reduced into ``[0, MOD)``."""
    term = c % MOD * power_mod(e, d) % MOD
    return (a % MOD + b % MOD - term + f % MOD) % MOD


class FactorialTable:
    """Factorials and inverse factorials up to ``limit`` for O(1) binomials."""

    def __init__(self, limit=DEFAULT_LIMIT):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % MOD
        inv = [1] * (limit + 1)
        inv[limit] = inverse(fact[limit])
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % MOD
        self._fact = fact
        self._inv = inv

    def ncr(self, n, r):
        """``C(n, r)`` modulo MOD; 0 when ``r`` lies outside ``[0, n]``."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must lie between 0 and {self.limit}")
        if not 0 <= r <= n:
            return 0
        return self._fact[n] * self._inv[r] % MOD * self._inv[n - r] % MOD