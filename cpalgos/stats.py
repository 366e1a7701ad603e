"""Running statistics: a mean/variance/mode/median dashboard and per-player scores."""

from collections import Counter, defaultdict
from dataclasses import dataclass

from sortedcontainers import SortedList


class DataDashboard:
    """Multiset of integers answering mean, variance, mode and median as it changes."""

    def __init__(self):
        self._total = 0
        self._squares = 0
        self._freq = Counter()
        self._by_freq = SortedList()
        self._low = SortedList()
        self._high = SortedList()

    def __len__(self):
        return len(self._low) + len(self._high)

    def _balance(self):
        while len(self._low) < len(self._high):
            self._low.add(self._high.pop(0))
        while len(self._low) > len(self._high) + 1:
            self._high.add(self._low.pop())

    def _require_values(self):
        if not len(self):
            raise ValueError("the dashboard holds no values")

    def insert(self, x):
        """Add one occurrence of ``x``."""
        self._total += x
        self._squares += x * x
        count = self._freq[x]
        if count:
            self._by_freq.remove((count, x))
        self._freq[x] = count + 1
        self._by_freq.add((count + 1, x))
        if not self._low or x <= self._low[-1]:
            self._low.add(x)
        else:
            self._high.add(x)
        self._balance()

    def remove(self, x):
        """Remove one occurrence of ``x``; ValueError if it is not held."""
        count = self._freq[x]
        if not count:
            del self._freq[x]
            raise ValueError(f"{x!r} is not in the dashboard")
        self._total -= x
        self._squares -= x * x
        self._by_freq.remove((count, x))
        if count > 1:
            self._freq[x] = count - 1
            self._by_freq.add((count - 1, x))
        else:
            del self._freq[x]
        if x in self._high:
            self._high.remove(x)
        else:
            self._low.remove(x)
        self._balance()

    def mean(self):
        self._require_values()
        return self._total / len(self)

    def variance(self):
        """Population variance."""
        self._require_values()
        mean = self.mean()
        return self._squares / len(self) - mean * mean

    def mode(self):
        """Most frequent value; the largest such value on ties."""
        self._require_values()
        return self._by_freq[-1][1]

    def median(self):
        self._require_values()
        if len(self) % 2:
            return self._low[-1]
        return (self._low[-1] + self._high[0]) / 2


@dataclass
class PlayerStats:
    """Running sum and count of one player's scores."""

    total: int = 0
    count: int = 0

    def insert(self, x):
        self.total += x
        self.count += 1

    def mean(self):
        if not self.count:
            raise ZeroDivisionError("no scores recorded")
        return self.total / self.count

    def details(self):
        return {"mean": self.mean(), "sum": float(self.total)}


class Dashboard:
    """Scores ingested by player name."""

    def __init__(self):
        self._players = defaultdict(PlayerStats)

    def ingest(self, player, score):
        self._players[player].insert(score)

    def details(self, player):
        """Mean and sum for ``player``; KeyError if nothing was ingested for them."""
        if player not in self._players:
            raise KeyError(player)
        return self._players[player].details()