"""
satfeat.solver.watches

Per-literal watch lists.
"""

from typing import Iterator, List

from satfeat.core.types import Lit, Watched


class WatchIndex:
    """One list of Watched entries per literal, indexed by Lit.

    Sized for 2 * n_vars literals; grows with resize().
    """

    def __init__(self, n_vars: int = 0):
        self._lists: List[List[Watched]] = [[] for _ in range(2 * n_vars)]

    def resize(self, n_vars: int) -> None:
        while len(self._lists) < 2 * n_vars:
            self._lists.append([])

    def attach(self, lit: Lit, watched: Watched) -> None:
        self._lists[lit.x].append(watched)

    def __getitem__(self, lit: Lit) -> List[Watched]:
        return self._lists[lit.x]

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[List[Watched]]:
        return iter(self._lists)

    def total_entries(self) -> int:
        return sum(len(ws) for ws in self._lists)
