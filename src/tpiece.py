from typing import NamedTuple, Iterable

import numpy as np
from numba import njit

import global_vars as gv


class Piece(NamedTuple):
    kind: str
    id: int

    def __str__(self) -> str:
        return f'[{self.kind} {self.id}]'


@njit(cache=True)
def draw_uniform(n: int, k: int) -> np.ndarray:
    result = np.zeros(n, dtype='int8')
    for i in range(n):
        result[i] = np.random.randint(0, k)
    return result


@njit(cache=True)
def draw_bags(n: int, k: int) -> np.ndarray:
    length = n + (k - n % k) % k
    result = np.zeros(length, dtype='int8')
    for i in range(0, length, k):
        result[i:i + k] = np.random.permutation(k)
    return result


@njit(cache=True)
def seed_rng(value: int) -> None:
    np.random.seed(value)


class PieceGenerator:
    """Supplies the queue with new pieces.

    Ids come from a counter owned by the generator: the first piece gets 0 and
    every later piece gets the previous id plus one. Kinds are drawn according
    to ``policy`` ('uniform' or 'bag'), or cycled from ``kinds`` when a fixed
    sequence is given.
    """

    def __init__(self, policy: str = 'uniform', kinds: Iterable = None, seed: int = None):
        if policy not in gv.policies:
            raise ValueError(f'unknown policy: {policy!r}')
        self.policy = policy
        self._fixed = None
        if kinds is not None:
            self._fixed = tuple(kinds)
            if len(self._fixed) == 0:
                raise ValueError('kinds must not be empty')
            for k in self._fixed:
                if k not in gv.kinds:
                    raise ValueError(f'unknown piece kind: {k!r}')
        self._counter = 0
        self._pending = np.zeros(0, dtype='int8')
        if seed is not None:
            self.seed(seed)

    @property
    def next_id(self) -> int:
        return self._counter

    def seed(self, value: int) -> None:
        seed_rng(value)
        self._pending = np.zeros(0, dtype='int8')

    def generate(self) -> Piece:
        piece = Piece(self._next_kind(), self._counter)
        self._counter += 1
        return piece

    def _next_kind(self) -> str:
        if self._fixed is not None:
            return self._fixed[self._counter % len(self._fixed)]

        if self._pending.shape[0] == 0:
            if self.policy == 'bag':
                self._pending = draw_bags(len(gv.kinds), len(gv.kinds))
            else:
                self._pending = draw_uniform(len(gv.kinds), len(gv.kinds))
        index = self._pending[0]
        self._pending = self._pending[1:]
        return gv.kinds[index]
