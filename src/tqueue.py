import sys
from collections import OrderedDict

import numpy as np

from tpiece import Piece
import global_vars as gv


class QueueError(Exception):
    pass


class QueueFullError(QueueError):
    pass


class QueueEmptyError(QueueError):
    pass


class CircularQueue:
    """Fixed-capacity FIFO of pieces over preallocated arrays.

    ``head`` is the slot of the next piece to dequeue and ``tail`` the slot of
    the last inserted one (-1 before the first insert). ``count`` alone decides
    which slots are occupied; dequeued slots keep their old values.
    """

    def __init__(self, capacity: int = gv.capacity):
        if capacity < 1:
            raise ValueError(f'capacity must be positive, got {capacity}')
        self._capacity = capacity
        self._kinds = np.full(self._capacity, '', dtype='U1')
        self._ids = np.zeros(self._capacity, dtype='int64')
        self.head = 0
        self.tail = -1
        self.count = 0
        self.puts = 0
        self.gets = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self.count

    def is_full(self) -> bool:
        return self.count == self._capacity

    def is_empty(self) -> bool:
        return self.count == 0

    def enqueue(self, piece: Piece, out=None) -> None:
        if piece.kind not in gv.kinds:
            raise ValueError(f'unknown piece kind: {piece.kind!r}')
        if self.is_full():
            raise QueueFullError(f'preview queue is full ({self.count}/{self._capacity})')

        self.tail = (self.tail + 1) % self._capacity
        self._kinds[self.tail] = piece.kind
        self._ids[self.tail] = piece.id
        self.count += 1
        self.puts += 1
        print(f'[+] New piece added: {piece}', file=out)

    def dequeue(self) -> Piece:
        if self.is_empty():
            raise QueueEmptyError('preview queue is empty')

        piece = self._read(self.head)
        self.head = (self.head + 1) % self._capacity
        self.count -= 1
        self.gets += 1
        return piece

    def pieces(self) -> list:
        return [self._read((self.head + i) % self._capacity) for i in range(self.count)]

    def render(self, out=None) -> None:
        out = sys.stdout if out is None else out
        items = ' '.join(str(p) for p in self.pieces())
        out.write('Upcoming pieces:\n')
        out.write(f'FRONT -> {items + " " if items else ""}<- BACK\n')
        out.write(f'Total in queue: {self.count}/{self._capacity}\n')

    def stats(self) -> dict:
        stats = OrderedDict([('puts', self.puts),
                             ('gets', self.gets)])
        return stats.copy()

    def reset(self) -> None:
        self.__init__(self._capacity)

    def _read(self, index: int) -> Piece:
        return Piece(str(self._kinds[index]), int(self._ids[index]))
