from collections import deque

from .rational import ZERO
from .util import EmptyStack, IndexOutOfRange


class Stack:
    '''
    Operand stack addressed by position, 0 being the top.

    Operations that address a position past the bottom first extend the stack
    with zeros, rather than fail. Direct access (get) never extends.
    '''

    def __init__(self, values=()):
        '''
        Create stack, holding values topmost first.
        '''
        self._items = deque(values)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        '''
        Iterate top of stack first.
        '''
        return iter(self._items)

    def __getitem__(self, position):
        return self.get(position)

    def __repr__(self):
        return '{}([{}])'.format(type(self).__name__,
                                 ', '.join(map(str, self._items)))

    def size(self):
        return len(self._items)

    def get(self, position):
        if not 0 <= position < len(self._items):
            raise IndexOutOfRange('No stack level {}'.format(position))
        return self._items[position]

    @staticmethod
    def _check_count(n):
        if n < 0:
            raise IndexOutOfRange('Negative stack level {}'.format(n))

    def _require(self, n):
        if len(self._items) < n:
            raise EmptyStack('Less than {} element(s) on stack'.format(n))

    def push(self, value):
        self._items.appendleft(value)

    def pop(self):
        self._require(1)
        return self._items.popleft()

    def popn(self, n):
        '''
        Pop n elements, topmost first.

        Nothing is popped if there are fewer than n.
        '''
        self._check_count(n)
        self._require(n)
        return [self._items.popleft() for _ in range(n)]

    def extend(self, size):
        '''
        Pad the bottom of the stack with zeros up to size elements.
        '''
        missing = size - len(self._items)
        if missing > 0:
            self._items.extend([ZERO] * missing)

    def dup(self):
        '''
        Duplicate the top. Does nothing on an empty stack.

        10 11 12 -> 10 10 11 12
        '''
        if self._items:
            self._items.appendleft(self._items[0])

    def dupn(self, n):
        '''
        Duplicate the top n elements, keeping their order.

        10 11 12 13 14 dupn(3) -> 10 11 12 10 11 12 13 14
        '''
        self._check_count(n)
        self.extend(n)
        # Each push shifts the block, so level n - 1 walks up it bottom first.
        for _ in range(n):
            self._items.appendleft(self._items[n - 1])

    def pick(self, n):
        '''
        Push a copy of level n.

        10 11 12 13 14 pick(3) -> 13 10 11 12 13 14
        '''
        self._check_count(n)
        self.extend(n + 1)
        self._items.appendleft(self._items[n])

    def roll_up(self, distance):
        '''
        Move level distance to the top.

        10 11 12 13 14 roll_up(3) -> 13 10 11 12 14
        '''
        self._check_count(distance)
        self.extend(distance + 1)
        item = self._items[distance]
        del self._items[distance]
        self._items.appendleft(item)

    def roll_down(self, distance):
        '''
        Move the top to level distance.

        10 11 12 13 14 roll_down(3) -> 11 12 13 10 14
        '''
        self._check_count(distance)
        self.extend(distance + 1)
        item = self._items.popleft()
        self._items.insert(distance, item)

    def drop(self):
        self.pop()

    def dropn(self, n):
        self.popn(n)

    def swap(self):
        self._require(2)
        self._items[0], self._items[1] = self._items[1], self._items[0]

    def rot(self):
        '''
        roll_up(2), but only on a stack of at least 3 elements.
        '''
        self._require(3)
        self.roll_up(2)

    def clear(self):
        self._items.clear()

    def levels(self):
        '''
        Yield (level, value), bottom of stack first.
        '''
        for level in reversed(range(len(self._items))):
            yield level, self._items[level]

    def display(self):
        '''
        Return lines of "level: value", bottom of stack first.
        '''
        return ['{:2d}: {}'.format(level, value)
                for level, value
                in self.levels()]
