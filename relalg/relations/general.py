'''Many-to-many relation store, indexed from both sides'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    AbstractSet,
    Generator,
    Hashable,
    Optional,
    TypeVar,
)

from .store import RelationStore
from ..mutils.setutils import read_only

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


class GeneralRelation(RelationStore[A, B]):
    '''
    A relation with no restrictions on how many values a key may have, or vice-versa

    Keeps a forward index (key -> set of values) and a backward index (value -> set of keys),
    along with two counters of "excess" arrows which make the relation non-simple and non-injective:
    * nonsimple = sum over keys of (number of values of that key) - 1
    * noninjective = sum over values of (number of keys of that value) - 1

    The counters are maintained exactly on every insertion and removal,
    so that is_simple and is_injective can be answered in constant time
    '''
    def _reset_indices(self) -> None:
        self._forward : dict[A, set[B]] = {}
        self._backward : dict[B, set[A]] = {}
        self._nonsimple : int = 0
        self._noninjective : int = 0

    def _arrows(self) -> Generator[tuple[A, B], None, None]:
        # DEV: snapshots are taken so that the cursor can drop the arrow it last produced (possibly emptying a bucket) mid-traversal
        for key in tuple(self._forward):
            for value in tuple(self._forward[key]):
                yield key, value

    # Getters
    def keys(self) -> AbstractSet[A]:
        return read_only(self._forward.keys())

    def values(self) -> AbstractSet[B]:
        return read_only(self._backward.keys())

    def keys_of(self, value : B) -> AbstractSet[A]:
        if value is None:
            return read_only(None)
        return read_only(self._backward.get(value))

    def values_of(self, key : A) -> AbstractSet[B]:
        if key is None:
            return read_only(None)
        return read_only(self._forward.get(key))

    def key_of(self, value : B) -> Optional[A]:
        if value is None:
            return None
        keys = self._backward.get(value)
        if (keys is None) or (len(keys) > 1):
            return None
        return next(iter(keys))

    def value_of(self, key : A) -> Optional[B]:
        if key is None:
            return None
        values = self._forward.get(key)
        if (values is None) or (len(values) > 1):
            return None
        return next(iter(values))

    # Predicates
    @property
    def is_simple(self) -> bool:
        return self._nonsimple == 0

    @property
    def is_injective(self) -> bool:
        return self._noninjective == 0

    def contains(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False
        values = self._forward.get(key)
        return (values is not None) and (value in values)

    def contains_key(self, key : A) -> bool:
        return (key is not None) and (key in self._forward)

    def contains_value(self, value : B) -> bool:
        return (value is not None) and (value in self._backward)

    # Insertion
    def put(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False

        values = self._forward.setdefault(key, set())
        if value in values:
            return False

        values.add(value)
        self._size += 1
        if len(values) > 1:
            self._nonsimple += 1

        keys = self._backward.setdefault(value, set())
        keys.add(key)
        if len(keys) > 1:
            self._noninjective += 1

        self._touch()
        return True

    # Removal
    def remove(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False

        values = self._forward.get(key)
        if (values is None) or (value not in values):
            return False

        values.remove(value)
        self._size -= 1
        if values:
            self._nonsimple -= 1
        else: # bucket emptied, key no longer present at all
            del self._forward[key]
        self._detach_key_from_value(key, value)

        self._touch()
        return True

    def remove_key(self, key : A) -> set[B]:
        if key is None:
            return set()

        values = self._forward.pop(key, None)
        if values is None:
            return set()

        self._size -= len(values)
        self._nonsimple -= len(values) - 1
        for value in values:
            self._detach_key_from_value(key, value)

        self._touch()
        return values

    def remove_value(self, value : B) -> set[A]:
        if value is None:
            return set()

        keys = self._backward.pop(value, None)
        if keys is None:
            return set()

        self._size -= len(keys)
        self._noninjective -= len(keys) - 1
        for key in keys:
            self._detach_value_from_key(value, key)

        self._touch()
        return keys

    ## bookkeeping helpers
    def _detach_key_from_value(self, key : A, value : B) -> None:
        '''Drop a key from the backward bucket of a value, discarding the bucket if it empties'''
        keys = self._backward[value]
        keys.remove(key)
        if keys:
            self._noninjective -= 1
        else:
            del self._backward[value]

    def _detach_value_from_key(self, value : B, key : A) -> None:
        '''Drop a value from the forward bucket of a key, discarding the bucket if it empties'''
        values = self._forward[key]
        values.remove(value)
        if values:
            self._nonsimple -= 1
        else:
            del self._forward[key]
