'''Single-valued (simple) relation store, i.e. a partial function which also knows its preimages'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    AbstractSet,
    Generator,
    Hashable,
    Iterable,
    Optional,
    TypeVar,
)

from .store import RelationStore
from ..mutils.iteration import non_null
from ..mutils.setutils import capped_singleton, read_only

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


class FunctionalRelation(RelationStore[A, B]):
    '''
    A relation in which every key has at most one value; always simple by construction

    Putting an arrow from a key which already has a different value REPLACES that value,
    in the manner of dict assignment, rather than adding a second arrow

    Keeps a forward index (key -> value) and a backward index (value -> set of keys),
    counting the excess keys per value so that injectivity can be answered in constant time
    '''
    def _reset_indices(self) -> None:
        self._forward : dict[A, B] = {}
        self._backward : dict[B, set[A]] = {}
        self._noninjective : int = 0

    def _arrows(self) -> Generator[tuple[A, B], None, None]:
        yield from tuple(self._forward.items())

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
        return capped_singleton(self._forward.get(key))

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
        return self._forward.get(key)

    def values_for(self, keys : Optional[Iterable[A]]) -> AbstractSet[B]:
        values = set()
        for key in non_null(keys):
            value = self._forward.get(key)
            if value is not None:
                values.add(value)
        return read_only(values)

    # Predicates
    @property
    def is_simple(self) -> bool:
        return True

    @property
    def is_injective(self) -> bool:
        return self._noninjective == 0

    def contains(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False
        return self._forward.get(key) == value

    def contains_key(self, key : A) -> bool:
        return (key is not None) and (key in self._forward)

    def contains_value(self, value : B) -> bool:
        return (value is not None) and (value in self._backward)

    # Insertion
    def put(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False

        previous = self._forward.get(key)
        if previous is None:
            self._size += 1
        elif previous == value:
            return False
        else: # overwrite; the old arrow from this key disappears
            self._detach_key_from_value(key, previous)
        self._forward[key] = value

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

        previous = self._forward.get(key)
        if (previous is None) or (previous != value):
            return False

        del self._forward[key]
        self._size -= 1
        self._detach_key_from_value(key, value)

        self._touch()
        return True

    def remove_key(self, key : A) -> set[B]:
        if key is None:
            return set()

        value = self._forward.pop(key, None)
        if value is None:
            return set()

        self._size -= 1
        self._detach_key_from_value(key, value)

        self._touch()
        return {value}

    def remove_value(self, value : B) -> set[A]:
        if value is None:
            return set()

        keys = self._backward.pop(value, None)
        if keys is None:
            return set()

        self._size -= len(keys)
        self._noninjective -= len(keys) - 1
        for key in keys:
            del self._forward[key]

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
