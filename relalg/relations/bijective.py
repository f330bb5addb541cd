'''One-to-one relation store, in which both keys and values are unique'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

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


class BijectiveRelation(RelationStore[A, B]):
    '''
    A relation in which every key has at most one value AND every value has at most one key;
    always both simple and injective by construction, so no counters need be maintained

    Inserting an arrow which clashes with existing ones EVICTS the clashing arrows rather than failing:
    putting (k, v) drops both the arrow previously leaving k and the arrow previously reaching v,
    so a single put() may remove up to two arrows while adding exactly one
    '''
    def _reset_indices(self) -> None:
        self._forward : dict[A, B] = {}
        self._backward : dict[B, A] = {}

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
        return capped_singleton(self._backward.get(value))

    def values_of(self, key : A) -> AbstractSet[B]:
        if key is None:
            return read_only(None)
        return capped_singleton(self._forward.get(key))

    def key_of(self, value : B) -> Optional[A]:
        if value is None:
            return None
        return self._backward.get(value)

    def value_of(self, key : A) -> Optional[B]:
        if key is None:
            return None
        return self._forward.get(key)

    def keys_for(self, values : Optional[Iterable[B]]) -> AbstractSet[A]:
        keys = set()
        for value in non_null(values):
            key = self._backward.get(value)
            if key is not None:
                keys.add(key)
        return read_only(keys)

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
        return True

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

        previous_value = self._forward.get(key)
        if previous_value is None:
            self._size += 1
        elif previous_value == value:
            return False
        else: # key is re-targeted; its old value is left without a key
            del self._backward[previous_value]
            LOGGER.debug(f'Evicted arrow ({key!s},{previous_value!s}) to make room for ({key!s},{value!s})')
        self._forward[key] = value

        previous_key = self._backward.get(value)
        if previous_key is not None: # value was claimed by another key, whose arrow disappears entirely
            del self._forward[previous_key]
            self._size -= 1
            LOGGER.debug(f'Evicted arrow ({previous_key!s},{value!s}) to make room for ({key!s},{value!s})')
        self._backward[value] = key

        self._touch()
        return True

    # Removal
    def remove(self, key : A, value : B) -> bool:
        if (key is None) or (value is None):
            return False

        previous_value = self._forward.get(key)
        if (previous_value is None) or (previous_value != value):
            return False

        del self._forward[key]
        del self._backward[value]
        self._size -= 1

        self._touch()
        return True

    def remove_key(self, key : A) -> set[B]:
        if key is None:
            return set()

        value = self._forward.pop(key, None)
        if value is None:
            return set()

        del self._backward[value]
        self._size -= 1

        self._touch()
        return {value}

    def remove_value(self, value : B) -> set[A]:
        if value is None:
            return set()

        key = self._backward.pop(value, None)
        if key is None:
            return set()

        del self._forward[key]
        self._size -= 1

        self._touch()
        return {key}
