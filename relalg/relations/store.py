'''Skeleton shared by the concrete (data-owning) relation stores'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Generator,
    Hashable,
    Iterable,
    Optional,
    Self,
    TypeVar,
)
from abc import abstractmethod

from .base import MAX_REPORTED_SIZE, MutableRelation
from .cursor import RelationCursor
from .domains import Domain
from ..mutils.iteration import non_null

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


class RelationStore(MutableRelation[A, B]):
    '''
    A mutable relation which exclusively owns its indices and the counters derived from them

    Every structural change bumps the store's revision, which cursors use to detect
    modifications made behind their backs
    '''
    def __init__(
        self,
        arrows : Optional[Iterable[tuple[A, B]]]=None,
        domain_type : Optional[Domain[A]]=None,
        range_type : Optional[Domain[B]]=None,
    ) -> None:
        self._domain_type = domain_type if (domain_type is not None) else Domain()
        self._range_type = range_type if (range_type is not None) else Domain()
        self._size : int = 0
        self._revision : int = 0
        self._reset_indices()

        if arrows is not None:
            for arrow in non_null(arrows):
                key, value = arrow
                self.put(key, value)

    # Index management
    @abstractmethod
    def _reset_indices(self) -> None:
        '''Discard all indices and counters, leaving the store empty'''
        ...

    @abstractmethod
    def _arrows(self) -> Generator[tuple[A, B], None, None]:
        '''
        Generate every (key, value) arrow, grouped by key
        Must tolerate removal of the most-recently generated arrow between steps
        '''
        ...

    def _touch(self) -> None:
        '''Record that the structure of the store has changed'''
        self._revision += 1

    @property
    def revision(self) -> int:
        '''Number of structural modifications made over the lifetime of this store'''
        return self._revision

    # Getters
    @property
    def size(self) -> int:
        return min(self._size, MAX_REPORTED_SIZE)

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def domain_type(self) -> Domain[A]:
        return self._domain_type

    @property
    def range_type(self) -> Domain[B]:
        return self._range_type

    @property
    def is_entire(self) -> bool:
        return self._domain_type.is_entire(self.keys())

    @property
    def is_surjective(self) -> bool:
        return self._range_type.is_entire(self.values())

    def __iter__(self) -> RelationCursor[A, B]:
        return RelationCursor(self, self._arrows())

    # Removal
    def clear(self) -> None:
        self._reset_indices()
        self._size = 0
        self._touch()

    # Copying
    def copy(self) -> Self:
        '''Independent store of the same shape, holding the same arrows and domain types'''
        clone = self.__class__(domain_type=self._domain_type, range_type=self._range_type)
        for key, value in self._arrows():
            clone.put(key, value)

        return clone
