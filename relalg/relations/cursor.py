'''
Cursors for traversing the arrows of a relation, with support for
removing the arrow most recently produced by the cursor itself
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    TypeVar,
)

from .base import RelationError
from .pair import Pair

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


# Custom Exceptions
class CursorStateError(RelationError):
    '''Raised when a cursor is asked to remove an arrow it has not (or no longer) produced'''
    pass

class ConcurrentModificationError(RelationError, RuntimeError):
    '''Raised when a relation is modified underneath an active cursor, other than through that cursor'''
    pass

class Revisioned(Protocol):
    '''Anything which counts its own structural modifications and can drop single arrows'''
    @property
    def revision(self) -> int:
        ...

    def remove(self, key, value) -> bool:
        ...

class RelationCursor(Iterator[Pair[A, B]], Generic[A, B]):
    '''
    Iterator over the arrows of a relation store which can also remove them

    Calling remove() is only legal directly after next() has produced an arrow, and at most once per arrow;
    the removal is carried out by the store exactly as a targeted remove(key, value) would be

    Modifying the store by any other means while the cursor is live is a precondition violation,
    which is detected and reported as a ConcurrentModificationError on the next use of the cursor
    '''
    def __init__(self, store : Revisioned, arrows : Iterable[tuple[A, B]]) -> None:
        self._store = store
        self._arrows = iter(arrows)
        self._current : Optional[tuple[A, B]] = None
        self._expected_revision = store.revision

    def _check_unmodified(self) -> None:
        if self._store.revision != self._expected_revision:
            raise ConcurrentModificationError(f'{self._store.__class__.__name__} was modified during iteration')

    def __iter__(self) -> 'RelationCursor[A, B]':
        return self

    def __next__(self) -> Pair[A, B]:
        self._check_unmodified()
        try:
            key, value = next(self._arrows)
        except StopIteration:
            self._current = None # nothing left which could be removed
            raise

        self._current = (key, value)
        return Pair(key, value)

    def remove(self) -> None:
        '''Remove the arrow most recently produced by this cursor from the underlying store'''
        if self._current is None:
            raise CursorStateError('Cursor has not produced an arrow which can be removed (call next() first)')
        self._check_unmodified()

        key, value = self._current
        self._current = None
        self._store.remove(key, value)
        self._expected_revision = self._store.revision
