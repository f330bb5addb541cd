'''Read-only set containers used to expose relation internals without copying'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Any,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    NoReturn,
    TypeVar,
)
from collections.abc import Set


ElemT = TypeVar('ElemT', bound=Hashable)

class ImmutabilityError(PermissionError):
    '''Raised when attempting to modify a read-only container, relation, or cursor'''
    pass

class ReadOnlySet(Set, Generic[ElemT]):
    '''
    Base for sets which can be inspected but never written to
    Every mutator of the builtin set interface is present, but refuses to act
    '''
    def _refuse(self, *args, **kwargs) -> NoReturn:
        raise ImmutabilityError(f'{self.__class__.__name__} is read-only and cannot be modified')

    add = discard = remove = pop = clear = _refuse
    update = intersection_update = difference_update = symmetric_difference_update = _refuse
    __ior__ = __iand__ = __isub__ = __ixor__ = _refuse

    @classmethod
    def _from_iterable(cls, it : Iterable[ElemT]) -> set[ElemT]:
        # DEV: set operators on read-only sets produce ordinary (writable) sets, never new views
        return set(it)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({set(self)!r})'

class SetView(ReadOnlySet[ElemT]):
    '''
    A live, read-only window onto an existing set
    Changes to the underlying set are visible through the view, but not vice-versa
    '''
    __slots__ = ('_set',)

    def __init__(self, set_ : Set) -> None:
        self._set = set_

    def __contains__(self, item : Any) -> bool:
        try:
            return item in self._set
        except TypeError: # unhashable items are never members
            return False

    def __iter__(self) -> Iterator[ElemT]:
        return iter(self._set)

    def __len__(self) -> int:
        return len(self._set)

class CappedSingleton(ReadOnlySet[ElemT]):
    '''A read-only set containing exactly one element'''
    __slots__ = ('_element',)

    def __init__(self, element : ElemT) -> None:
        self._element = element

    @property
    def element(self) -> ElemT:
        '''The sole member of this set'''
        return self._element

    def __contains__(self, item : Any) -> bool:
        return (item is not None) and (self._element == item)

    def __iter__(self) -> Iterator[ElemT]:
        yield self._element

    def __len__(self) -> int:
        return 1
