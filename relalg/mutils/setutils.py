'''
Utilities related to generic set-theoretic operations,
including unions, Cartesian products, and read-only set construction
'''

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
from itertools import product as cartesian

from .containers import CappedSingleton, SetView
from .iteration import non_null


T = TypeVar('T', bound=Hashable)
U = TypeVar('U', bound=Hashable)

# set algebra - always returns a fresh set, treating absent operands as empty
def union(*sets : Optional[AbstractSet[T]]) -> set[T]:
    '''Members present in any of the given sets'''
    new_set = set()
    for members in non_null(sets):
        new_set.update(members)
    return new_set

def difference(s1 : Optional[AbstractSet[T]], s2 : Optional[AbstractSet[T]]) -> set[T]:
    '''Members of the first set which are not present in the second'''
    if s1 is None:
        return set()
    if s2 is None:
        return set(s1)
    return set(s1).difference(s2)

# read-only views
def read_only(original : Optional[AbstractSet[T]]) -> SetView[T]:
    '''Live read-only view of a set; an absent set is viewed as empty'''
    return SetView(original if (original is not None) else frozenset())

def capped_singleton(element : Optional[T]) -> AbstractSet[T]:
    '''
    Read-only set holding just the given element
    An absent (None) element produces an empty read-only set instead
    '''
    if element is None:
        return SetView(frozenset())
    return CappedSingleton(element)

# products
def cartesian_pairs(
    firsts : Optional[Iterable[T]],
    seconds : Optional[Iterable[U]]=None,
) -> Generator[tuple[T, U], None, None]:
    '''
    Generate every (first, second) combination of two collections, skipping None members
    If no second collection is given, the first is paired with itself

    Both collections are consumed once up front, so one-shot iterators are safe to pass
    '''
    firsts = tuple(non_null(firsts))
    seconds = firsts if (seconds is None) else tuple(non_null(seconds))

    yield from cartesian(firsts, seconds)
