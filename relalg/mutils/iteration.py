'''Tools for simplifying iteration over collections of items'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Collection,
    Generator,
    Iterable,
    Optional,
    TypeVar,
)
T = TypeVar('T')


def non_null(items : Optional[Iterable[Optional[T]]]) -> Generator[T, None, None]:
    '''
    Generate the members of a collection which are not None
    An absent (None) collection is treated as though it were empty
    '''
    if items is None:
        return

    for item in items:
        if item is not None:
            yield item

def sole_element(items : Optional[Collection[T]]) -> Optional[T]:
    '''
    Return the single member of a collection,
    or None if the collection is absent, empty, or has more than one member
    '''
    if (items is None) or (len(items) != 1):
        return None
    return next(iter(items))
