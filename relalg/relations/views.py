'''
Zero-copy views which re-expose an existing relation under a different contract

A view owns no arrows of its own; it borrows the relation it wraps, which must
stay alive (and, for snapshotting views, unmodified) for as long as the view is in use
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    AbstractSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    NoReturn,
    Optional,
    TypeVar,
)

from .base import Relation, MutableRelation
from .domains import Domain
from .pair import Pair
from ..mutils.containers import ImmutabilityError
from ..mutils.setutils import read_only

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


# Cursors over views
class ReadOnlyCursor(Iterator[Pair[A, B]], Generic[A, B]):
    '''Forwards traversal of another cursor, but refuses to remove anything through it'''
    def __init__(self, cursor : Iterator[Pair[A, B]]) -> None:
        self._cursor = cursor

    def __iter__(self) -> 'ReadOnlyCursor[A, B]':
        return self

    def __next__(self) -> Pair[A, B]:
        return next(self._cursor)

    def remove(self) -> NoReturn:
        raise ImmutabilityError('Cannot remove arrows through a read-only cursor')

class ConverseCursor(ReadOnlyCursor[B, A]):
    '''Traverses the arrows of a relation with each arrow reversed; read-only'''
    def __next__(self) -> Pair[B, A]:
        return next(self._cursor).swapped()

class MutableConverseCursor(ConverseCursor[B, A]):
    '''Traverses the arrows of a relation with each arrow reversed, removing through the wrapped cursor'''
    def remove(self) -> None:
        self._cursor.remove()

# Converse (role-swapping) views
class ConverseView(Relation[B, A]):
    '''
    The relation R over (A, B) seen as its converse over (B, A), i.e. with every arrow reversed

    Keys and values swap roles, as do simplicity and injectivity, and entirety and surjectivity;
    nothing is copied, so changes to R are immediately visible through the view
    '''
    def __init__(self, relation : Relation[A, B]) -> None:
        self._relation = relation

    @property
    def converse(self) -> Relation[A, B]:
        '''The wrapped relation, which is the converse of this view'''
        return self._relation

    # Getters
    @property
    def size(self) -> int:
        return self._relation.size

    @property
    def is_empty(self) -> bool:
        return self._relation.is_empty

    @property
    def domain_type(self) -> Domain[B]:
        return self._relation.range_type

    @property
    def range_type(self) -> Domain[A]:
        return self._relation.domain_type

    def keys(self) -> AbstractSet[B]:
        return self._relation.values()

    def values(self) -> AbstractSet[A]:
        return self._relation.keys()

    def keys_of(self, value : A) -> AbstractSet[B]:
        return self._relation.values_of(value)

    def values_of(self, key : B) -> AbstractSet[A]:
        return self._relation.keys_of(key)

    def key_of(self, value : A) -> Optional[B]:
        return self._relation.value_of(value)

    def value_of(self, key : B) -> Optional[A]:
        return self._relation.key_of(key)

    def keys_for(self, values : Optional[Iterable[A]]) -> AbstractSet[B]:
        return self._relation.values_for(values)

    def values_for(self, keys : Optional[Iterable[B]]) -> AbstractSet[A]:
        return self._relation.keys_for(keys)

    def __iter__(self) -> ConverseCursor[B, A]:
        return ConverseCursor(iter(self._relation))

    # Predicates
    def contains(self, key : B, value : A) -> bool:
        return self._relation.contains(value, key)

    def contains_key(self, key : B) -> bool:
        return self._relation.contains_value(key)

    def contains_value(self, value : A) -> bool:
        return self._relation.contains_key(value)

    @property
    def is_simple(self) -> bool:
        return self._relation.is_injective

    @property
    def is_injective(self) -> bool:
        return self._relation.is_simple

    @property
    def is_entire(self) -> bool:
        return self._relation.is_surjective

    @property
    def is_surjective(self) -> bool:
        return self._relation.is_entire

class MutableConverseView(ConverseView[B, A], MutableRelation[B, A]):
    '''
    Converse view of a mutable relation which also writes through to it,
    with the arguments of every insertion and removal swapped back into place
    '''
    def __init__(self, relation : MutableRelation[A, B]) -> None:
        super().__init__(relation)

    def __iter__(self) -> MutableConverseCursor[B, A]:
        return MutableConverseCursor(iter(self._relation))

    # Insertion
    def put(self, key : B, value : A) -> bool:
        return self._relation.put(value, key)

    def put_all_keys(self, keys : Optional[Iterable[B]], value : A) -> bool:
        return self._relation.put_all_values(value, keys)

    def put_all_values(self, key : B, values : Optional[Iterable[A]]) -> bool:
        return self._relation.put_all_keys(values, key)

    def put_all(self, keys : Optional[Iterable[B]], values : Optional[Iterable[A]]) -> bool:
        return self._relation.put_all(values, keys)

    # Removal
    def remove(self, key : B, value : A) -> bool:
        return self._relation.remove(value, key)

    def remove_key(self, key : B) -> set[A]:
        return self._relation.remove_value(key)

    def remove_keys(self, keys : Optional[Iterable[B]]) -> set[A]:
        return self._relation.remove_values(keys)

    def remove_value(self, value : A) -> set[B]:
        return self._relation.remove_key(value)

    def remove_values(self, values : Optional[Iterable[A]]) -> set[B]:
        return self._relation.remove_keys(values)

    def clear(self) -> None:
        self._relation.clear()

# Immutable (snapshotting) view
class ImmutableView(Relation[A, B]):
    '''
    Read-only wrapper around a relation

    The size, entirety, and surjectivity of the wrapped relation are captured ONCE, when the view is made,
    while all element-level queries (keys, values, membership, iteration) are forwarded live;
    if the wrapped relation is modified afterwards, the view can therefore report a size
    which disagrees with its own keys() - wrap only relations which will no longer change
    '''
    def __init__(self, relation : Relation[A, B]) -> None:
        self._relation = relation
        self._size = relation.size
        self._entire = relation.is_entire
        self._surjective = relation.is_surjective
        LOGGER.debug(f'Snapshot {relation.__class__.__name__} of size {self._size} into {self.__class__.__name__}')

    # Getters
    @property
    def size(self) -> int:
        return self._size

    @property
    def domain_type(self) -> Domain[A]:
        return self._relation.domain_type

    @property
    def range_type(self) -> Domain[B]:
        return self._relation.range_type

    def keys(self) -> AbstractSet[A]:
        return self._relation.keys()

    def values(self) -> AbstractSet[B]:
        return self._relation.values()

    def keys_of(self, value : B) -> AbstractSet[A]:
        return self._relation.keys_of(value)

    def values_of(self, key : A) -> AbstractSet[B]:
        return self._relation.values_of(key)

    def key_of(self, value : B) -> Optional[A]:
        return self._relation.key_of(value)

    def value_of(self, key : A) -> Optional[B]:
        return self._relation.value_of(key)

    def keys_for(self, values : Optional[Iterable[B]]) -> AbstractSet[A]:
        return self._relation.keys_for(values)

    def values_for(self, keys : Optional[Iterable[A]]) -> AbstractSet[B]:
        return self._relation.values_for(keys)

    def __iter__(self) -> ReadOnlyCursor[A, B]:
        return ReadOnlyCursor(iter(self._relation))

    # Predicates
    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def is_simple(self) -> bool:
        return self._relation.is_simple

    @property
    def is_injective(self) -> bool:
        return self._relation.is_injective

    @property
    def is_entire(self) -> bool:
        return self._entire

    @property
    def is_surjective(self) -> bool:
        return self._surjective

    def contains(self, key : A, value : B) -> bool:
        return self._relation.contains(key, value)

    def contains_key(self, key : A) -> bool:
        return self._relation.contains_key(key)

    def contains_value(self, value : B) -> bool:
        return self._relation.contains_value(value)

    # Mutation is refused outright
    def _refuse(self, *args, **kwargs) -> NoReturn:
        raise ImmutabilityError(f'{self.__class__.__name__} is read-only; arrows can be neither inserted nor removed')

    put = put_all_keys = put_all_values = put_all = _refuse
    remove = remove_key = remove_keys = remove_value = remove_values = clear = _refuse

# Empty relation
class EmptyRelation(Relation[A, B]):
    '''
    The relation with no arrows at all (the "bottom" of the lattice of relations)
    Cheap to construct; make a new one wherever an empty relation is needed
    '''
    def __init__(
        self,
        domain_type : Optional[Domain[A]]=None,
        range_type : Optional[Domain[B]]=None,
    ) -> None:
        self._domain_type = domain_type if (domain_type is not None) else Domain()
        self._range_type = range_type if (range_type is not None) else Domain()

    @property
    def size(self) -> int:
        return 0

    @property
    def domain_type(self) -> Domain[A]:
        return self._domain_type

    @property
    def range_type(self) -> Domain[B]:
        return self._range_type

    def keys(self) -> AbstractSet[A]:
        return read_only(None)

    def values(self) -> AbstractSet[B]:
        return read_only(None)

    def keys_of(self, value : B) -> AbstractSet[A]:
        return read_only(None)

    def values_of(self, key : A) -> AbstractSet[B]:
        return read_only(None)

    def __iter__(self) -> ReadOnlyCursor[A, B]:
        return ReadOnlyCursor(iter(()))

    @property
    def is_simple(self) -> bool:
        return True

    @property
    def is_injective(self) -> bool:
        return True

    @property
    def is_entire(self) -> bool:
        return False

    @property
    def is_surjective(self) -> bool:
        return False
