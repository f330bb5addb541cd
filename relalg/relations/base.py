'''
Contracts shared by every binary relation, whether a concrete store or a view onto one

The algorithms common to all relations (containment, equality, hashing, rendering) are written
once as free functions over the read-only contract, and mixed into the abstract classes below
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import sys
from typing import (
    AbstractSet,
    Any,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)
from abc import ABC, abstractmethod

from .pair import Pair
from .domains import Domain
from ..mutils.iteration import non_null, sole_element
from ..mutils.setutils import read_only, union

A = TypeVar('A', bound=Hashable) # domain (key) type
B = TypeVar('B', bound=Hashable) # range (value) type

MAX_REPORTED_SIZE : int = sys.maxsize # relation sizes are reported capped to this count
EMPTY_RELATION_HASH : int = 19 # reserved hash for relations whose arrows combine to nothing


# Custom Exceptions
class RelationError(Exception):
    '''Base for errors raised by relations, their views, and their cursors'''
    pass

# Shared algorithms
def is_subrelation(r : 'Relation', s : Optional['Relation']) -> bool:
    '''Whether every arrow of relation r is also present in relation s'''
    if r is s:
        return True
    if not isinstance(s, Relation):
        return False
    if r.size > s.size: # can't possibly fit
        return False

    for key in r.keys():
        for value in r.values_of(key):
            if not s.contains(key, value):
                return False
    return True

def is_strict_subrelation(r : 'Relation', s : Optional['Relation']) -> bool:
    '''Whether r is contained in s, and s has at least one arrow r does not'''
    if not isinstance(s, Relation):
        return False
    return is_subrelation(r, s) and (r.size < s.size)

def relations_equal(r : 'Relation', s : Any) -> bool:
    '''Whether two relations hold exactly the same arrows'''
    if r is s:
        return True
    if not isinstance(s, Relation):
        return False
    return is_subrelation(r, s) and is_subrelation(s, r)

def relation_hash(r : 'Relation') -> int:
    '''
    Order-independent hash of the arrows of a relation, consistent with relations_equal()

    Combines (hash(key) XOR hash(value)) over all arrows by summation; an empty relation,
    or one whose arrows happen to combine to zero, hashes to EMPTY_RELATION_HASH instead
    '''
    combined = 0
    for key in r.keys():
        key_hash = hash(key)
        for value in r.values_of(key):
            combined += key_hash ^ hash(value)

    combined = hash(combined) # fold back down into the range of machine-sized hashes
    if combined == 0:
        return EMPTY_RELATION_HASH
    return combined

def relation_str(r : 'Relation') -> str:
    '''Human-readable rendering of a relation as "{(k1,v1),(k2,v2),...}", grouped by key'''
    return '{' + ','.join(
        f'({key!s},{value!s})'
            for key in r.keys()
                for value in r.values_of(key)
    ) + '}'

# Read-only contract
class Relation(ABC, Generic[A, B]):
    '''
    Representation of a binary relation from a domain type A to a range type B,
    i.e. a set of arrows (key, value) with key drawn from A and value drawn from B

    Relations never hold None as a key or value; querying with None is not an error,
    but always reports absence (False, None, or an empty set)
    '''
    # Getters
    @property
    @abstractmethod
    def size(self) -> int:
        '''Number of arrows present in the relation'''
        ...

    @abstractmethod
    def keys(self) -> AbstractSet[A]:
        '''Read-only set of all keys present in the relation'''
        ...

    @abstractmethod
    def values(self) -> AbstractSet[B]:
        '''Read-only set of all values present in the relation'''
        ...

    @abstractmethod
    def keys_of(self, value : B) -> AbstractSet[A]:
        '''Read-only set of keys related to the given value (empty if the value is absent)'''
        ...

    @abstractmethod
    def values_of(self, key : A) -> AbstractSet[B]:
        '''Read-only set of values related to the given key (empty if the key is absent)'''
        ...

    def key_of(self, value : B) -> Optional[A]:
        '''The only key related to the given value, or None if there are none or several'''
        return sole_element(self.keys_of(value))

    def value_of(self, key : A) -> Optional[B]:
        '''The only value related to the given key, or None if there are none or several'''
        return sole_element(self.values_of(key))

    def keys_for(self, values : Optional[Iterable[B]]) -> AbstractSet[A]:
        '''Union (NOT intersection) of the keys related to each of the given values'''
        return read_only(union(*(self.keys_of(value) for value in non_null(values))))

    def values_for(self, keys : Optional[Iterable[A]]) -> AbstractSet[B]:
        '''Union (NOT intersection) of the values related to each of the given keys'''
        return read_only(union(*(self.values_of(key) for key in non_null(keys))))

    @property
    @abstractmethod
    def domain_type(self) -> Domain[A]:
        '''The Domain that the keys of this relation are drawn from'''
        ...

    @property
    @abstractmethod
    def range_type(self) -> Domain[B]:
        '''The Domain that the values of this relation are drawn from'''
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Pair[A, B]]:
        ...

    def __len__(self) -> int:
        return self.size

    # Predicates
    @property
    def is_empty(self) -> bool:
        '''Whether the relation has no arrows'''
        return self.size == 0

    def contains(self, key : A, value : B) -> bool:
        '''Whether the arrow (key, value) is present in the relation'''
        if (key is None) or (value is None):
            return False
        return value in self.values_of(key)

    def contains_key(self, key : A) -> bool:
        '''Whether the relation has any arrow from the given key'''
        if key is None:
            return False
        return len(self.values_of(key)) > 0

    def contains_value(self, value : B) -> bool:
        '''Whether the relation has any arrow to the given value'''
        if value is None:
            return False
        return len(self.keys_of(value)) > 0

    def __contains__(self, arrow : Any) -> bool:
        '''Support for "(key, value) in relation", with either tuples or Pairs'''
        if isinstance(arrow, Pair):
            return self.contains(arrow.first, arrow.second)
        if isinstance(arrow, tuple) and (len(arrow) == 2):
            return self.contains(*arrow)
        return False

    ## structural properties
    @property
    @abstractmethod
    def is_simple(self) -> bool:
        '''Whether every key has at most one value (i.e. the relation is a partial function)'''
        ...

    @property
    @abstractmethod
    def is_injective(self) -> bool:
        '''Whether every value has at most one key'''
        ...

    @property
    @abstractmethod
    def is_entire(self) -> bool:
        '''Whether every member of the domain type appears as a key'''
        ...

    @property
    @abstractmethod
    def is_surjective(self) -> bool:
        '''Whether every member of the range type appears as a value'''
        ...

    ## containment
    def is_in(self, other : Optional['Relation']) -> bool:
        '''Whether every arrow of this relation is also present in the other'''
        return is_subrelation(self, other)

    def strictly_in(self, other : Optional['Relation']) -> bool:
        '''Whether this relation is contained in, but not equal to, the other'''
        return is_strict_subrelation(self, other)

    def __le__(self, other : Any) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.is_in(other)

    def __lt__(self, other : Any) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.strictly_in(other)

    # Equality, hashing, and depiction
    def __eq__(self, other : Any) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return relations_equal(self, other)

    def __hash__(self) -> int:
        return relation_hash(self)

    def __str__(self) -> str:
        return relation_str(self)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self!s})'

# Mutable contract
class MutableRelation(Relation[A, B]):
    '''
    A relation whose arrows can be inserted and removed after creation

    Bulk operations skip None members of the collections they are given,
    rather than aborting partway through
    '''
    # Insertion
    @abstractmethod
    def put(self, key : A, value : B) -> bool:
        '''Insert the arrow (key, value); returns whether the relation was modified'''
        ...

    def put_all_keys(self, keys : Optional[Iterable[A]], value : B) -> bool:
        '''Insert arrows from each of the given keys to the given value'''
        if (keys is None) or (value is None):
            return False

        modified = False
        for key in non_null(keys):
            modified |= self.put(key, value)
        return modified

    def put_all_values(self, key : A, values : Optional[Iterable[B]]) -> bool:
        '''Insert arrows from the given key to each of the given values'''
        if (key is None) or (values is None):
            return False

        modified = False
        for value in non_null(values):
            modified |= self.put(key, value)
        return modified

    def put_all(self, keys : Optional[Iterable[A]], values : Optional[Iterable[B]]) -> bool:
        '''Insert arrows from every one of the given keys to every one of the given values'''
        if (keys is None) or (values is None):
            return False

        values = tuple(non_null(values)) # will be traversed once per key
        modified = False
        for key in non_null(keys):
            for value in values:
                modified |= self.put(key, value)
        return modified

    # Removal
    @abstractmethod
    def remove(self, key : A, value : B) -> bool:
        '''Remove the arrow (key, value); returns whether the relation was modified'''
        ...

    @abstractmethod
    def remove_key(self, key : A) -> set[B]:
        '''Remove all arrows from the given key, returning the values those arrows led to'''
        ...

    @abstractmethod
    def remove_value(self, value : B) -> set[A]:
        '''Remove all arrows to the given value, returning the keys those arrows came from'''
        ...

    def remove_keys(self, keys : Optional[Iterable[A]]) -> set[B]:
        '''Remove all arrows from each of the given keys, returning the union of their values'''
        return union(*[self.remove_key(key) for key in non_null(keys)])

    def remove_values(self, values : Optional[Iterable[B]]) -> set[A]:
        '''Remove all arrows to each of the given values, returning the union of their keys'''
        return union(*[self.remove_value(value) for value in non_null(values)])

    @abstractmethod
    def clear(self) -> None:
        '''Remove every arrow from the relation'''
        ...
