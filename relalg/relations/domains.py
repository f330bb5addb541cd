'''
Cardinalities and domain types, which decide whether a collection
of keys or values exhausts the entire set of conceivable elements
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    AbstractSet,
    ClassVar,
    Generic,
    Hashable,
    Iterable,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)
from abc import ABC, abstractmethod

from ..mutils.setutils import difference

T = TypeVar('T', bound=Hashable)


# Custom Exceptions
class CardinalityError(ValueError):
    '''Raised when a cardinality is constructed or queried in an invalid manner'''
    pass

class NegativeCardinalityError(CardinalityError):
    '''Raised when attempting to create a finite cardinality from a negative count'''
    pass

class InfiniteCardinalityError(CardinalityError):
    '''Raised when requesting the finite count of an infinite cardinality'''
    pass

class MissingCollectionError(TypeError):
    '''Raised when a collection (or other structurally-required object) is None'''
    pass

# Cardinalities
class Cardinal(ABC):
    '''The (possibly infinite) size of a set'''
    @classmethod
    def of(cls, value : int) -> 'Cardinal':
        '''The cardinality of a finite set with the given number of members'''
        if value < 0:
            raise NegativeCardinalityError(f'Cardinality must be non-negative, not {value}')
        return FiniteCardinal(value)

    @classmethod
    def of_naturals(cls) -> 'Cardinal':
        '''The cardinality of the natural numbers, Aleph-null'''
        return CountableInfinity()

    @classmethod
    def of_reals(cls) -> 'Cardinal':
        '''The cardinality of the continuum'''
        return Continuum()

    @property
    @abstractmethod
    def is_finite(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_countable(self) -> bool:
        ...

    @abstractmethod
    def value(self) -> int:
        '''The finite number of members counted by this cardinality'''
        ...

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self!s})'

class FiniteCardinal(Cardinal):
    '''Cardinality of a set with finitely many members'''
    def __init__(self, value : int) -> None:
        if value < 0:
            raise NegativeCardinalityError(f'Cardinality must be non-negative, not {value}')
        self._value = value

    @property
    def is_finite(self) -> bool:
        return True

    @property
    def is_countable(self) -> bool:
        return True

    def value(self) -> int:
        return self._value

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return isinstance(other, FiniteCardinal) and (self._value == other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

class CountableInfinity(Cardinal):
    '''Cardinality of the natural numbers'''
    @property
    def is_finite(self) -> bool:
        return False

    @property
    def is_countable(self) -> bool:
        return True

    def value(self) -> int:
        raise InfiniteCardinalityError('Countably infinite cardinality has no finite value')

    def __str__(self) -> str:
        return 'N0'

class Continuum(Cardinal):
    '''Cardinality of the real numbers'''
    @property
    def is_finite(self) -> bool:
        return False

    @property
    def is_countable(self) -> bool:
        return False

    def value(self) -> int:
        raise InfiniteCardinalityError('Uncountable cardinality has no finite value')

    def __str__(self) -> str:
        return 'C'

# Domain enumeration
@runtime_checkable
class DomainEnumerator(Protocol[T]):
    '''Knows the full extent of some type of element, and can tell whether a collection covers all of it'''
    @property
    def cardinality(self) -> Cardinal:
        ...

    def is_entire(self, elements : AbstractSet[T]) -> bool:
        ...

class NullEnumerator(Generic[T]):
    '''
    Enumerator for a type with no known extent
    Since its elements can never be exhausted, no collection is ever entire
    '''
    @property
    def cardinality(self) -> Cardinal:
        return Cardinal.of_naturals()

    def is_entire(self, elements : AbstractSet[T]) -> bool:
        if elements is None:
            raise MissingCollectionError('Cannot check entirety of a missing collection')
        return False

    def __eq__(self, other : object) -> bool:
        return isinstance(other, NullEnumerator)

    def __hash__(self) -> int:
        return 17

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

class FiniteEnumerator(Generic[T]):
    '''Enumerator for a type whose members are exactly those of some finite universe'''
    def __init__(self, universe : Iterable[T]) -> None:
        if universe is None:
            raise MissingCollectionError('Finite enumerator requires an explicit universe of elements')
        self._universe = frozenset(universe)

    @property
    def universe(self) -> frozenset[T]:
        '''Every element belonging to the domain'''
        return self._universe

    @property
    def cardinality(self) -> Cardinal:
        return Cardinal.of(len(self._universe))

    def is_entire(self, elements : AbstractSet[T]) -> bool:
        if elements is None:
            raise MissingCollectionError('Cannot check entirety of a missing collection')
        if len(elements) < len(self._universe): # pigeonhole shortcut
            return False
        return not difference(self._universe, elements)

    def __eq__(self, other : object) -> bool:
        return isinstance(other, FiniteEnumerator) and (self._universe == other._universe)

    def __hash__(self) -> int:
        return hash(self._universe)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({set(self._universe)!r})'

class Domain(Generic[T]):
    '''
    The type of elements found on one side (keys or values) of a relation

    Used by relations to decide whether they are entire (every conceivable key is present)
    or surjective (every conceivable value is present); which elements are conceivable is
    decided by the enumerator the Domain is built around, by default one which never reports entirety
    '''
    DEFAULT_ENUMERATOR : ClassVar[type] = NullEnumerator

    def __init__(self, enumerator : Optional[DomainEnumerator[T]]=None) -> None:
        if enumerator is None:
            enumerator = self.DEFAULT_ENUMERATOR()
        self._enumerator = enumerator

    @classmethod
    def over(cls, universe : Iterable[T]) -> 'Domain[T]':
        '''Domain whose members are exactly those of the given finite collection'''
        return cls(FiniteEnumerator(universe))

    @property
    def enumerator(self) -> DomainEnumerator[T]:
        return self._enumerator

    # entirety
    def is_entire(self, elements : AbstractSet[T]) -> bool:
        '''Whether the given collection contains every member of this domain'''
        if elements is None:
            raise MissingCollectionError('Cannot check entirety of a missing collection')
        return self._enumerator.is_entire(elements)

    # cardinality
    @property
    def cardinality(self) -> Cardinal:
        '''How many members this domain has'''
        return self._enumerator.cardinality

    @property
    def is_finite(self) -> bool:
        return self.cardinality.is_finite

    @property
    def is_countable(self) -> bool:
        return self.cardinality.is_countable

    def value(self) -> int:
        '''The finite number of members in this domain (fails for infinite domains)'''
        return self.cardinality.value()

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self._enumerator == other._enumerator

    def __hash__(self) -> int:
        return hash(self._enumerator)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._enumerator!r})'
