'''Ordered pairs, i.e. the individual arrows which make up a relation'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import ClassVar, Generic, Iterator, TypeVar, Union
from dataclasses import dataclass

A = TypeVar('A')
B = TypeVar('B')


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    '''An immutable 2-tuple (first, second), compared and hashed by value'''
    ARITY : ClassVar[int] = 2

    first : A
    second : B

    @property
    def arity(self) -> int:
        '''Number of components in the tuple (always 2)'''
        return self.ARITY

    def swapped(self) -> 'Pair[B, A]':
        '''The pair with its components exchanged, i.e. (second, first)'''
        return Pair(self.second, self.first)

    def __iter__(self) -> Iterator[Union[A, B]]:
        # allows unpacking as "key, value = pair"
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f'({self.first!s},{self.second!s})'
