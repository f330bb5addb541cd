'''
Operators of the relational calculus, which combine relations into new ones

Every operator treats a missing (None) relation as though it were empty, and never modifies its operands;
results are freshly-allocated stores (or views over fresh stores), independent of the operands
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Hashable,
    Iterable,
    Optional,
    TypeVar,
)

from .base import Relation, MutableRelation
from .domains import Domain
from .general import GeneralRelation
from .functional import FunctionalRelation
from .bijective import BijectiveRelation
from .views import ConverseView, MutableConverseView, ImmutableView, EmptyRelation
from ..mutils.iteration import non_null
from ..mutils.setutils import cartesian_pairs

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)
C = TypeVar('C', bound=Hashable)

_SQUARE = object() # marks a second collection which was never passed, as opposed to one passed as None

# Helpers
def _present(r : Optional[Relation[A, B]], operation : str) -> Relation[A, B]:
    '''Substitute an empty relation for a missing one'''
    if r is None:
        LOGGER.warning(f'No relation passed to {operation}(); treating missing operand as empty')
        return EmptyRelation()
    return r

def _shaped_store(
    simple : bool,
    injective : bool,
    domain_type : Domain[A],
    range_type : Domain[B],
) -> MutableRelation[A, B]:
    '''
    Cheapest empty store able to hold a relation with the given structural properties:
    * simple and injective -> bijective store
    * simple only -> functional store
    * injective only -> converse view of a functional store from the range to the domain
    * neither -> general store
    '''
    if simple and injective:
        store = BijectiveRelation(domain_type=domain_type, range_type=range_type)
    elif simple:
        store = FunctionalRelation(domain_type=domain_type, range_type=range_type)
    elif injective:
        store = MutableConverseView(FunctionalRelation(domain_type=range_type, range_type=domain_type))
    else:
        store = GeneralRelation(domain_type=domain_type, range_type=range_type)
    LOGGER.debug(f'Selected {store.__class__.__name__} representation (simple={simple}, injective={injective})')

    return store

# Copying and converses
def copy(r : Optional[Relation[A, B]]) -> GeneralRelation[A, B]:
    '''Independent general-store copy of a relation, with the same domain types'''
    r = _present(r, 'copy')
    clone = GeneralRelation(domain_type=r.domain_type, range_type=r.range_type)
    for key in r.keys():
        clone.put_all_values(key, r.values_of(key))

    return clone

def converse_view(r : Optional[Relation[A, B]]) -> Relation[B, A]:
    '''
    Zero-copy converse of a relation, which stays live with respect to it
    The view is writable whenever the relation itself is; taking the converse of a converse view returns the original relation
    '''
    r = _present(r, 'converse_view')
    if isinstance(r, ConverseView):
        return r.converse
    if isinstance(r, MutableRelation):
        return MutableConverseView(r)
    return ConverseView(r)

def converse(r : Optional[Relation[A, B]]) -> MutableRelation[B, A]:
    '''Converse of an independent copy of a relation; modifying the result leaves the original untouched'''
    return MutableConverseView(copy(r))

# Composition
def compose(
    r1 : Optional[Relation[A, B]],
    r2 : Optional[Relation[B, C]],
    optimize : bool=False,
) -> MutableRelation[A, C]:
    '''
    Relational composition of r1 followed by r2: (a, c) is related iff (a, b) is in r1 and (b, c) is in r2 for some b

    Parameters
    ----------
    r1 : Relation[A, B]
        The relation applied first
    r2 : Relation[B, C]
        The relation applied second, whose keys are matched against values of r1
    optimize : bool, default False
        Whether to hold the result in the cheapest store compatible with the simplicity and injectivity of the operands;
        only the storage shape is affected, never which arrows are in the result

    Returns
    -------
    composite : MutableRelation[A, C]
        A new relation from the domain type of r1 to the range type of r2
    '''
    r1 = _present(r1, 'compose')
    r2 = _present(r2, 'compose')

    if optimize:
        composite = _shaped_store(
            simple=(r1.is_simple and r2.is_simple),
            injective=(r1.is_injective and r2.is_injective),
            domain_type=r1.domain_type,
            range_type=r2.range_type,
        )
    else:
        composite = GeneralRelation(domain_type=r1.domain_type, range_type=r2.range_type)

    for a in r1.keys():
        for b in r1.values_of(a):
            if r2.contains_key(b):
                composite.put_all_values(a, r2.values_of(b))

    return composite

def kernel(r : Optional[Relation[A, B]]) -> MutableRelation[A, A]:
    '''Relates pairs of keys of r which share at least one common value'''
    r = _present(r, 'kernel')
    if r.is_empty:
        return GeneralRelation(domain_type=r.domain_type, range_type=r.domain_type)
    return compose(r, converse_view(r))

def image(r : Optional[Relation[A, B]]) -> MutableRelation[B, B]:
    '''Relates pairs of values of r which share at least one common key'''
    r = _present(r, 'image')
    if r.is_empty:
        return GeneralRelation(domain_type=r.range_type, range_type=r.range_type)
    return compose(converse_view(r), r)

# Division and implication
def divide(r1 : Optional[Relation[C, A]], r2 : Optional[Relation[C, B]]) -> MutableRelation[B, A]:
    '''
    Right division r1 / r2, an approximate inverse of composition;
    (b, a) is related iff b is a value of r2 and a is a value of r1, and
    every key k of r2 related to b is also related to a in r1
    '''
    r1 = _present(r1, 'divide')
    r2 = _present(r2, 'divide')

    quotient = GeneralRelation(domain_type=r2.range_type, range_type=r1.range_type)
    for b in r2.values():
        preimage = r2.keys_of(b)
        for a in r1.values():
            if all(r1.contains(k, a) for k in preimage):
                quotient.put(b, a)

    return quotient

def divide_left(r1 : Optional[Relation[A, C]], r2 : Optional[Relation[B, C]]) -> MutableRelation[B, A]:
    '''
    Left division r1 \\ r2; (b, a) is related iff a is a key of r1 and b is a key of r2,
    and every value reachable from a in r1 is also reachable from b in r2
    '''
    r1 = _present(r1, 'divide_left')
    r2 = _present(r2, 'divide_left')

    quotient = GeneralRelation(domain_type=r2.domain_type, range_type=r1.domain_type)
    for a in r1.keys():
        image_of_a = r1.values_of(a)
        for b in r2.keys():
            if all(r2.contains(b, v) for v in image_of_a):
                quotient.put(b, a)

    return quotient

def imply(r1 : Optional[Relation[A, B]], r2 : Optional[Relation]) -> MutableRelation[A, B]:
    '''The arrows of r1 which are also present in r2, over the domain types of r1'''
    r1 = _present(r1, 'imply')
    r2 = _present(r2, 'imply')

    implied = GeneralRelation(domain_type=r1.domain_type, range_type=r1.range_type)
    for key in r1.keys():
        for value in r1.values_of(key):
            if r2.contains(key, value):
                implied.put(key, value)

    return implied

# Relation constructors
def top(
    firsts : Optional[Iterable[A]],
    seconds : Optional[Iterable[B]]=_SQUARE,
) -> MutableRelation[A, B]:
    '''
    The Cartesian product relation, relating every one of the firsts to every one of the seconds
    If only one collection is given, it is related to itself; a missing (None) collection yields an empty relation
    '''
    product = GeneralRelation()
    if (firsts is None) or (seconds is None):
        return product

    pairs = cartesian_pairs(firsts) if (seconds is _SQUARE) else cartesian_pairs(firsts, seconds)
    for a, b in pairs:
        product.put(a, b)

    return product

def identity(elements : Optional[Iterable[A]]) -> MutableRelation[A, A]:
    '''The diagonal relation, relating every one of the given elements to itself'''
    diagonal = GeneralRelation()
    for element in non_null(elements):
        diagonal.put(element, element)

    return diagonal

# Freezing
def immutable(r : Optional[Relation[A, B]]) -> Relation[A, B]:
    '''
    Read-only relation equal to r, held in the cheapest store matching the simplicity and injectivity of r
    Since the arrows are copied, later changes to r are NOT reflected in the result
    '''
    r = _present(r, 'immutable')
    frozen = _shaped_store(
        simple=r.is_simple,
        injective=r.is_injective,
        domain_type=r.domain_type,
        range_type=r.range_type,
    )
    for key in r.keys():
        frozen.put_all_values(key, r.values_of(key))

    return ImmutableView(frozen)
