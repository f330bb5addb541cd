'''Binary relations: dual-indexed stores, zero-copy views, and the operators of the relational calculus'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .pair import Pair
from .domains import (
    Cardinal,
    Domain,
    DomainEnumerator,
    NullEnumerator,
    FiniteEnumerator,
    CardinalityError,
    NegativeCardinalityError,
    InfiniteCardinalityError,
    MissingCollectionError,
)
from .base import (
    Relation,
    MutableRelation,
    RelationError,
    MAX_REPORTED_SIZE,
    EMPTY_RELATION_HASH,
)
from .cursor import (
    RelationCursor,
    CursorStateError,
    ConcurrentModificationError,
)
from .general import GeneralRelation
from .functional import FunctionalRelation
from .bijective import BijectiveRelation
from .views import (
    ConverseView,
    MutableConverseView,
    ImmutableView,
    EmptyRelation,
)
from . import algebra
