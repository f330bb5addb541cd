'''Conversion between relations and boolean adjacency matrices, for bulk numerical work'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Hashable,
    Optional,
    Sequence,
    TypeVar,
)

import numpy as np
from numpy import ndarray

from ..relations.base import Relation, MutableRelation
from ..relations.general import GeneralRelation

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


def relation_to_matrix(
    r : Relation[A, B],
    keys : Optional[Sequence[A]]=None,
    values : Optional[Sequence[B]]=None,
) -> tuple[ndarray, list[A], list[B]]:
    '''
    Represent a relation as a boolean matrix M, with M[i, j] True iff (keys[i], values[j]) is an arrow

    Parameters
    ----------
    r : Relation[A, B]
        The relation to tabulate
    keys : Sequence[A], optional
        Row labels; if not given, the keys of r are used in their iteration order
    values : Sequence[B], optional
        Column labels; if not given, the values of r are used in their iteration order

    Returns
    -------
    matrix : ndarray of bool, shape (len(keys), len(values))
        The adjacency matrix of the relation
    keys : list[A]
        The key labelling each row
    values : list[B]
        The value labelling each column

    Arrows whose key or value is not among the given labels are left out of the matrix
    '''
    keys = list(r.keys()) if (keys is None) else list(keys)
    values = list(r.values()) if (values is None) else list(values)
    value_idxs : dict[B, int] = {value : j for j, value in enumerate(values)}

    matrix = np.zeros((len(keys), len(values)), dtype=bool)
    for i, key in enumerate(keys):
        for value in r.values_of(key):
            j = value_idxs.get(value)
            if j is not None:
                matrix[i, j] = True
    LOGGER.debug(f'Tabulated {r.__class__.__name__} as {matrix.shape} adjacency matrix with {matrix.sum()} arrows')

    return matrix, keys, values

def relation_from_matrix(
    matrix : ndarray,
    keys : Sequence[A],
    values : Sequence[B],
    relation_type : type[MutableRelation]=GeneralRelation,
) -> MutableRelation[A, B]:
    '''Build a relation from a boolean matrix whose rows and columns are labelled by the given keys and values'''
    matrix = np.asarray(matrix, dtype=bool)
    if matrix.ndim != 2:
        raise ValueError(f'Adjacency matrix must be 2-dimensional, not {matrix.ndim}-dimensional')
    if matrix.shape != (len(keys), len(values)):
        raise ValueError(f'Matrix of shape {matrix.shape} cannot be labelled by {len(keys)} keys and {len(values)} values')

    relation = relation_type()
    for i, j in np.argwhere(matrix):
        relation.put(keys[i], values[j])

    return relation

def compose_matrices(m1 : ndarray, m2 : ndarray) -> ndarray:
    '''
    Composition of two relations given as boolean adjacency matrices
    Equivalent to a boolean matrix product, i.e. (m1 @ m2)[i, k] is True iff m1[i, j] and m2[j, k] for some j
    '''
    m1 = np.asarray(m1, dtype=bool)
    m2 = np.asarray(m2, dtype=bool)
    if (m1.ndim != 2) or (m2.ndim != 2):
        raise ValueError('Can only compose 2-dimensional adjacency matrices')
    if m1.shape[1] != m2.shape[0]:
        raise ValueError(f'Cannot compose adjacency matrices of mismatched shapes {m1.shape} and {m2.shape}')

    return (m1.astype(int) @ m2.astype(int)) > 0
