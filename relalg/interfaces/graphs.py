'''Conversion of relations to and from bipartite NetworkX graphs, and depiction thereof'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Any,
    Callable,
    Hashable,
    Optional,
    TypeAlias,
    TypeVar,
)

from numpy import ndarray
import networkx as nx
from matplotlib.axes import Axes

from ..relations.base import Relation, MutableRelation
from ..relations.general import GeneralRelation

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)

GraphLayout : TypeAlias = Callable[[nx.Graph], dict[Hashable, ndarray]]

SIDE_ATTR : str = 'side' # node attribute recording which side of the relation a node belongs to
KEY_SIDE : str = 'key'
VALUE_SIDE : str = 'value'


def key_node(key : A) -> tuple[str, A]:
    '''Graph node standing for a key of a relation'''
    return (KEY_SIDE, key)

def value_node(value : B) -> tuple[str, B]:
    '''Graph node standing for a value of a relation'''
    return (VALUE_SIDE, value)

def relation_to_graph(r : Relation[A, B]) -> nx.DiGraph:
    '''
    Represent a relation as a directed bipartite graph

    Every key k and value v become nodes (KEY_SIDE, k) and (VALUE_SIDE, v) respectively, tagged with
    their side under the SIDE_ATTR node attribute, and every arrow (k, v) becomes an edge between them
    '''
    graph = nx.DiGraph()
    graph.add_nodes_from((key_node(key) for key in r.keys()), **{SIDE_ATTR : KEY_SIDE})
    graph.add_nodes_from((value_node(value) for value in r.values()), **{SIDE_ATTR : VALUE_SIDE})
    graph.add_edges_from(
        (key_node(key), value_node(value))
            for key in r.keys()
                for value in r.values_of(key)
    )
    LOGGER.debug(f'Converted {r.__class__.__name__} with {r.size} arrows into bipartite graph')

    return graph

def relation_from_graph(
    graph : nx.DiGraph,
    relation_type : type[MutableRelation]=GeneralRelation,
) -> MutableRelation[Any, Any]:
    '''
    Recover a relation from a bipartite graph laid out as by relation_to_graph()
    Edges which do not lead from a key node to a value node are ignored
    '''
    relation = relation_type()
    n_skipped : int = 0
    for src, dst in graph.edges:
        if (graph.nodes[src].get(SIDE_ATTR) != KEY_SIDE) or (graph.nodes[dst].get(SIDE_ATTR) != VALUE_SIDE):
            n_skipped += 1
            continue
        _, key = src
        _, value = dst
        relation.put(key, value)

    if n_skipped > 0:
        LOGGER.warning(f'Ignored {n_skipped} edge(s) which did not lead from a key node to a value node')

    return relation

def visualize_relation(
    r : Relation[A, B],
    ax : Optional[Axes]=None,
    layout : Optional[GraphLayout]=None,
    **draw_kwargs,
) -> None:
    '''
    Draw a relation as a bipartite graph, with keys in one column and values in the other
    '''
    graph = relation_to_graph(r)
    if layout is None:
        positions = nx.bipartite_layout(graph, nodes=[key_node(key) for key in r.keys()])
    else:
        positions = layout(graph)

    if 'with_labels' not in draw_kwargs:
        draw_kwargs['with_labels'] = True
    if 'labels' not in draw_kwargs:
        draw_kwargs['labels'] = {node : str(node[1]) for node in graph.nodes}

    nx.draw(
        graph,
        ax=ax,
        pos=positions,
        **draw_kwargs,
    )
