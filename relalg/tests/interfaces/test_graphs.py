'''Unit tests for conversion between relations and NetworkX graphs'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest

import matplotlib
matplotlib.use('Agg') # headless backend, no display needed
import matplotlib.pyplot as plt

import networkx as nx

from relalg.relations import GeneralRelation, FunctionalRelation
from relalg.interfaces.graphs import (
    SIDE_ATTR,
    KEY_SIDE,
    VALUE_SIDE,
    key_node,
    value_node,
    relation_to_graph,
    relation_from_graph,
    visualize_relation,
)


@pytest.fixture(scope='function')
def rel() -> GeneralRelation[int, int]:
    '''Relation whose keys and values overlap, to check the two sides are kept apart'''
    return GeneralRelation([(1, 2), (2, 3), (1, 3)])

def test_graph_is_bipartite(rel : GeneralRelation[int, int]) -> None:
    '''Test that keys and values become distinct nodes, one per side, joined by one edge per arrow'''
    graph = relation_to_graph(rel)

    assert graph.number_of_nodes() == len(rel.keys()) + len(rel.values())
    assert graph.number_of_edges() == rel.size
    assert graph.has_edge(key_node(1), value_node(2))
    assert nx.is_bipartite(graph)

def test_graph_sides_labelled(rel : GeneralRelation[int, int]) -> None:
    '''Test that every node records which side of the relation it came from'''
    graph = relation_to_graph(rel)
    sides = nx.get_node_attributes(graph, SIDE_ATTR)

    assert sides[key_node(2)] == KEY_SIDE
    assert sides[value_node(2)] == VALUE_SIDE

def test_graph_round_trip(rel : GeneralRelation[int, int]) -> None:
    '''Test that a relation recovered from its graph holds the same arrows'''
    assert relation_from_graph(relation_to_graph(rel)) == rel

def test_graph_round_trip_relation_type() -> None:
    '''Test that relations can be recovered into a store of a chosen type'''
    source = FunctionalRelation([('a', 1), ('b', 1)])
    recovered = relation_from_graph(relation_to_graph(source), relation_type=FunctionalRelation)

    assert isinstance(recovered, FunctionalRelation) and (recovered == source)

def test_graph_stray_edges_ignored(rel : GeneralRelation[int, int]) -> None:
    '''Test that edges leading from values back to keys are not read as arrows'''
    graph = relation_to_graph(rel)
    graph.add_edge(value_node(3), key_node(1))

    assert relation_from_graph(graph) == rel

def test_visualize_relation(rel : GeneralRelation[int, int]) -> None:
    '''Test that a relation can be drawn onto a given set of axes'''
    fig, ax = plt.subplots()
    visualize_relation(rel, ax=ax, node_color='lightgray')

    assert len(ax.collections) > 0
    plt.close(fig)
