'''Interfaces between relations and external representations (NetworkX graphs and numpy matrices)'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'


from .graphs import (
    SIDE_ATTR,
    KEY_SIDE,
    VALUE_SIDE,
    key_node,
    value_node,
    relation_to_graph,
    relation_from_graph,
    visualize_relation,
)
from .matrices import (
    relation_to_matrix,
    relation_from_matrix,
    compose_matrices,
)
