'''Unit tests for the operators of the relational calculus'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import logging

from relalg.mutils.containers import ImmutabilityError
from relalg.relations import (
    Domain,
    Relation,
    GeneralRelation,
    FunctionalRelation,
    BijectiveRelation,
    ConverseView,
    MutableConverseView,
    ImmutableView,
)
from relalg.relations import algebra


R1_ARROWS = [('a', 0), ('a', 1), ('a', 2), ('b', 1), ('c', 2)]
R2_ARROWS = [(0, 'A'), (1, 'A'), (1, 'B'), (3, 'X')]

@pytest.fixture(scope='function')
def r1() -> GeneralRelation[str, int]:
    return GeneralRelation(R1_ARROWS)

@pytest.fixture(scope='function')
def r2() -> GeneralRelation[int, str]:
    return GeneralRelation(R2_ARROWS)

# composition tests
def test_compose(r1 : GeneralRelation, r2 : GeneralRelation) -> None:
    '''Test composition against a hand-computed result'''
    expected = GeneralRelation([('a', 'A'), ('a', 'B'), ('b', 'A'), ('b', 'B')])
    assert algebra.compose(r1, r2) == expected

def test_compose_leaves_operands_intact(r1 : GeneralRelation, r2 : GeneralRelation) -> None:
    '''Test that composing relations does not modify them'''
    _ = algebra.compose(r1, r2)
    assert (r1 == GeneralRelation(R1_ARROWS)) and (r2 == GeneralRelation(R2_ARROWS))

def test_compose_associative(r1 : GeneralRelation, r2 : GeneralRelation) -> None:
    '''Test that composition is associative up to equality'''
    r3 = GeneralRelation([('A', True), ('B', False), ('X', True)])
    left = algebra.compose(algebra.compose(r1, r2), r3)
    right = algebra.compose(r1, algebra.compose(r2, r3))

    assert (left == right) and not left.is_empty

def test_compose_domain_types() -> None:
    '''Test that a composite relates the domain type of the first operand to the range type of the second'''
    first = GeneralRelation([(1, 'x')], domain_type=Domain.over({1}))
    second = GeneralRelation([('x', 9)], range_type=Domain.over({9, 10}))
    composite = algebra.compose(first, second)

    assert (composite.domain_type == first.domain_type) and (composite.range_type == second.range_type)
    assert composite.is_entire and not composite.is_surjective

@pytest.mark.parametrize(
    'first, second, expected_type',
    [
        (BijectiveRelation([(1, 'x'), (2, 'y')]), BijectiveRelation([('x', 'p'), ('y', 'q')]), BijectiveRelation),
        (FunctionalRelation([(1, 'x'), (2, 'x')]), FunctionalRelation([('x', 'p')]), FunctionalRelation),
        (GeneralRelation([(1, 'x'), (1, 'y')]), GeneralRelation([('x', 'p'), ('y', 'q')]), MutableConverseView),
        (GeneralRelation([(1, 'x'), (1, 'y')]), FunctionalRelation([('x', 'p'), ('y', 'p')]), GeneralRelation),
    ]
)
def test_compose_optimized_shape(first : Relation, second : Relation, expected_type : type) -> None:
    '''Test that optimized composition picks the cheapest representation, without affecting which arrows result'''
    optimized = algebra.compose(first, second, optimize=True)

    assert isinstance(optimized, expected_type)
    assert optimized == algebra.compose(first, second)

def test_compose_missing_operand(r1 : GeneralRelation, caplog : pytest.LogCaptureFixture) -> None:
    '''Test that a missing operand is treated as empty, and that a warning is issued about it'''
    with caplog.at_level(logging.WARNING, logger='relalg.relations.algebra'):
        composite = algebra.compose(r1, None)

    assert composite.is_empty
    assert any('compose' in record.getMessage() for record in caplog.records)

# kernel and image tests
def test_kernel(r1 : GeneralRelation) -> None:
    '''Test kernel against a hand-computed result'''
    expected = GeneralRelation([
        ('a', 'a'), ('a', 'b'), ('a', 'c'),
        ('b', 'a'), ('b', 'b'),
        ('c', 'a'), ('c', 'c'),
    ])
    assert algebra.kernel(r1) == expected

def test_image(r1 : GeneralRelation) -> None:
    '''Test that values sharing a common key are related'''
    assert algebra.image(r1) == algebra.top([0, 1, 2])

def test_kernel_image_of_empty() -> None:
    '''Test that kernel and image of an empty relation are empty and retain the appropriate domains'''
    domain, codomain = Domain.over({1}), Domain.over({'x'})
    empty = GeneralRelation(domain_type=domain, range_type=codomain)
    ker, img = algebra.kernel(empty), algebra.image(empty)

    assert ker.is_empty and (ker.domain_type == domain) and (ker.range_type == domain)
    assert img.is_empty and (img.domain_type == codomain) and (img.range_type == codomain)

# converse tests
def test_converse_involutive(r1 : GeneralRelation) -> None:
    '''Test that the converse of the converse has the same arrows as the original'''
    assert algebra.converse(algebra.converse(r1)) == r1

def test_converse_is_copy(r1 : GeneralRelation) -> None:
    '''Test that modifying a converse does not affect the relation it was taken from'''
    conv = algebra.converse(r1)
    conv.put(100, 'z')

    assert not r1.contains('z', 100) and conv.contains(100, 'z')

def test_converse_view_is_live(r1 : GeneralRelation) -> None:
    '''Test that a converse view tracks, and writes through to, the original relation'''
    conv = algebra.converse_view(r1)
    conv.put(100, 'z')

    assert r1.contains('z', 100)

def test_converse_view_unwraps(r1 : GeneralRelation) -> None:
    '''Test that the converse view of a converse view is the original relation itself'''
    assert algebra.converse_view(algebra.converse_view(r1)) is r1

def test_converse_view_of_read_only() -> None:
    '''Test that converse views of read-only relations are themselves read-only'''
    conv = algebra.converse_view(ImmutableView(GeneralRelation([(1, 'x')])))
    assert isinstance(conv, ConverseView) and not isinstance(conv, MutableConverseView)

def test_copy_is_general(r1 : GeneralRelation) -> None:
    '''Test that copies are independent general stores over the same domain types'''
    source = BijectiveRelation([(1, 'x')], domain_type=Domain.over({1, 2}))
    duplicate = algebra.copy(source)
    source.put(2, 'y')

    assert isinstance(duplicate, GeneralRelation) and (duplicate == GeneralRelation([(1, 'x')]))
    assert duplicate.domain_type == source.domain_type

# division and implication tests
def test_divide() -> None:
    '''Test right division against a hand-computed result'''
    r1 = GeneralRelation([('k1', 'a'), ('k2', 'a'), ('k1', 'b')])
    r2 = GeneralRelation([('k1', 'x'), ('k2', 'x'), ('k1', 'y')])

    assert algebra.divide(r1, r2) == GeneralRelation([('x', 'a'), ('y', 'a'), ('y', 'b')])

def test_divide_left() -> None:
    '''Test left division against a hand-computed result'''
    r1 = GeneralRelation([('k1', 'a'), ('k1', 'b'), ('k2', 'a')])
    r2 = GeneralRelation([('m', 'a'), ('m', 'b'), ('n', 'a')])

    assert algebra.divide_left(r1, r2) == GeneralRelation([('m', 'k1'), ('m', 'k2'), ('n', 'k2')])

def test_divide_by_empty() -> None:
    '''Test that dividing by an empty relation yields an empty result, since there are no values to divide over'''
    assert algebra.divide(GeneralRelation([(1, 'a')]), GeneralRelation()).is_empty

def test_imply() -> None:
    '''Test that implication keeps exactly the arrows of the first relation also found in the second'''
    r1 = GeneralRelation([(1, 'a'), (2, 'b')])
    r2 = GeneralRelation([(1, 'a'), (3, 'c')])

    assert algebra.imply(r1, r2) == GeneralRelation([(1, 'a')])
    assert algebra.imply(r1, None).is_empty

# constructor tests
def test_top() -> None:
    '''Test that the top relation relates every first to every second'''
    product = algebra.top([1, 2], ['x', 'y', None])
    assert (product.size == 4) and product.contains(2, 'y')

def test_top_square() -> None:
    '''Test that the top relation over a single collection relates it to itself'''
    assert algebra.top(['p', 'q']).size == 4

@pytest.mark.parametrize(
    'firsts, seconds',
    [
        ([1, 2], None),
        (None, ['x']),
        (None, None),
    ]
)
def test_top_missing_collection(firsts : list, seconds : list) -> None:
    '''Test that an explicitly missing collection yields an empty top relation, rather than squaring the other'''
    assert algebra.top(firsts, seconds).is_empty

def test_top_missing_single_collection() -> None:
    '''Test that the top relation over a single missing collection is empty'''
    assert algebra.top(None).is_empty

def test_identity() -> None:
    '''Test that the identity relation relates every element to itself only'''
    diagonal = algebra.identity([1, 2, None])

    assert diagonal == GeneralRelation([(1, 1), (2, 2)])
    assert diagonal.is_simple and diagonal.is_injective

def test_identity_is_compose_unit(r1 : GeneralRelation) -> None:
    '''Test that composing with the identity on either side leaves a relation unchanged'''
    assert algebra.compose(algebra.identity(r1.keys()), r1) == r1
    assert algebra.compose(r1, algebra.identity(r1.values())) == r1

# freezing tests
@pytest.mark.parametrize(
    'source',
    [
        BijectiveRelation([(1, 'x'), (2, 'y')]),
        FunctionalRelation([(1, 'x'), (2, 'x')]),
        GeneralRelation([(1, 'x'), (1, 'y')]),
        GeneralRelation([(1, 'x'), (1, 'y'), (2, 'x')]),
    ]
)
def test_immutable_preserves_arrows(source : Relation) -> None:
    '''Test that freezing a relation preserves its arrows and structural properties'''
    frozen = algebra.immutable(source)

    assert frozen == source
    assert (frozen.is_simple, frozen.is_injective) == (source.is_simple, source.is_injective)

def test_immutable_is_detached(r1 : GeneralRelation) -> None:
    '''Test that frozen relations neither accept changes nor see later changes to their source'''
    frozen = algebra.immutable(r1)
    r1.put('z', 99)

    assert not frozen.contains('z', 99) and (frozen.size == len(R1_ARROWS))
    with pytest.raises(ImmutabilityError):
        frozen.put('y', 0)
