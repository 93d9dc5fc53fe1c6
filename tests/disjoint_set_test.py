from spantree.disjoint_set import DisjointSet, InvalidVertexId
import pytest


def _union(dj, x, y):
    dj.union(dj.find(x), dj.find(y))


@pytest.mark.parametrize("path_compression", (False, True))
@pytest.mark.parametrize("union_by_rank", (False, True))
@pytest.mark.parametrize(
    "n, unions, expected_sets",
    [
        (
            9,
            ((2, 3), (4, 5), (6, 7), (5, 6)),
            ((0,), (1,), (2, 3), (4, 5, 6, 7), (8,)),
        ),
        (
            11,
            ((0, 10), (1, 9), (2, 8), (0, 1), (0, 8)),
            ((0, 1, 2, 8, 9, 10), (3,), (4,), (5,), (6,), (7,)),
        ),
        (
            4,
            ((3, 2), (2, 1), (1, 0), (0, 3)),
            ((0, 1, 2, 3),),
        ),
        (0, (), ()),
    ],
)
def test_disjoint_set(n, unions, expected_sets, path_compression, union_by_rank):
    dj = DisjointSet(
        n, path_compression=path_compression, union_by_rank=union_by_rank
    )
    for union in unions:
        _union(dj, *union)
    assert dj.sorted() == expected_sets


def test_singletons_are_their_own_representative():
    dj = DisjointSet(5)
    assert [dj.find(i) for i in range(5)] == list(range(5))
    assert len(dj.sets()) == 5


def test_union_hangs_second_root_under_first():
    dj = DisjointSet(3)
    dj.union(2, 0)
    assert dj.find(0) == 2
    assert dj.parent == [2, 1, 2]


def test_union_resolves_non_root_arguments():
    dj = DisjointSet(3)
    dj.union(0, 1)
    dj.union(2, 1)
    assert dj.find(0) == dj.find(1) == dj.find(2) == 2
    assert dj.sorted() == ((0, 1, 2),)


def test_union_of_same_root_is_noop():
    dj = DisjointSet(3)
    dj.union(1, 1)
    assert dj.parent == [0, 1, 2]


def test_union_by_rank_keeps_taller_root():
    dj = DisjointSet(3, union_by_rank=True)
    dj.union(0, 1)
    dj.union(2, 0)
    assert dj.find(2) == 0
    assert dj.parent == [0, 0, 0]


@pytest.mark.parametrize(
    "path_compression, expected_parent",
    [
        (False, [0, 0, 1, 2]),
        (True, [0, 0, 0, 0]),
    ],
)
def test_path_compression(path_compression, expected_parent):
    dj = DisjointSet(4, path_compression=path_compression)
    dj.union(2, 3)
    dj.union(1, 2)
    dj.union(0, 1)
    assert dj.find(3) == 0
    assert dj.parent == expected_parent


def test_connected():
    dj = DisjointSet(4)
    _union(dj, 0, 1)
    _union(dj, 2, 3)
    assert dj.connected(1, 0)
    assert not dj.connected(1, 2)


@pytest.mark.parametrize("bad_id", (-1, 3, 100))
def test_find_rejects_out_of_range(bad_id):
    dj = DisjointSet(3)
    with pytest.raises(InvalidVertexId):
        dj.find(bad_id)


def test_union_rejects_out_of_range():
    dj = DisjointSet(3)
    with pytest.raises(IndexError):
        dj.union(0, 3)
    assert dj.parent == [0, 1, 2]


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)
