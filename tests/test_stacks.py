import pytest

from pushswap.stacks import OPERATIONS, Node, OperationError, Stacks, is_sorted


def values(stack):
    return [node.value for node in stack]


def test_initial_state():
    stacks = Stacks([4, 2, 7])
    assert values(stacks.a) == [4, 2, 7]
    assert values(stacks.b) == []
    assert all(node.chunk == 0 and node.max_flag == -1 for node in stacks.a)


def test_sa_swaps_top_two():
    stacks = Stacks([4, 2, 7])
    stacks.sa()
    assert values(stacks.a) == [2, 4, 7]


def test_sa_twice_is_identity():
    stacks = Stacks([5, 1, 3, 9])
    stacks.sa()
    stacks.sa()
    assert values(stacks.a) == [5, 1, 3, 9]


def test_swap_moves_values_not_bookkeeping():
    stacks = Stacks([1, 2])
    stacks.a[0].chunk = 3
    stacks.sa()
    assert stacks.a[0].chunk == 3
    assert stacks.a[0].value == 2


def test_swap_on_short_stack_does_nothing():
    stacks = Stacks([8])
    stacks.sa()
    stacks.sb()
    assert values(stacks.a) == [8]
    assert values(stacks.b) == []


def test_pb_then_pa_restores():
    stacks = Stacks([3, 1, 2])
    stacks.pb()
    assert values(stacks.a) == [1, 2]
    assert values(stacks.b) == [3]
    stacks.pa()
    assert values(stacks.a) == [3, 1, 2]
    assert values(stacks.b) == []


def test_push_moves_the_node_itself():
    stacks = Stacks([3, 1])
    node = stacks.a[0]
    stacks.pb()
    assert stacks.b[0] is node


def test_push_from_empty_does_nothing():
    stacks = Stacks([3, 1])
    stacks.pa()
    assert values(stacks.a) == [3, 1]


def test_ra_moves_top_to_bottom():
    original = [6, 2, 9, 4]
    stacks = Stacks(original)
    stacks.ra()
    assert values(stacks.a) == original[1:] + original[:1]


def test_rra_moves_bottom_to_top():
    original = [6, 2, 9, 4]
    stacks = Stacks(original)
    stacks.rra()
    assert values(stacks.a) == original[-1:] + original[:-1]


@pytest.mark.parametrize("forward,backward", [("ra", "rra"), ("rb", "rrb"), ("rr", "rrr")])
def test_rotations_are_inverse(forward, backward):
    stacks = Stacks([1, 2, 3, 4, 5])
    stacks.pb()
    stacks.pb()
    before = (values(stacks.a), values(stacks.b))
    stacks.apply(forward)
    stacks.apply(backward)
    assert (values(stacks.a), values(stacks.b)) == before


def test_rr_rotates_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.rr()
    assert values(stacks.a) == [4, 3]
    assert values(stacks.b) == [1, 2]


def test_ss_swaps_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.ss()
    assert values(stacks.a) == [4, 3]
    assert values(stacks.b) == [1, 2]


def test_recording_keeps_operation_names():
    stacks = Stacks([3, 2, 1], record=True)
    stacks.sa()
    stacks.pb()
    stacks.rr()
    stacks.rrr()
    assert stacks.operations == ["sa", "pb", "rr", "rrr"]


def test_no_recording_by_default():
    stacks = Stacks([3, 2, 1])
    stacks.sa()
    stacks.ra()
    assert stacks.operations == []


def test_apply_every_operation_is_recorded():
    stacks = Stacks([1, 2, 3, 4], record=True)
    for name in OPERATIONS:
        stacks.apply(name)
    assert stacks.operations == list(OPERATIONS)
    assert sorted(values(stacks.a) + values(stacks.b)) == [1, 2, 3, 4]


@pytest.mark.parametrize("name", ["", "sa\n", "SA", "rrrr", "exit"])
def test_apply_unknown_raises(name):
    stacks = Stacks([1, 2])
    with pytest.raises(OperationError):
        stacks.apply(name)


def test_is_sorted_looks_only_at_a():
    stacks = Stacks([2, 1, 3])
    assert not stacks.is_sorted()
    stacks.pb()
    assert stacks.is_sorted()


@pytest.mark.parametrize(
    "seq,expected",
    [([], True), ([5], True), ([1, 2, 2, 3], True), ([1, 3, 2], False), ([-1, -5], False)],
)
def test_is_sorted_function(seq, expected):
    assert is_sorted(seq) is expected


def test_node_defaults():
    node = Node(42)
    assert (node.value, node.chunk, node.max_flag) == (42, 0, -1)