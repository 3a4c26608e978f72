import pytest

from cassandra_crate.errors import PreconditionViolation
from cassandra_crate.sizing import compute_sizing


def test_sizing_for_8000mb_at_0_4():
    sizing = compute_sizing(8000, 0.4)
    assert sizing.max_heap == "3160M"
    assert sizing.heap_new == "632M"
    assert sizing.young_gen_size == "316M"
    assert sizing.stack_size == "200K"


def test_sizing_truncates_to_whole_megabytes():
    sizing = compute_sizing(1100, 0.33)
    # (1100 - 100) * 0.33 = 330, * 0.2 = 66, * 0.1 = 33
    assert (sizing.max_heap, sizing.heap_new, sizing.young_gen_size) == ("330M", "66M", "33M")
    assert compute_sizing(1101, 0.5).max_heap == "500M"


def test_half_is_the_upper_bound():
    assert compute_sizing(8100, 0.5).max_heap == "4000M"


@pytest.mark.parametrize("fraction", [0.6, 0.51, 0, -0.1, float("nan"), float("inf"), "half"])
def test_bad_fraction_rejected(fraction):
    with pytest.raises(PreconditionViolation):
        compute_sizing(8000, fraction)


def test_node_without_usable_ram_rejected():
    with pytest.raises(PreconditionViolation):
        compute_sizing(100, 0.4)


def test_as_service_keys():
    assert compute_sizing(8000, 0.4).as_service() == {
        "max_heap": "3160M",
        "heap_new": "632M",
        "young_gen_size": "316M",
        "stack_size": "200K",
    }
