import pytest

from cassandra_crate.errors import PreconditionViolation
from cassandra_crate.topology.seeds import select_seeds


def test_first_members_private_ips(members):
    assert select_seeds(2, None, members) == "10.0.0.1,10.0.0.2"


def test_falls_back_to_primary_ip(members):
    assert select_seeds(3, None, members) == "10.0.0.1,10.0.0.2,54.0.0.3"


def test_more_seeds_than_members(members):
    assert select_seeds(10, None, members[:1]) == "10.0.0.1"


def test_explicit_seeds_used_verbatim(members):
    assert select_seeds(1, ["1.1.1.1", "2.2.2.2", "3.3.3.3"], members) == "1.1.1.1,2.2.2.2,3.3.3.3"


def test_selection_is_deterministic(members):
    assert select_seeds(2, None, members) == select_seeds(2, None, tuple(members))


def test_max_seeds_must_be_positive(members):
    with pytest.raises(PreconditionViolation):
        select_seeds(0, None, members)
