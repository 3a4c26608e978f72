import copy

from cassandra_crate.settings.merge import deep_merge, merge_settings


def test_scalar_replaces_scalar():
    assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}


def test_maps_merge_recursively():
    merged = deep_merge({"s": {"a": 1, "n": {"x": 1}}}, {"s": {"b": 2, "n": {"y": 2}}})
    assert merged == {"s": {"a": 1, "b": 2, "n": {"x": 1, "y": 2}}}


def test_sequence_replaces_sequence():
    assert deep_merge({"dirs": ["/a", "/b"]}, {"dirs": ["/c"]}) == {"dirs": ["/c"]}


def test_scalar_replaces_map_and_map_replaces_scalar():
    assert deep_merge({"a": {"x": 1}}, {"a": None}) == {"a": None}
    assert deep_merge({"a": 1}, {"a": {"x": 1}}) == {"a": {"x": 1}}


def test_inputs_not_mutated():
    base = {"s": {"a": [1]}}
    over = {"s": {"b": 2}}
    snapshot = copy.deepcopy((base, over))
    merged = deep_merge(base, over)
    merged["s"]["a"].append(2)
    assert (base, over) == snapshot


def test_precedence_computed_version_user():
    computed = {"server": {"rpc_address": "10.0.0.1", "endpoint_snitch": "SimpleSnitch"}}
    version = {"server": {"endpoint_snitch": "Ec2Snitch", "rpc_port": 9160}}
    user = {"server": {"rpc_port": 9161}}
    merged = merge_settings(user, version, computed)
    assert merged["server"] == {
        "rpc_address": "10.0.0.1",
        "endpoint_snitch": "Ec2Snitch",
        "rpc_port": 9161,
    }


def test_seeds_injected_after_merge():
    user = {"server": {"seed_provider": [{"class_name": "X", "parameters": [{"seeds": "user"}]}]}}
    merged = merge_settings(user, {}, {}, seeds="10.0.0.1,10.0.0.2")
    assert merged["server"]["seed_provider"] == [
        {"class_name": "X", "parameters": [{"seeds": "10.0.0.1,10.0.0.2"}]}
    ]
    assert user["server"]["seed_provider"][0]["parameters"][0]["seeds"] == "user"


def test_seed_provider_created_when_missing():
    merged = merge_settings({}, {}, {}, seeds="10.0.0.1")
    provider = merged["server"]["seed_provider"][0]
    assert provider["class_name"] == "org.apache.cassandra.locator.SimpleSeedProvider"
    assert provider["parameters"] == [{"seeds": "10.0.0.1"}]


def test_merge_is_idempotent():
    args = ({"server": {"a": 1}}, {"server": {"b": [1, 2]}}, {"service": {"c": "3M"}})
    assert merge_settings(*args, seeds="s") == merge_settings(*args, seeds="s")
