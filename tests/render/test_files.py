import yaml

from cassandra_crate.render.files import render_cassandra_yaml, render_environment
from cassandra_crate.settings.defaults import DEFAULT_JVM_OPTS


def test_cassandra_yaml_round_trips_server_map():
    server = {
        "cluster_name": "prod",
        "data_file_directories": ["/mnt/cassandra/data"],
        "seed_provider": [{"class_name": "X", "parameters": [{"seeds": "10.0.0.1,10.0.0.2"}]}],
        "initial_token": "85070591730234615865843651857942052864",
    }
    text = render_cassandra_yaml(server)
    assert text.startswith("cluster_name: prod\n")
    loaded = yaml.safe_load(text)
    assert loaded == server
    assert isinstance(loaded["initial_token"], str)


def test_environment_file():
    text = render_environment({
        "max_heap": "3160M",
        "heap_new": "632M",
        "stack_size": "200K",
        "young_gen_size": "316M",
        "jmx_port": 7199,
        "jvm_opts": ["-ea", "-Xss${STACK_SIZE}"],
    })
    lines = text.splitlines()
    assert 'MAX_HEAP_SIZE="3160M"' in lines
    assert 'HEAP_NEWSIZE="632M"' in lines
    assert 'STACK_SIZE="200K"' in lines
    assert 'YOUNG_GEN_SIZE="316M"' in lines
    assert 'JMX_PORT="7199"' in lines
    assert lines[-1] == 'JVM_OPTS="${JVM_OPTS} -ea -Xss${STACK_SIZE}"'


def test_environment_default_jvm_opts():
    text = render_environment({
        "max_heap": "1M", "heap_new": "1M", "stack_size": "1K",
        "young_gen_size": "1M", "jmx_port": 7199, "jvm_opts": DEFAULT_JVM_OPTS,
    })
    assert "-Dcom.sun.management.jmxremote.port=${JMX_PORT}" in text
    assert "-XX:+UseConcMarkSweepGC" in text
