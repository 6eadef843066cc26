import json
import logging

from scalargrad import (
    AutogradConfig,
    Var,
    format_node,
    get_graph_stats,
    print_computation_graph,
    print_graph_summary,
    setup_logger,
)
from scalargrad.config import _env_flag


def test_leaf_repr():
    a = Var(2.0)
    assert repr(a) == "Value { data: 2.0, grad: 0.0, op: '' }"
    assert str(a) == "Value { data: 2.0, grad: 0.0 }"


def test_interior_repr_lists_parent_values():
    a, b = Var(2.0), Var(3.0)
    c = a * b
    c.backward()
    assert format_node(c) == "Value { data: 6.0, grad: 1.0, op: '*', parents: [ 2.0, 3.0 ] }"
    assert str(c) == "Value { data: 6.0, grad: 1.0 }"
    assert repr(c.relu()) == "Value { data: 6.0, grad: 0.0, op: 'ReLU', parents: [ 6.0 ] }"


def test_graph_stats(tape):
    a, b = Var(2.0), Var(3.0)
    c = a * b
    c + a
    stats = get_graph_stats(tape)
    assert stats["nodes"] == 4
    assert stats["edges"] == 4
    assert stats["leaves"] == 2
    assert stats["max_fan_in"] == 2
    assert stats["max_fan_out"] == 2
    assert stats["operations"] == {"LEAF": 2, "MUL": 1, "ADD": 1}


def test_graph_stats_empty(tape):
    stats = get_graph_stats(tape)
    assert stats["nodes"] == 0
    assert stats["operations"] == {}


def test_print_graph_summary(tape, capsys):
    assert print_graph_summary(tape) == {}
    assert "Empty computation graph" in capsys.readouterr().out

    a = Var(1.0)
    (a - 2.0).backward()
    stats = print_graph_summary(tape, detailed=True)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "DETAILED NODE LIST" in out
    assert "SUB" in out
    assert stats["nodes"] == 4


def test_print_computation_graph_truncates(tape, capsys):
    x = Var(1.0)
    for _ in range(5):
        x = x + 1.0
    print_computation_graph(tape, max_nodes=3)
    out = capsys.readouterr().out
    assert "[leaf/input]" in out
    assert "<- [Node0, Node1]" in out
    assert "... (8 more nodes)" in out


def test_setup_logger_is_idempotent():
    logger = setup_logger("scalargrad.tests.idempotent", level="DEBUG")
    setup_logger("scalargrad.tests.idempotent", level="INFO")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_setup_logger_defaults_to_config_level(monkeypatch):
    monkeypatch.setattr(AutogradConfig, "LOG_LEVEL", "ERROR")
    logger = setup_logger("scalargrad.tests.default_level")
    assert logger.level == logging.ERROR


def test_json_formatter(capsys):
    logger = setup_logger("scalargrad.tests.json", level="INFO", json_format=True)
    logger.propagate = False
    logger.info("hello %s", "graph")
    record = json.loads(capsys.readouterr().out.strip())
    assert record["message"] == "hello graph"
    assert record["level"] == "INFO"
    assert record["logger"] == "scalargrad.tests.json"


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SCALARGRAD_TEST_FLAG", "Yes")
    assert _env_flag("SCALARGRAD_TEST_FLAG") is True
    monkeypatch.setenv("SCALARGRAD_TEST_FLAG", "0")
    assert _env_flag("SCALARGRAD_TEST_FLAG") is False
    monkeypatch.delenv("SCALARGRAD_TEST_FLAG")
    assert _env_flag("SCALARGRAD_TEST_FLAG", default=True) is True
