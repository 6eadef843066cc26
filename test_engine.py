import logging

import pytest

from scalargrad import Var, backward, reset_grads, zero_grads


def test_add_gradients():
    a, b = Var(2.0), Var(-7.0)
    c = a + b
    assert c.value == -5.0
    backward(c)
    assert c.grad == 1.0
    assert a.grad == 1.0
    assert b.grad == 1.0


def test_self_addition_accumulates():
    a = Var(3.0)
    c = a + a
    backward(c)
    assert a.grad == 2.0


def test_mul_gradients():
    a, b = Var(3.0), Var(-4.0)
    c = a * b
    backward(c)
    assert a.grad == b.value
    assert b.grad == a.value


def test_self_multiplication_accumulates():
    a = Var(3.0)
    c = a * a
    backward(c)
    assert a.grad == 2 * a.value


def test_diamond_accumulates_from_every_consumer():
    # f = (a*2) * (a+1) -> df/da = 2*(a+1) + 2*a
    a = Var(3.0)
    left = a * 2.0
    right = a + 1.0
    f = left * right
    f.backward()
    assert f.value == 24.0
    assert a.grad == 2 * 4.0 + 2 * 3.0


def test_end_to_end_scenario():
    x = Var(2.0)
    w = Var(1.0)
    b = Var(3.0)
    y = x * w + b
    assert y.value == 5.0

    i = Var(1.5)
    j = Var(4.0)
    k = i * j + x * x
    assert k.value == 10.0

    result = k * y
    assert result.value == 50.0

    result.backward()
    assert x.grad == 30.0
    assert w.grad == 20.0
    assert b.grad == 10.0
    assert i.grad == 20.0
    assert j.grad == 7.5
    assert k.grad == 5.0
    assert y.grad == 10.0


def test_backward_is_repeatable():
    a, b = Var(2.0), Var(5.0)
    c = a * b + a
    c.backward()
    first = (a.grad, b.grad)
    c.backward()
    assert (a.grad, b.grad) == first == (6.0, 2.0)


def test_backward_from_subexpression_reseeds():
    x, w, b = Var(2.0), Var(1.0), Var(3.0)
    y = x * w + b
    result = (x * x) * y
    result.backward()
    assert x.grad == 4.0 * 1.0 + 2 * 2.0 * 5.0

    y.backward()
    assert y.grad == 1.0
    assert x.grad == 1.0
    assert w.grad == 2.0


def test_reset_grads_zeroes_reachable_nodes():
    a, b = Var(2.0), Var(5.0)
    c = (a * b).relu() - a / b
    c.backward()
    assert a.grad != 0.0

    reset_grads(c)
    for node in (a, b, c):
        assert node.grad == 0.0
    for node in c.tape.nodes:
        assert node.grad == 0.0

    # idempotent
    c.reset_grads()
    assert a.grad == 0.0


def test_reset_grads_leaves_unreachable_nodes(tape):
    a, b = Var(2.0), Var(5.0)
    c = a * b
    d = b + 1.0
    d.backward()
    reset_grads(c)
    assert b.grad == 0.0
    assert d.grad == 1.0

    zero_grads(tape)
    assert d.grad == 0.0


def test_zero_grads_defaults_to_active_tape(tape):
    a = Var(2.0)
    c = a * a
    c.backward()
    zero_grads()
    assert all(node.grad == 0.0 for node in tape.nodes)


def test_leaf_backward_seeds_itself():
    a = Var(4.0)
    a.backward()
    assert a.grad == 1.0


def test_deep_chain_does_not_recurse():
    x = Var(1.0)
    y = x
    for _ in range(5000):
        y = y + 1.0
    assert y.value == 5001.0
    y.backward()
    assert x.grad == 1.0


def test_deep_product_chain_gradient():
    x = Var(1.0)
    y = x
    for _ in range(3000):
        y = y * 1.0001
    y.backward()
    assert x.grad == pytest.approx(1.0001 ** 3000)


def test_backward_logs_sweep(caplog):
    caplog.set_level(logging.DEBUG, logger="scalargrad.core.engine")
    a = Var(1.0)
    (a + a).backward()
    assert "backward from node 1: 2 reachable nodes" in caplog.text
