import pytest

from karek.fifo import Fifo, main


def test_fifo_order():
    queue = Fifo()
    values = [3, 1, 4, 1, 5]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_front_does_not_remove():
    queue = Fifo()
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.front() == "a"
    assert len(queue) == 2


def test_empty_queue_errors():
    queue = Fifo()
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()


def test_iteration_and_len():
    queue = Fifo()
    for value in (7, 8, 9):
        queue.enqueue(value)
    assert list(queue) == [7, 8, 9]
    queue.dequeue()
    assert list(queue) == [8, 9]
    assert len(queue) == 2


def test_reuse_after_emptying():
    queue = Fifo()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    assert queue.front() == 2
    assert not queue.is_empty()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Frente: 10",
        "Desenfileirando: 10",
        "Desenfileirando: 20",
        "Frente: 30",
    ]