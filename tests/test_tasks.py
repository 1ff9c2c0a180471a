import pytest

from ekgui.tasks import Task, TaskHandler


def test_dispatched_task_runs_with_its_info_on_update():
    calls = []
    handler = TaskHandler()
    handler.dispatch(Task(calls.append, info="payload"))
    assert calls == []
    handler.on_update()
    assert calls == ["payload"]


def test_task_is_queued_only_once_until_run():
    calls = []
    task = Task(calls.append, info=1)
    handler = TaskHandler()
    handler.dispatch(task)
    handler.dispatch(task)
    assert handler.pending == 1
    handler.on_update()
    assert calls == [1]
    assert task.was_dispatched is False


def test_task_can_be_dispatched_again_after_update():
    calls = []
    task = Task(calls.append, info="x")
    handler = TaskHandler()
    handler.dispatch(task)
    handler.on_update()
    handler.dispatch(task)
    handler.on_update()
    assert calls == ["x", "x"]


def test_tasks_run_in_dispatch_order():
    order = []
    handler = TaskHandler()
    for name in ("a", "b", "c"):
        handler.dispatch(Task(order.append, info=name))
    handler.on_update()
    assert order == ["a", "b", "c"]
    assert handler.pending == 0


def test_pre_allocated_dispatch_by_index():
    calls = []
    handler = TaskHandler()
    first = handler.allocate(Task(calls.append, info="first"))
    second = handler.allocate(Task(calls.append, info="second"))
    assert (first, second) == (0, 1)
    handler.dispatch_pre_allocated(second)
    handler.dispatch_pre_allocated(second)
    handler.on_update()
    assert calls == ["second"]


def test_pre_allocated_index_out_of_range():
    handler = TaskHandler()
    handler.allocate(Task(lambda info: None))
    with pytest.raises(IndexError):
        handler.dispatch_pre_allocated(1)
    with pytest.raises(IndexError):
        handler.dispatch_pre_allocated(-1)


def test_task_dispatched_during_its_own_run_is_not_requeued():
    handler = TaskHandler()
    calls = []

    def run(info):
        calls.append(info)
        handler.dispatch(task)

    task = Task(run, info="self")
    handler.dispatch(task)
    handler.on_update()
    assert calls == ["self"]
    assert handler.pending == 0