from todoapp.models.task import Task


def test_completing_sets_completed_at():
    task = Task(title="Write report", user_id=1)
    assert task.completed_at is None

    task.completed = True
    assert task.completed_at is not None


def test_completed_at_is_kept_when_completed_again():
    task = Task(title="Write report", user_id=1, completed=True)
    first = task.completed_at

    task.completed = True
    assert task.completed_at == first


def test_uncompleting_clears_completed_at():
    task = Task(title="Write report", user_id=1, completed=True)
    task.completed = False
    assert task.completed_at is None
