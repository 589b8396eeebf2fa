import pytest

from cryptcrawl.action import Action, Result, alternative, failure, success


class Noop(Action):
    def perform(self, engine, entity):
        return success()


def test_success():
    result = success()
    assert result.succeeded is True
    assert result.next_action is None


def test_failure():
    result = failure()
    assert result.succeeded is False
    assert result.next_action is None


def test_alternative_carries_action():
    action = Noop()
    result = alternative(action)
    assert result.succeeded is False
    assert result.next_action is action


def test_default_result_failed():
    assert Result() == failure()


def test_action_is_abstract():
    with pytest.raises(TypeError):
        Action()


def test_chained_action_performs():
    result = alternative(Noop())
    assert result.next_action.perform(None, None) == success()