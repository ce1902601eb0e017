"""
Tests for the goal completion rule
"""
import pytest

from doordont.models.goal import Goal, GoalMode, Punishment
from doordont.services.goals.evaluator import evaluate_goal, met_goal


@pytest.mark.parametrize("frequency", [1, 2, 4, 7])
@pytest.mark.parametrize("counter", [0, 1, 3, 4, 5, 10])
def test_start_goal_met_when_counter_reaches_frequency(frequency, counter):
    assert met_goal(GoalMode.START, frequency, counter) == (counter >= frequency)


@pytest.mark.parametrize("frequency", [1, 2, 4, 7])
@pytest.mark.parametrize("counter", [0, 1, 3, 4, 5, 10])
def test_quit_goal_met_while_counter_below_frequency(frequency, counter):
    assert met_goal(GoalMode.QUIT, frequency, counter) == (counter < frequency)


@pytest.mark.parametrize("frequency", [1, 3, 12])
def test_counter_equal_to_frequency_meets_start_and_fails_quit(frequency):
    assert met_goal(GoalMode.START, frequency, frequency) is True
    assert met_goal(GoalMode.QUIT, frequency, frequency) is False


def test_mode_accepts_plain_strings():
    assert met_goal("start", 2, 2) is True
    assert met_goal("quit", 2, 2) is False


def test_evaluate_goal_copies_goal_state():
    goal = Goal(id=9, description="smoke", punishment=Punishment.TWEET,
                initiate=False, frequency=3, counter=1, user_id=1)

    evaluation = evaluate_goal(goal)

    assert evaluation.goal_id == 9
    assert evaluation.description == "smoke"
    assert evaluation.mode is GoalMode.QUIT
    assert evaluation.frequency == 3
    assert evaluation.counter == 1
    assert evaluation.met_goal is True


def test_goal_rejects_non_positive_frequency_and_negative_counter():
    with pytest.raises(ValueError):
        Goal(id=1, description="x", punishment="email", initiate=True, frequency=0, user_id=1)
    with pytest.raises(ValueError):
        Goal(id=1, description="x", punishment="email", initiate=True, frequency=1, counter=-1, user_id=1)
