"""
Tests for failure message formatting and best-effort delivery
"""
from doordont.models.goal import GoalEvaluation
from doordont.services.notifications.service import NotificationService, format_goal_failure


def _evaluation(initiate, frequency, counter, description="go to the gym"):
    return GoalEvaluation(goal_id=1, description=description, initiate=initiate,
                          frequency=frequency, counter=counter, met_goal=False)


def test_start_failure_message():
    message = format_goal_failure(_evaluation(True, 4, 3))
    assert message == 'You promised to "go to the gym" at least 4 times, but you only did it 3 times!'


def test_quit_failure_message():
    message = format_goal_failure(_evaluation(False, 3, 5, description="smoke"))
    assert message == 'You promised to "smoke" less than 3 times, but you did it 5 times!'


def test_send_goal_failure_uses_goal_update_subject(notifications, transport):
    assert notifications.send_goal_failure("jon@example.com", _evaluation(True, 4, 3)) is True

    assert len(transport.sent) == 1
    sent = transport.sent[0]
    assert sent["target"] == "jon@example.com"
    assert sent["subject"] == "Goal update"
    assert "at least 4 times" in sent["body"]


def test_send_without_callback_returns_false():
    assert NotificationService().send("jon@example.com", "Goal update", "hi") is False


def test_send_swallows_transport_errors():
    def broken(target, subject, body):
        raise ConnectionError("smtp down")

    assert NotificationService(broken).send("jon@example.com", "Goal update", "hi") is False


def test_send_reports_undelivered():
    assert NotificationService(lambda *args: False).send("jon@example.com", "s", "b") is False
