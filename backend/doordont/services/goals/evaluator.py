"""
Completion Evaluator
Decides whether a goal met its target for the current period
"""
from doordont.models.goal import Goal, GoalEvaluation, GoalMode


def met_goal(mode: GoalMode, frequency: int, counter: int) -> bool:
    """
    Apply the completion rule

    START goals are met once the counter reaches the frequency; QUIT goals are
    met only while the counter stays below it. counter == frequency therefore
    meets a START goal and fails a QUIT goal.

    Args:
        mode: GoalMode.START or GoalMode.QUIT
        frequency: Target count for the period (> 0)
        counter: Occurrences recorded in the period (>= 0)

    Returns:
        True if the goal was met
    """
    reached = counter >= frequency
    if GoalMode(mode) is GoalMode.START:
        return reached
    return not reached


def evaluate_goal(goal: Goal) -> GoalEvaluation:
    """Evaluate a goal record into a GoalEvaluation"""
    return GoalEvaluation(
        goal_id=goal.id,
        description=goal.description,
        initiate=goal.initiate,
        frequency=goal.frequency,
        counter=goal.counter,
        met_goal=met_goal(goal.mode, goal.frequency, goal.counter)
    )
