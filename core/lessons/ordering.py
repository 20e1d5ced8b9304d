"""Reorder lessons within a course."""

from typing import Literal


def move_lesson(
    lessons: list[dict], lesson_id: str, direction: Literal["up", "down"]
) -> list[dict]:
    """
    Move a lesson one place up or down and renumber every lesson's order.

    Args:
        lessons: Lesson records in display order, each with an "_id"
        lesson_id: Id of the lesson to move
        direction: "up" (towards the start) or "down"

    Returns:
        New list of new dicts with "order" set to 1..n. If the lesson isn't
        found or is already at that end, the input list is returned as is.
    """
    if direction not in ("up", "down"):
        raise ValueError(f"Unknown direction: {direction}")

    current = next(
        (i for i, lesson in enumerate(lessons) if lesson.get("_id") == lesson_id),
        None,
    )
    if current is None:
        return lessons

    target = current - 1 if direction == "up" else current + 1
    if target < 0 or target >= len(lessons):
        return lessons

    reordered = list(lessons)
    reordered[current], reordered[target] = reordered[target], reordered[current]

    return [{**lesson, "order": i + 1} for i, lesson in enumerate(reordered)]
