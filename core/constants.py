"""
Shared constants used across the platform.
"""

# Option letters in display order; position is the option index
ANSWER_LETTERS = ["A", "B", "C", "D"]

# Maximum quiz questions per lesson (enforced by the lesson form)
MAX_QUIZZES_PER_LESSON = 10

# Lesson types accepted by the lesson service
LESSON_TYPES = ["Video", "Text", "Quiz", "Code"]

# Where a lesson's video comes from
VIDEO_TYPES = ["upload", "youtube"]

# Language preselected for new code snippets
DEFAULT_CODE_LANGUAGE = "JavaScript"
