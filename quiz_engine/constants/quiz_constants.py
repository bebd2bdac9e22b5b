"""Quiz-related constants shared by the core and the import/export layer."""

LEVEL_SCALE: int = 10
UNSCORED_POINTS_PER_QUESTION: int = 1
SCORE_BASELINE: float = 0
ANSWER_LETTERS: str = "ABCDEFGH"
BLOCK_SEPARATOR: str = "---"
