"""Bundled example of the plain-text quiz format."""

HELP_TEXT = (
    "TYPE: SINGLE\n"
    "Q: What is $30^o$ in radians?\n"
    "HINT: A full turn is $2\\pi$.\n"
    "A: \\frac{\\pi}{2}\nB: \\frac{\\pi}{6}\nC: \\frac{\\pi}{3}\n"
    "CORRECT: B\n\n"
    "TYPE: SCORE\n"
    "Q: How often do you review your notes?\n"
    "A: Never\nB: Sometimes\nC: Daily\n"
    "SCORES: 0, 5, 10"
)
