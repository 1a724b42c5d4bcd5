"""Console rendering: ANSI theme helpers and the task table."""
