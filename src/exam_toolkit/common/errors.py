"""Base exception shared by every toolkit error.

Each stage defines its own subclasses next to the code that raises them;
the CLI only needs to catch ``ExamToolkitError``.
"""


class ExamToolkitError(Exception):
    """Root of all errors raised by the exam toolkit."""
    pass
