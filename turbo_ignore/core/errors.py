"""Exit codes for the CLI adapter.

The resolver itself never exits; these values are only used where the
command line turns a failed resolution into a process status.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success (workspace resolved)
    - 1: User error (no workspace given and none could be inferred)
    """

    OK = 0
    USER_ERROR = 1
