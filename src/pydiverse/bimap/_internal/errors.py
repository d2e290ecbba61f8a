from __future__ import annotations

from typing import Any


class InternalConsistencyError(AssertionError):
    """
    Raised when the two stores of a bimap disagree with each other or with the
    arena. This indicates a bug in the container, not invalid user input.
    """


# Our error message format: The first line is in lowercase letters, without a dot at
# the end. More detail is given in the following lines in normal english sentences.
# To give advice to to the user, we write `hint: ...`.


def check_arg_type(
    expected_type: type,
    fn: str,
    param_name: str,
    arg: Any,
):
    if not isinstance(arg, expected_type):
        raise TypeError(
            f"argument for parameter `{param_name}` of `{fn}` must have type "
            f"`{expected_type.__name__}`, found `{type(arg).__name__}` instead"
        )
