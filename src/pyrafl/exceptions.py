"""
Exception classes for pyrafl.

Custom exception hierarchy separating bad input from broken modelling
assumptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    ValidationError,
    ValidationInfo,
    WrapValidator,
)
from pydantic_core import ErrorDetails, InitErrorDetails, PydanticCustomError


class RaflException(Exception):
    """
    Base exception class for all pyrafl-related errors.

    This serves as the root exception that all other pyrafl exceptions inherit from,
    allowing users to catch all pyrafl-specific errors with a single except clause.
    """


class InvalidArgumentError(RaflException, ValueError):
    """
    Exception raised when an operation is given input it cannot work with.

    This typically occurs when:
    - A probability mass function is requested for an empty histogram
    - The children of a split do not account for every parent observation
    - A display limit is not positive

    Split evaluators treat this as "this candidate cannot be scored" and move on.
    """


class InvariantViolationError(RaflException, AssertionError):
    """
    Exception raised when a numerical assumption of the statistics core breaks.

    Probability masses are assumed never to fall below a small epsilon floor and
    always to sum to one. When that stops holding (e.g. a label cardinality that is
    huge relative to the sample size) the computation is aborted rather than
    continuing with a degenerate distribution.
    """


def custom_error_msg(custom_messages: dict[str, str]) -> Any:
    r"""
    Customize an error message for pydantic validation errors.

    See https://github.com/pydantic/pydantic/discussions/8468.

    Example:

    >>> from typing import Annotated
    >>> from pydantic import BaseModel, NonNegativeInt
    >>> Count = Annotated[
    ...     NonNegativeInt,
    ...     custom_error_msg({"greater_than_equal": "Counts cannot be negative, got {input}."}),
    ... ]
    >>> class Model(BaseModel):
    ...     count: Count
    >>> Model(count=-1)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    pydantic_core._pydantic_core.ValidationError: 1 validation error for Model
    count
      Counts cannot be negative, got -1. ...
    """

    def _validator(v: Any, next_: Any, ctx: ValidationInfo) -> Any:
        try:
            return next_(v)
        except ValidationError as exc:
            new_errors: list[InitErrorDetails | ErrorDetails] = []
            for error in exc.errors():
                custom_message = custom_messages.get(error["type"])
                if not custom_message:
                    new_errors.append(error)
                    continue

                err_ctx = error.get("ctx", {}).copy()
                err_ctx["input"] = error["input"]
                if ctx.data:
                    err_ctx.update(ctx.data)

                new_errors.append(
                    InitErrorDetails(
                        type=PydanticCustomError(
                            error["type"], custom_message, err_ctx
                        ),
                        loc=error["loc"],
                        input=error["input"],
                    )
                )

            raise ValidationError.from_exception_data(
                title=exc.title,
                line_errors=new_errors,  # type: ignore[arg-type]
            ) from None

    return WrapValidator(_validator)


__all__ = (
    "InvalidArgumentError",
    "InvariantViolationError",
    "RaflException",
    "custom_error_msg",
)
