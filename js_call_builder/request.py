"""Build client-side JavaScript call expressions."""

import logging
import math
import re
import sys
from typing import Any

from js_call_builder.models import (
    BOOLEAN_VALUE,
    CHECKED_VALUE,
    ELEMENT_INNERHTML,
    FORM_VALUES,
    INPUT_VALUE,
    JS_VALUE,
    NUMERIC_VALUE,
    PAGE_NUMBER,
    QUOTED_VALUE,
)
from js_call_builder.options import Options

logger = logging.getLogger(__name__)

# Rendered in place of parameters that were skipped over
MISSING_PARAMETER = "undefined"

_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


class InvalidParameterIndex(ValueError):
    """A parameter index cannot address the argument list."""

    def __init__(self, index: int):
        super().__init__(f"Invalid parameter index: {index}")
        self.index = index


def _add_slashes(value: str) -> str:
    """Backslash-escape backslashes, quotes and NUL bytes."""
    return (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("\0", "\\0")
    )


def _to_int(value: Any) -> int:
    """Loosely coerce a value to an integer, falling back to 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _LEADING_INT_PATTERN.match(value)
        return int(match.group(1)) if match else 0
    return 0


def _is_truthy(value: Any) -> bool:
    # "0" is false too, as it is for values coming from request data
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


class Request:
    """A call to a function, class method or event handler in the browser.

    Parameters are rendered to argument text when they are set, so the
    quote character in effect at that moment is the one they keep.
    """

    def __init__(self, name: str, kind: str, options=None):
        """
        Args:
            name: Name of the function, method or event to call
            kind: Target kind ("function", "class" or "event"), used to look
                up the "prefix.<kind>" option
            options: Option lookup with a get_option(key) method. Defaults to
                an Options instance holding the default prefixes.
        """
        self._name = name
        self._kind = kind
        self._options = options if options is not None else Options()
        self._quote_char = '"'
        self._parameters: dict[int, str] = {}
        self._page_number_index = -1

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def quote_char(self) -> str:
        return self._quote_char

    @property
    def page_number_index(self) -> int:
        return self._page_number_index

    @property
    def parameters(self) -> list[str]:
        """The rendered arguments in order, with gaps filled."""
        if not self._parameters:
            return []
        length = max(self._parameters) + 1
        return [self._parameters.get(i, MISSING_PARAMETER) for i in range(length)]

    def use_single_quote(self) -> None:
        self._quote_char = "'"

    def use_double_quote(self) -> None:
        self._quote_char = '"'

    def clear_parameters(self) -> None:
        """Remove all parameter values.

        The page-number binding is left as it is. Callers that rebuild the
        argument list should bind the page number again.
        """
        self._parameters.clear()

    def has_page_number(self) -> bool:
        return self._page_number_index >= 0

    def set_page_number(self, page_number: Any) -> "Request":
        """Set the value of the page-number parameter.

        Ignored when no parameter is bound to the page number, or when the
        value is not a positive integer once coerced.

        Returns:
            This request, for chaining
        """
        number = _to_int(page_number)
        if self._page_number_index >= 0 and number > 0:
            self._parameters[self._page_number_index] = str(number)
        else:
            logger.debug(
                f"Page number {page_number!r} ignored for {self._name} "
                f"(bound index {self._page_number_index})"
            )
        return self

    def add_parameter(self, value_kind: str, value: Any) -> None:
        """Append a parameter after the last one."""
        self.set_parameter(len(self.parameters), value_kind, value)

    def set_parameter(self, index: int, value_kind: str, value: Any) -> None:
        """Render a value and store it at a given position.

        Value kinds are:
        - form-values: ID of the form whose field values are passed
        - input-value, checked-value, element-innerHTML: ID of the element
          whose value, checked state or inner HTML is passed
        - quoted-value: string data, passed as a string literal
        - boolean-value: passed as true or false
        - page-number: the current page, replaced later by set_page_number()
        - numeric-value, js-value: valid JavaScript, passed unchanged
          (a number, a variable in scope or an expression)

        Unknown value kinds are ignored.

        Raises:
            InvalidParameterIndex: If index is negative
        """
        if index < 0:
            raise InvalidParameterIndex(index)

        q = self._quote_char
        if value_kind == FORM_VALUES:
            rendered = f"jaxon.getFormValues({q}{value}{q})"
        elif value_kind == INPUT_VALUE:
            rendered = f"jaxon.$({q}{value}{q}).value"
        elif value_kind == CHECKED_VALUE:
            rendered = f"jaxon.$({q}{value}{q}).checked"
        elif value_kind == ELEMENT_INNERHTML:
            rendered = f"jaxon.$({q}{value}{q}).innerHTML"
        elif value_kind == QUOTED_VALUE:
            rendered = f"{q}{_add_slashes(str(value))}{q}"
        elif value_kind == BOOLEAN_VALUE:
            rendered = "true" if _is_truthy(value) else "false"
        elif value_kind == PAGE_NUMBER:
            self._page_number_index = index
            rendered = str(value)
        elif value_kind in (NUMERIC_VALUE, JS_VALUE):
            rendered = str(value)
        else:
            logger.warning(f"Ignoring parameter {index} of unknown kind '{value_kind}'")
            return

        self._parameters[index] = rendered

    def get_script(self) -> str:
        """Return the JavaScript call for this request."""
        prefix = self._options.get_option(f"prefix.{self._kind}")
        return f"{prefix}{self._name}({', '.join(self.parameters)})"

    def print_script(self) -> None:
        """Write the JavaScript call to stdout."""
        sys.stdout.write(self.get_script())

    def __str__(self) -> str:
        return self.get_script()

    def __repr__(self) -> str:
        return f"Request(name={self._name!r}, kind={self._kind!r})"
