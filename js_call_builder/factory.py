"""Create requests from plain Python values."""

import logging
import math
from typing import Any

from js_call_builder.models import (
    BOOLEAN_VALUE,
    CHECKED_VALUE,
    CLASS,
    ELEMENT_INNERHTML,
    EVENT,
    FORM_VALUES,
    FUNCTION,
    INPUT_VALUE,
    JS_VALUE,
    NUMERIC_VALUE,
    PAGE_NUMBER,
    QUOTED_VALUE,
    ParameterSpec,
)
from js_call_builder.options import Options
from js_call_builder.request import Request

logger = logging.getLogger(__name__)


def form(form_id: str) -> ParameterSpec:
    """Pass all field values of a form."""
    return ParameterSpec(FORM_VALUES, form_id)


def input_value(element_id: str) -> ParameterSpec:
    """Pass the value of an input element."""
    return ParameterSpec(INPUT_VALUE, element_id)


def checked(element_id: str) -> ParameterSpec:
    """Pass the checked state of a checkbox or radio button."""
    return ParameterSpec(CHECKED_VALUE, element_id)


def html(element_id: str) -> ParameterSpec:
    """Pass the inner HTML of an element."""
    return ParameterSpec(ELEMENT_INNERHTML, element_id)


def js(expression: str) -> ParameterSpec:
    """Pass a JavaScript expression unchanged."""
    return ParameterSpec(JS_VALUE, expression)


def page(default: int = 1) -> ParameterSpec:
    """Pass the page number, to be set later by a paginator."""
    return ParameterSpec(PAGE_NUMBER, default)


def _non_finite_literal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def to_parameter_spec(value: Any) -> ParameterSpec:
    """Pick the value kind for a Python value.

    ParameterSpecs are kept as they are, booleans and numbers are passed as
    literals (NaN and infinities as their JavaScript names), None as null,
    and everything else as a quoted string.
    """
    if isinstance(value, ParameterSpec):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ParameterSpec(BOOLEAN_VALUE, value)
    if isinstance(value, float) and not math.isfinite(value):
        return ParameterSpec(NUMERIC_VALUE, _non_finite_literal(value))
    if isinstance(value, (int, float)):
        return ParameterSpec(NUMERIC_VALUE, value)
    if value is None:
        return ParameterSpec(JS_VALUE, "null")
    return ParameterSpec(QUOTED_VALUE, str(value))


class RequestFactory:
    """Create requests sharing the same options and quote style."""

    def __init__(self, options=None, single_quote: bool = False):
        self._options = options if options is not None else Options()
        self._single_quote = single_quote

    def call(self, name: str, *args: Any) -> Request:
        """Create a request to a registered function."""
        return self._make(name, FUNCTION, args)

    def cls(self, class_name: str, method: str, *args: Any) -> Request:
        """Create a request to a method of a registered class."""
        return self._make(f"{class_name}.{method}", CLASS, args)

    def event(self, name: str, *args: Any) -> Request:
        """Create a request to an event handler."""
        return self._make(name, EVENT, args)

    def _make(self, name: str, kind: str, args: tuple) -> Request:
        request = Request(name, kind, self._options)
        if self._single_quote:
            request.use_single_quote()
        for arg in args:
            spec = to_parameter_spec(arg)
            request.add_parameter(spec.value_kind, spec.value)
        logger.debug(f"Created {kind} request {name} with {len(args)} parameters")
        return request
