"""Build client-side JavaScript calls to server functions, classes and events."""

from js_call_builder.factory import (
    RequestFactory,
    checked,
    form,
    html,
    input_value,
    js,
    page,
)
from js_call_builder.models import ParameterSpec, parse_parameter_spec
from js_call_builder.options import OptionNotFoundError, Options, OptionsLoadError
from js_call_builder.paginator import PageLink, paginate, render_links
from js_call_builder.request import InvalidParameterIndex, Request

__all__ = [
    # Requests
    "Request",
    "InvalidParameterIndex",
    # Options
    "Options",
    "OptionNotFoundError",
    "OptionsLoadError",
    # Parameters
    "ParameterSpec",
    "parse_parameter_spec",
    # Factory
    "RequestFactory",
    "form",
    "input_value",
    "checked",
    "html",
    "js",
    "page",
    # Pagination
    "PageLink",
    "paginate",
    "render_links",
]
