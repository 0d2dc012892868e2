"""Value kinds, target kinds and parameter specs for call expressions."""

from dataclasses import dataclass
from typing import Any

# Target kinds: select which "prefix.<kind>" option names the call
FUNCTION = "function"
CLASS = "class"
EVENT = "event"

TARGET_KINDS = (FUNCTION, CLASS, EVENT)

# Value kinds: how a raw value becomes argument text
FORM_VALUES = "form-values"
INPUT_VALUE = "input-value"
CHECKED_VALUE = "checked-value"
ELEMENT_INNERHTML = "element-innerHTML"
QUOTED_VALUE = "quoted-value"
BOOLEAN_VALUE = "boolean-value"
PAGE_NUMBER = "page-number"
NUMERIC_VALUE = "numeric-value"
JS_VALUE = "js-value"

VALUE_KINDS = (
    FORM_VALUES,
    INPUT_VALUE,
    CHECKED_VALUE,
    ELEMENT_INNERHTML,
    QUOTED_VALUE,
    BOOLEAN_VALUE,
    PAGE_NUMBER,
    NUMERIC_VALUE,
    JS_VALUE,
)

# Short names accepted on the command line
VALUE_KIND_ALIASES = {
    "form": FORM_VALUES,
    "input": INPUT_VALUE,
    "checked": CHECKED_VALUE,
    "html": ELEMENT_INNERHTML,
    "quoted": QUOTED_VALUE,
    "str": QUOTED_VALUE,
    "bool": BOOLEAN_VALUE,
    "page": PAGE_NUMBER,
    "num": NUMERIC_VALUE,
    "js": JS_VALUE,
}

# Boolean words accepted as text, since "false" is a non-empty string
BOOLEAN_WORDS = {"true": True, "false": False}


@dataclass
class ParameterSpec:
    """A raw parameter value tagged with the kind used to render it."""

    value_kind: str
    value: Any


def resolve_value_kind(name: str) -> str:
    """Map an alias to its canonical value kind.

    Unrecognized names are returned unchanged.
    """
    return VALUE_KIND_ALIASES.get(name, name)


def parse_parameter_spec(text: str) -> ParameterSpec:
    """Parse a ``kind=value`` string into a ParameterSpec.

    Only the first ``=`` separates kind from value, so values may contain
    ``=`` themselves. Boolean values spelled ``true`` or ``false`` (any case)
    become real booleans.

    Raises:
        ValueError: If the text has no ``=`` or an empty kind
    """
    kind, sep, value = text.partition("=")
    kind = kind.strip()
    if not sep or not kind:
        raise ValueError(f"Invalid parameter '{text}', expected KIND=VALUE")
    value_kind = resolve_value_kind(kind)
    if value_kind == BOOLEAN_VALUE:
        word = value.strip().lower()
        if word in BOOLEAN_WORDS:
            return ParameterSpec(value_kind=value_kind, value=BOOLEAN_WORDS[word])
    return ParameterSpec(value_kind=value_kind, value=value)
