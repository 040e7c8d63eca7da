"""Click parameter types for lighting command fields."""

import click

from gled.exceptions import ArgumentValidationError
from gled.models import Color, FieldKind, Toggle
from gled.protocol import parse_field


class LedFieldType(click.ParamType):
    """
    Converts a command-line string into a validated field value.

    Validation failures become click usage errors, so the command's usage
    line is printed and the process exits nonzero before any USB access.
    """

    def __init__(self, kind: FieldKind):
        self.kind = kind
        self.name = kind.value

    def convert(self, value, param, ctx):
        # Defaults arrive already converted
        if isinstance(value, (Color, Toggle, int)):
            return value
        try:
            return parse_field(self.kind, value)
        except ArgumentValidationError as e:
            self.fail(e.get_full_message(), param, ctx)


COLOR = LedFieldType(FieldKind.COLOR)
RATE = LedFieldType(FieldKind.RATE)
BRIGHTNESS = LedFieldType(FieldKind.BRIGHTNESS)
TOGGLE = LedFieldType(FieldKind.TOGGLE)
