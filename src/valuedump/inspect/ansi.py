# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Flat, indented, colored rendering for terminals."""

from collections.abc import Iterable

from valuedump.inspect.colors import colorize
from valuedump.inspect.traversal import (
    CIRCULAR_MARKER,
    MAX_DEPTH_MARKER,
    RenderContext,
    Renderer,
    error_marker,
    int_text,
    more_elements_marker,
    sequence_brackets,
    type_name,
)


INDENT = "  "


class AnsiRenderer(Renderer):
    channel = "ansi"

    def render(self, values: Iterable[object], location=None) -> None:
        # Caller location is not shown on terminals.
        for i, value in enumerate(values):
            if i > 0:
                self.write("\n")
            self.render_top_level(value)
            self.write("\n")

    def indent(self, context: RenderContext) -> str:
        return INDENT * context.depth

    def begin_node(self, key: object, context: RenderContext) -> None:
        if not context.inline:
            self.write(self.indent(context))
        if key is not None:
            self.write(colorize(self.key_text(key), "key") + " => ")

    def end_node(self, context: RenderContext) -> None:
        pass

    def write_line(self, text: str, context: RenderContext) -> None:
        self.write(self.indent(context) + text + "\n")

    def render_string(self, value, key, context):
        prefix = "" if isinstance(value, str) else "b"
        text = prefix + '"' + self.string_text(value) + '"'
        self.write(colorize(text, "string") + f" ({len(value)})")

    def render_integer(self, value, key, context):
        self.write(colorize(int_text(value), "integer"))

    def render_float(self, value, key, context):
        self.write(colorize(repr(value), "float"))

    def render_boolean(self, value, key, context):
        self.write(colorize(repr(bool(value)), "boolean"))

    def render_null(self, value, key, context):
        self.write(colorize("None", "null"))

    def render_handle(self, value, key, context):
        self.write(colorize(f"resource({type_name(value)})", "handle"))

    def render_sequence(self, value, key, context):
        items, count, remaining, error = self.sequence_items(value)
        opening, closing = sequence_brackets(value)
        header = colorize(f"{type_name(value)}:{count}", "sequence")

        if not items and not remaining and error is None:
            self.write(f"{header} {opening}{closing}")
            return

        self.write(f"{header} {opening}\n")
        with context.entering(value):
            for item in items:
                self.render_node(item.value, item.key, context)
                self.write("\n")
            if remaining:
                self.write_line(colorize(more_elements_marker(remaining), "null"), context)
            if error is not None:
                self.write_line(colorize(error_marker(error), "null"), context)
        self.write(self.indent(context) + closing)

    def render_record(self, value, key, context):
        fields, remaining = self.record_fields(value)
        count = len(fields) + remaining
        header = colorize(f"{type_name(value)}:{count}", "record") + f" {{#{id(value)}"
        preview = self.record_preview(value)
        if preview is not None:
            header += " " + colorize(f'"{preview}"', "string")

        if not fields and not remaining:
            self.write(header + "}")
            return

        self.write(header + "\n")
        with context.entering(value):
            for field, field_value in fields:
                label = colorize(field.visibility.symbol + field.name, "field")
                self.write(self.indent(context) + label + ": ")
                with context.inline_value():
                    self.render_node(field_value, None, context)
                self.write("\n")
            if remaining:
                self.write_line(colorize(more_elements_marker(remaining), "null"), context)
        self.write(self.indent(context) + "}")

    def render_field_sentinel(self, value, context):
        self.write(colorize(self.sentinel_text(value), "null"))

    def render_circular_reference(self, value, context):
        text = f"{CIRCULAR_MARKER} {type_name(value)} #{id(value)}"
        self.write(colorize(text, "null"))

    def render_max_depth(self, context):
        self.write(colorize(MAX_DEPTH_MARKER, "null"))

    def render_unsupported(self, value, key, context):
        self.write(colorize(f"unknown({type_name(value)})", "null"))

