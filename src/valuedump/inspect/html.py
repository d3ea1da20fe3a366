# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""
Interactive rendering as an html fragment.

Every non-empty sequence and record becomes a collapsible block; clicking its header
toggles it. The style sheet and the toggle script are written once per process,
before the first fragment, and are shared by all fragments that follow.
"""

import html
import threading
from collections.abc import Iterable
from typing import ClassVar, Optional

from valuedump.inspect import assets
from valuedump.inspect.children import Visibility
from valuedump.inspect.colors import color_for
from valuedump.inspect.traversal import (
    CIRCULAR_MARKER,
    MAX_DEPTH_MARKER,
    RenderContext,
    Renderer,
    error_marker,
    int_text,
    more_elements_marker,
    new_node_id,
    sequence_brackets,
    type_name,
)
from valuedump.location import Location


VISIBILITY_CLASSES = {
    Visibility.PUBLIC: "",
    Visibility.PROTECTED: "vdump-protected",
    Visibility.PRIVATE: "vdump-private",
}


def span(text: str, category: str, css_class: str = "") -> str:
    """Returns text, escaped, in a span colored for category."""
    class_attr = f' class="{css_class}"' if css_class else ""
    color = color_for("html", category)
    return f'<span{class_attr} style="color: {color}">{html.escape(text)}</span>'


class HtmlRenderer(Renderer):
    channel = "html"

    _assets_emitted: ClassVar[bool] = False
    _assets_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def claim_assets(cls) -> bool:
        """
        Returns True exactly once per process; the caller that gets True must write
        the shared assets.
        """
        with cls._assets_lock:
            if cls._assets_emitted:
                return False
            cls._assets_emitted = True
            return True

    def render(self, values: Iterable[object], location: Optional[Location] = None):
        if self.claim_assets():
            self.write(assets.STYLE_SHEET)
            self.write(assets.SCRIPT)

        for value in values:
            self.write('<div class="vdump">')
            if location is not None:
                self.render_location(location)
            self.render_top_level(value)
            self.write("</div>")

    def render_location(self, location: Location) -> None:
        scope = location.scope or location.filename
        self.write('<div class="vdump-location">')
        self.write(f'<span class="vdump-location-scope">{html.escape(scope)}</span>')
        self.write(
            f'<span class="vdump-location-path" title="{html.escape(str(location))}">'
            f"{html.escape(location.filename)}:{location.line}</span>"
        )
        self.write("</div>")

    def begin_node(self, key: object, context: RenderContext) -> None:
        if not context.inline:
            self.write('<div class="vdump-line">')
        if key is not None:
            self.write(span(self.key_text(key), "key", "vdump-key") + " =&gt; ")

    def end_node(self, context: RenderContext) -> None:
        if not context.inline:
            self.write("</div>")

    def begin_block(self, header: str) -> int:
        """Writes the opening of a collapsible block, and returns its ID."""
        node_id = new_node_id()
        self.write(f'<div id="vdump-{node_id}" class="vdump-item">')
        self.write(f'<span class="vdump-expandable" onclick="vdumpToggle({node_id})">')
        self.write('<span class="vdump-toggle">−</span>')
        self.write(header)
        self.write("</span>")
        self.write('<div class="vdump-content">')
        return node_id

    def end_block(self, closing: str) -> None:
        self.write("</div>")
        self.write(html.escape(closing))
        self.write("</div>")

    def write_marker_line(self, text: str) -> None:
        self.write('<div class="vdump-line">' + span(text, "null") + "</div>")

    def render_string(self, value, key, context):
        prefix = "" if isinstance(value, str) else "b"
        self.write(span(prefix + '"' + self.string_text(value) + '"', "string"))
        self.write(f'<span class="vdump-length">({len(value)})</span>')

    def render_integer(self, value, key, context):
        self.write(span(int_text(value), "integer"))

    def render_float(self, value, key, context):
        self.write(span(repr(value), "float"))

    def render_boolean(self, value, key, context):
        self.write(span(repr(bool(value)), "boolean"))

    def render_null(self, value, key, context):
        self.write(span("None", "null"))

    def render_handle(self, value, key, context):
        self.write(span(f"resource({type_name(value)})", "handle"))

    def render_sequence(self, value, key, context):
        items, count, remaining, error = self.sequence_items(value)
        opening, closing = sequence_brackets(value)
        label = span(f"{type_name(value)}:{count}", "sequence")

        if not items and not remaining and error is None:
            self.write(f"{label} {html.escape(opening + closing)}")
            return

        header = f"{label} {html.escape(opening)}"
        if remaining:
            header += f'<span class="vdump-type">showing {len(items)} of {count}</span>'
        self.begin_block(header)
        with context.entering(value):
            for item in items:
                self.render_node(item.value, item.key, context)
            if remaining:
                self.write_marker_line(more_elements_marker(remaining))
            if error is not None:
                self.write_marker_line(error_marker(error))
        self.end_block(closing)

    def render_record(self, value, key, context):
        fields, remaining = self.record_fields(value)
        count = len(fields) + remaining
        header = span(f"{type_name(value)}:{count}", "record") + f" {{#{id(value)}"
        preview = self.record_preview(value)
        if preview is not None:
            header += " " + span(f'"{preview}"', "string")
        if remaining:
            header += f'<span class="vdump-type">showing {len(fields)} of {count}</span>'

        if not fields and not remaining:
            self.write(header + "}")
            return

        self.begin_block(header)
        with context.entering(value):
            for field, field_value in fields:
                css_class = VISIBILITY_CLASSES[field.visibility]
                label = field.visibility.symbol + field.name
                self.write('<div class="vdump-line">' + span(label, "field", css_class) + ": ")
                with context.inline_value():
                    self.render_node(field_value, None, context)
                self.write("</div>")
            if remaining:
                self.write_marker_line(more_elements_marker(remaining))
        self.end_block("}")

    def render_field_sentinel(self, value, context):
        self.write(span(self.sentinel_text(value), "null"))

    def render_circular_reference(self, value, context):
        self.write(span(f"{CIRCULAR_MARKER} {type_name(value)} #{id(value)}", "null"))

    def render_max_depth(self, context):
        self.write(span(MAX_DEPTH_MARKER, "null"))

    def render_unsupported(self, value, key, context):
        self.write(span(f"unknown({type_name(value)})", "null"))
