# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""
Walks a value tree and drives a channel-specific renderer over it.

Renderer implements the parts that are the same for every channel: cycle detection,
depth limits, kind dispatch, truncation and field enumeration. Subclasses provide the
per-kind render_* methods, and the begin_node() / end_node() pair that frames every
node in the output.
"""

import contextlib
import datetime
import io
import itertools
import sys
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import ClassVar, Optional, TextIO

from valuedump.common import log
from valuedump.inspect import Options
from valuedump.inspect.children import (
    UNINITIALIZED,
    FieldDescriptor,
    FieldError,
    IndexedChildObject,
    RecordInspector,
    SequenceInspector,
    inspect_children,
    is_sentinel,
)
from valuedump.inspect.kinds import Kind, classify

KindRenderer = Callable[[object, object, "RenderContext"], None]


MAX_DEPTH_MARKER = "*MAX DEPTH REACHED*"
CIRCULAR_MARKER = "*CIRCULAR REFERENCE*"
TRUNCATED_MARKER = "... [truncated]"
UNINITIALIZED_MARKER = "*** uninitialized ***"


# Unique IDs for collapsible nodes. They are never reused for the lifetime of the
# process, so that fragments emitted by different dump() calls into the same page
# do not clash.
_node_ids = itertools.count(1)
_lock = threading.Lock()


def new_node_id() -> int:
    """Returns the next unique node ID."""
    with _lock:
        return next(_node_ids)


def error_marker(error: FieldError) -> str:
    return f"*** error: {error.message} ***"


def more_elements_marker(remaining: int) -> str:
    return f"… and {remaining} more elements"


class RenderContext:
    """State of a single top-level render pass."""

    depth: int
    """How many composites enclose the node being rendered."""

    inline: bool
    """
    Whether the node continues a line that the caller has already started, e.g. the
    value of a record field following its label.
    """

    visited: set[int]
    """id() of every composite on the path from the root to the current node."""

    def __init__(self):
        self.depth = 0
        self.inline = False
        self.visited = set()

    def is_visiting(self, value: object) -> bool:
        return id(value) in self.visited

    @contextlib.contextmanager
    def entering(self, value: object):
        """Brackets rendering of the children of a composite value."""
        token = id(value)
        assert token not in self.visited
        inline = self.inline
        self.visited.add(token)
        self.depth += 1
        self.inline = False
        try:
            yield
        finally:
            self.inline = inline
            self.depth -= 1
            self.visited.discard(token)

    @contextlib.contextmanager
    def inline_value(self):
        inline = self.inline
        self.inline = True
        try:
            yield
        finally:
            self.inline = inline


class Renderer:
    """Base class for channel renderers."""

    channel: ClassVar[str] = None

    options: Options

    stream: Optional[TextIO]
    """Where output goes. If None, sys.stdout at the time of writing."""

    kinds: dict[Kind, KindRenderer]

    def __init__(self, options: Optional[Options] = None, stream: Optional[TextIO] = None):
        self.options = Options() if options is None else options.copy()
        self.stream = stream
        self.kinds = self.kind_renderers()

    def kind_renderers(self) -> dict[Kind, KindRenderer]:
        """Returns the dispatch table. Override to add or replace entries."""
        return {
            Kind.STRING: self.render_string,
            Kind.INTEGER: self.render_integer,
            Kind.FLOAT: self.render_float,
            Kind.BOOLEAN: self.render_boolean,
            Kind.NULL: self.render_null,
            Kind.SEQUENCE: self.render_sequence,
            Kind.RECORD: self.render_record,
            Kind.EXTERNAL_HANDLE: self.render_handle,
        }

    def set_option(self, key: str, value: object) -> None:
        self.options.set(key, value)

    def write(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)

    def render(self, values: Iterable[object], location=None) -> None:
        raise NotImplementedError

    def render_to_string(self, values: Iterable[object], location=None) -> str:
        stream = self.stream
        self.stream = io.StringIO()
        try:
            self.render(values, location)
            return self.stream.getvalue()
        finally:
            self.stream = stream

    def render_top_level(self, value: object) -> None:
        context = RenderContext()
        self.render_node(value, None, context)
        assert not context.visited

    def render_node(self, value: object, key: object, context: RenderContext) -> None:
        self.begin_node(key, context)
        self.render_value(value, key, context)
        self.end_node(context)

    def render_value(self, value: object, key: object, context: RenderContext) -> None:
        if is_sentinel(value):
            self.render_field_sentinel(value, context)
            return

        kind = classify(value)
        if kind.is_composite and context.is_visiting(value):
            self.render_circular_reference(value, context)
            return

        if context.depth > self.options.max_depth:
            self.render_max_depth(context)
            return

        renderer = self.kinds.get(kind)
        if renderer is None:
            self.render_unsupported(value, key, context)
        else:
            renderer(value, key, context)

    # Framing, implemented by channels.

    def begin_node(self, key: object, context: RenderContext) -> None:
        raise NotImplementedError

    def end_node(self, context: RenderContext) -> None:
        raise NotImplementedError

    # Per-kind renderers, implemented by channels.

    def render_string(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_integer(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_float(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_boolean(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_null(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_sequence(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_record(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    def render_handle(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    # Sentinels, implemented by channels.

    def render_field_sentinel(self, value: object, context: RenderContext) -> None:
        raise NotImplementedError

    def render_circular_reference(self, value: object, context: RenderContext) -> None:
        raise NotImplementedError

    def render_max_depth(self, context: RenderContext) -> None:
        raise NotImplementedError

    def render_unsupported(self, value, key, context: RenderContext) -> None:
        raise NotImplementedError

    # Helpers shared by all channels.

    def truncate(self, text: str) -> tuple[str, bool]:
        """Returns text cut down to max_string_length, and whether it was cut."""
        limit = self.options.max_string_length
        if len(text) <= limit:
            return text, False
        return text[:limit] + TRUNCATED_MARKER, True

    def string_text(self, value: str | bytes | bytearray) -> str:
        if isinstance(value, str):
            text = value
        else:
            text = bytes(value).decode("utf-8", "backslashreplace")
        text, _ = self.truncate(text)
        return text

    def sentinel_text(self, value: object) -> str:
        if value is UNINITIALIZED:
            return UNINITIALIZED_MARKER
        return error_marker(value)

    def key_text(self, key: object) -> str:
        if isinstance(key, str):
            return '"' + self.truncate(key)[0] + '"'
        try:
            text = repr(key)
        except Exception:
            text = f"<{type_name(key)}>"
        return self.truncate(text)[0]

    def sequence_items(
        self, value: object
    ) -> tuple[list[IndexedChildObject], int, int, Optional[FieldError]]:
        """
        Returns the items of a sequence that should be shown, the size of the sequence,
        how many more items should be reported as not shown, and the error that
        interrupted iteration, if any.
        """
        inspector = inspect_children(value)
        assert isinstance(inspector, SequenceInspector)
        limit = max(self.options.max_sequence_elements, 0)
        items = list(itertools.islice(inspector.items(), limit))
        count = max(inspector.count(), len(items))
        remaining = 0 if inspector.error else count - len(items)
        return items, count, remaining, inspector.error

    def record_fields(
        self, value: object
    ) -> tuple[list[tuple[FieldDescriptor, object]], int]:
        """
        Returns the visible fields of a record that should be shown paired with their
        values, and how many more visible fields there are.
        """
        inspector = RecordInspector(value)
        fields = inspector.fields(
            include_protected=self.options.include_protected_fields,
            include_private=self.options.include_private_fields,
        )
        limit = max(self.options.max_sequence_elements, 0)
        shown = [(field, inspector.read_field(field)) for field in fields[:limit]]
        return shown, len(fields) - len(shown)

    def record_preview(self, value: object) -> Optional[str]:
        """
        Returns a short textual summary of a record, or None if it doesn't have one.
        """
        match value:
            case datetime.datetime():
                text = value.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()
            case datetime.date():
                text = value.strftime("%Y-%m-%d")
            case datetime.time():
                text = value.isoformat()
            case _:
                if type(value).__str__ is object.__str__:
                    return None
                try:
                    text = str(value)
                except Exception as exc:
                    log.debug("str() failed for {0}: {1!r}", type_name(value), exc)
                    return preview_error(exc)
        return self.truncate(text)[0]


def preview_error(exc: BaseException) -> str:
    try:
        return f"<str() error: {exc}>"
    except Exception:
        return "<str() error>"


def type_name(value: object) -> str:
    try:
        return type(value).__qualname__
    except Exception:
        return "object"


def sequence_brackets(value: object) -> tuple[str, str]:
    match value:
        case Mapping() | set() | frozenset():
            return "{", "}"
        case tuple():
            return "(", ")"
        case _:
            return "[", "]"


def int_text(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Exceeds sys.get_int_max_str_digits().
        return hex(value)
