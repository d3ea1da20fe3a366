# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import dataclasses
import enum
import inspect
from collections.abc import Iterable, Mapping
from itertools import count
from typing import Optional

from valuedump.common import log


class Visibility(enum.Enum):
    PUBLIC = "+"
    PROTECTED = "#"
    PRIVATE = "-"

    @property
    def symbol(self) -> str:
        return self.value


class _Uninitialized:
    def __repr__(self):
        return "UNINITIALIZED"


UNINITIALIZED = _Uninitialized()
"""Value of a field that is declared, but has not been assigned yet."""


@dataclasses.dataclass(frozen=True)
class FieldError:
    """Value of a field, item or iteration step that raised when it was read."""

    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FieldError":
        try:
            message = str(exc)
        except Exception:
            message = ""
        return cls(message or type(exc).__name__)


def is_sentinel(value: object) -> bool:
    return value is UNINITIALIZED or isinstance(value, FieldError)


class ChildObject:
    """
    Represents an object that is a child of another object that is accessible in some way.
    """

    value: object

    def __init__(self, value: object):
        self.value = value

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


class IndexedChildObject(ChildObject):
    """
    Item of a sequence or mapping: key is the index or the mapping key.
    """

    key: object

    def __init__(self, key: object, value: object):
        super().__init__(value)
        self.key = key


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """A named slot of a record."""

    name: str
    """Name as shown to the user. Mangled private names are shown unmangled."""

    attr: str
    """Name of the attribute that holds the value."""

    visibility: Visibility = Visibility.PUBLIC

    computed: bool = False
    """Whether the value is computed by a property getter."""


def visibility_of(name: str, owners: Iterable[type] = ()) -> tuple[str, Visibility]:
    """Returns the display name and visibility for an attribute name."""
    for owner in owners:
        prefix = f"_{owner.__name__.lstrip('_')}__"
        if name.startswith(prefix) and len(name) > len(prefix):
            return "__" + name[len(prefix) :], Visibility.PRIVATE
    if name.startswith("__") and not name.endswith("__"):
        return name, Visibility.PRIVATE
    if name.startswith("_") and not name.startswith("__"):
        return name, Visibility.PROTECTED
    return name, Visibility.PUBLIC


def _annotations_of(cls: type) -> Mapping:
    try:
        return inspect.get_annotations(cls)
    except Exception:
        # Unresolvable forward references.
        return cls.__dict__.get("__annotations__", {})


class RecordInspector:
    """
    Enumerates the fields of an arbitrary object, and reads their values.

    Fields are, in order: dataclass fields, annotated class attributes, __slots__,
    entries of the instance __dict__, and properties defined in Python code. Reads
    never raise; failures are reported as UNINITIALIZED or FieldError values.
    """

    value: object

    def __init__(self, value: object):
        self.value = value

    def _mro(self) -> tuple[type, ...]:
        try:
            return type(self.value).__mro__
        except Exception:
            return ()

    def _declared_names(self) -> Iterable[tuple[str, bool]]:
        mro = self._mro()

        if dataclasses.is_dataclass(self.value):
            for f in dataclasses.fields(self.value):
                yield f.name, False

        for cls in reversed(mro):
            annotations = _annotations_of(cls)
            for name, annotation in annotations.items():
                if "ClassVar" in str(annotation):
                    continue
                yield name, False

        for cls in reversed(mro):
            slots = cls.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name in ("__dict__", "__weakref__"):
                    continue
                if name.startswith("__") and not name.endswith("__"):
                    # Private slots are stored under the mangled name.
                    name = f"_{cls.__name__.lstrip('_')}{name}"
                yield name, False

        try:
            instance_dict = object.__getattribute__(self.value, "__dict__")
        except Exception:
            instance_dict = {}
        if isinstance(instance_dict, Mapping):
            for name in list(instance_dict.keys()):
                if isinstance(name, str):
                    yield name, False

        for cls in reversed(mro):
            if cls.__module__ == "builtins":
                continue
            for name, attr in list(cls.__dict__.items()):
                if isinstance(attr, property):
                    yield name, True

    def list_fields(self) -> list[FieldDescriptor]:
        owners = self._mro()
        fields = {}
        try:
            for attr, computed in self._declared_names():
                if attr in fields:
                    continue
                name, visibility = visibility_of(attr, owners)
                fields[attr] = FieldDescriptor(name, attr, visibility, computed)
        except Exception:
            log.exception(
                "Error enumerating fields of {0}.", type(self.value).__name__, level="debug"
            )
        return list(fields.values())

    def read_field(self, field: FieldDescriptor) -> object:
        try:
            return getattr(self.value, field.attr)
        except AttributeError as exc:
            if field.computed:
                return FieldError.from_exception(exc)
            return UNINITIALIZED
        except Exception as exc:
            return FieldError.from_exception(exc)

    def fields(
        self, include_protected: bool = True, include_private: bool = True
    ) -> list[FieldDescriptor]:
        """Like list_fields(), but filtered by visibility."""
        result = []
        for field in self.list_fields():
            if field.visibility is Visibility.PROTECTED and not include_protected:
                continue
            if field.visibility is Visibility.PRIVATE and not include_private:
                continue
            result.append(field)
        return result


class SequenceInspector:
    """
    Enumerates the items of a collection. Iteration failures end the enumeration,
    and are reported via error.
    """

    value: Iterable

    error: Optional[FieldError]
    """If iteration failed part way through, the reason why."""

    def __init__(self, value: Iterable):
        self.value = value
        self.error = None

    def count(self) -> int:
        try:
            return len(self.value)
        except Exception:
            return 0

    def items(self) -> Iterable[IndexedChildObject]:
        try:
            it = iter(self.value)
        except Exception as exc:
            self.error = FieldError.from_exception(exc)
            return
        for i in count():
            try:
                item = next(it)
            except StopIteration:
                break
            except Exception as exc:
                log.exception("Error retrieving next item.", level="debug")
                self.error = FieldError.from_exception(exc)
                break
            yield IndexedChildObject(i, item)


class MappingInspector(SequenceInspector):
    value: Mapping

    def items(self) -> Iterable[IndexedChildObject]:
        try:
            keys = self.value.keys()
            it = iter(keys)
        except Exception as exc:
            self.error = FieldError.from_exception(exc)
            return
        while True:
            try:
                key = next(it)
            except StopIteration:
                break
            except Exception as exc:
                log.exception("Error retrieving next key.", level="debug")
                self.error = FieldError.from_exception(exc)
                break
            try:
                value = self.value[key]
            except Exception as exc:
                value = FieldError.from_exception(exc)
            yield IndexedChildObject(key, value)


def inspect_children(value: object) -> SequenceInspector | RecordInspector:
    match value:
        case Mapping():
            return MappingInspector(value)
        case Iterable():
            return SequenceInspector(value)
        case _:
            return RecordInspector(value)
