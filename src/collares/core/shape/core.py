"""Shape introspection.

Derives the member descriptors of a runtime type from dataclass fields,
Pydantic model fields, property descriptors and annotated attributes of plain
classes. Nothing is cached; every call inspects the type again.

Usage:
    @dataclass
    class Item:
        product: str
        price: Decimal

    shape = shape_of(Item("apples", Decimal("3.49")))
    [m.name for m in shape.writable()]  # ["product", "price"]
"""

from __future__ import annotations

import dataclasses
import inspect
import os
import sys
import warnings
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any, ClassVar, Final, TypeVar, get_args, get_origin

from collares.core.shape.models import Member, MemberKind, Shape, ShapeWarning, Visibility

_MISSING = object()
_PACKAGE_DIR = str(Path(__file__).absolute().parents[2]) + os.sep
_CLASS_LEVEL_PREFIXES = ("ClassVar", "typing.ClassVar", "InitVar", "dataclasses.InitVar")


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _is_library_base(klass: type) -> bool:
    """Bases whose own members never take part in a shape."""
    module = klass.__module__
    return klass is object or module == "pydantic" or module.startswith("pydantic.")


def _warn_unresolved(owner: Any, name: str, error: NameError) -> None:
    # Attributed to the first frame outside this package
    warnings.warn(
        f"Cannot resolve annotation of {getattr(owner, '__qualname__', owner)!r}.{name}: "
        f"{error}. The member will be compared by annotation text.",
        ShapeWarning,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )


def _annotations(obj: Any) -> dict[str, Any]:
    """Evaluate annotations of a class or function, one name at a time.

    A string annotation that cannot be resolved, e.g. a name imported only
    under ``TYPE_CHECKING``, keeps its raw text. The other annotations of the
    same object are still evaluated.
    """
    raw = inspect.get_annotations(obj)
    if isinstance(obj, type):
        module = sys.modules.get(obj.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns: dict[str, Any] | None = dict(vars(obj))
    else:
        globalns = getattr(inspect.unwrap(obj), "__globals__", {})
        localns = None

    resolved: dict[str, Any] = {}
    for name, annotation in raw.items():
        if not isinstance(annotation, str):
            resolved[name] = annotation
            continue
        try:
            resolved[name] = eval(annotation, globalns, localns)
        except NameError as e:
            _warn_unresolved(obj, name, e)
            resolved[name] = annotation
    return resolved


def _class_annotations(cls: type) -> dict[str, Any]:
    """Collect annotations over the MRO, most derived first."""
    hints: dict[str, Any] = {}
    for klass in cls.__mro__:
        if _is_library_base(klass):
            continue
        for name, annotation in _annotations(klass).items():
            hints.setdefault(name, annotation)
    return hints


def _is_class_level(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(_CLASS_LEVEL_PREFIXES)
    return (
        annotation is ClassVar
        or get_origin(annotation) is ClassVar
        or isinstance(annotation, dataclasses.InitVar)
    )


def _unwrap_final(annotation: Any) -> tuple[Any, bool]:
    if isinstance(annotation, str):
        return annotation, annotation.startswith(("Final", "typing.Final"))
    if annotation is Final:
        return Any, True
    if get_origin(annotation) is Final:
        return get_args(annotation)[0], True
    return annotation, False


def _declared(annotation: Any) -> tuple[Any, Visibility, bool]:
    """Split an annotation into (declared type, visibility, is final).

    Visibility markers are removed from ``Annotated`` metadata; any other
    metadata stays part of the declared type.
    """
    annotation, final = _unwrap_final(annotation)
    if get_origin(annotation) is not Annotated:
        return annotation, Visibility.PUBLIC, final

    base, *metadata = get_args(annotation)
    base, inner_final = _unwrap_final(base)
    visibility = next((m for m in metadata if isinstance(m, Visibility)), Visibility.PUBLIC)
    extras = tuple(m for m in metadata if not isinstance(m, Visibility))
    declared = Annotated[(base, *extras)] if extras else base
    return declared, visibility, final or inner_final


def _member(
    name: str, annotation: Any, kind: MemberKind, *, readable: bool, writable: bool
) -> Member:
    declared, visibility, final = _declared(annotation)
    return Member(
        name=name,
        type=declared,
        readable=readable,
        writable=writable and not final,
        kind=kind,
        visibility=visibility,
    )


def _is_generic(annotation: Any) -> bool:
    """Check if an annotation still mentions a type variable."""
    if isinstance(annotation, TypeVar):
        return True
    return any(_is_generic(arg) for arg in get_args(annotation))


def _field_members(cls: type, hints: dict[str, Any]) -> Iterator[Member]:
    if dataclasses.is_dataclass(cls):
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
        for f in dataclasses.fields(cls):
            yield _member(
                f.name,
                hints.get(f.name, f.type),
                MemberKind.FIELD,
                readable=True,
                writable=not frozen,
            )
    elif _is_pydantic(cls):
        frozen = bool(cls.model_config.get("frozen"))  # type: ignore[attr-defined]
        for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
            annotation = hints.get(name, _MISSING)
            if annotation is _MISSING or isinstance(annotation, str) or _is_generic(annotation):
                # FieldInfo holds the resolved, parametrized annotation but
                # keeps Annotated metadata apart in FieldInfo.metadata
                annotation = info.annotation
                markers = [m for m in info.metadata if isinstance(m, Visibility)]
                if markers:
                    annotation = Annotated[annotation, markers[0]]
            yield _member(
                name,
                annotation,
                MemberKind.FIELD,
                readable=True,
                writable=not (frozen or info.frozen),
            )


def _property_annotation(prop: property) -> Any:
    """Declared type of a property: getter return type, else setter value type."""
    if prop.fget is not None:
        hints = _annotations(prop.fget)
        if "return" in hints:
            return hints["return"]
    if prop.fset is not None:
        hints = _annotations(prop.fset)
        params = list(inspect.signature(prop.fset).parameters)
        if len(params) >= 2 and params[1] in hints:
            return hints[params[1]]
    return _MISSING


def _property_members(cls: type) -> Iterator[Member]:
    seen: set[str] = set()
    for klass in cls.__mro__:
        if _is_library_base(klass):
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            # Any redefinition in a subclass hides the base property
            seen.add(name)
            if not isinstance(attr, property):
                continue
            annotation = _property_annotation(attr)
            if annotation is _MISSING:
                continue
            yield _member(
                name,
                annotation,
                MemberKind.PROPERTY,
                readable=attr.fget is not None,
                writable=attr.fset is not None,
            )


def _annotation_members(hints: dict[str, Any], taken: set[str]) -> Iterator[Member]:
    for name, annotation in hints.items():
        if name in taken or _is_class_level(annotation):
            continue
        yield _member(name, annotation, MemberKind.ANNOTATION, readable=True, writable=True)


def shape_of(
    value: Any, *, include_properties: bool = True, include_annotations: bool = True
) -> Shape:
    """Introspect the shape of a value's runtime type.

    Args:
        value: Instance to inspect, or a type to inspect directly.
        include_properties: Include property descriptors.
        include_annotations: Include annotated attributes that are not
            dataclass or Pydantic fields.

    Returns:
        Shape with one member per declared name. Members are enumerated
        fields first, then properties, then plain annotations; the first
        definition of a name wins.
    """
    cls = value if isinstance(value, type) else type(value)
    hints = _class_annotations(cls)

    members: dict[str, Member] = {}
    for member in _field_members(cls, hints):
        members.setdefault(member.name, member)
    if include_properties:
        for member in _property_members(cls):
            members.setdefault(member.name, member)
    if include_annotations:
        for member in _annotation_members(hints, set(members)):
            members.setdefault(member.name, member)

    return Shape(owner=cls, members=tuple(members.values()))
