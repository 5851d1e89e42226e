"""Shared fixtures: a small documented module and its XML documentation."""

import pytest

from xmldoc2md.descriptors import (
    MemberDescriptor,
    MemberKind,
    Parameter,
    TypeDescriptor,
    Visibility,
)
from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.metadata_universe import MetadataUniverse

DOCS_XML = """<?xml version="1.0"?>
<doc>
  <assembly><name>Lib</name></assembly>
  <members>
    <member name="T:Lib.Widget">
      <summary>A widget that renders <see cref="T:Lib.Color"/> values.</summary>
      <remarks>Use with care.</remarks>
    </member>
    <member name="M:Lib.Widget.#ctor(System.Int32)">
      <summary>Creates a widget.</summary>
      <param name="size">The size.</param>
    </member>
    <member name="P:Lib.Widget.Size">
      <summary>Gets the size.</summary>
      <value>Size in pixels.</value>
    </member>
    <member name="M:Lib.Widget.Render(System.Int32,System.String)">
      <summary>Renders the widget.</summary>
      <param name="width">The width.</param>
      <param name="title">The title.</param>
      <returns>The markup.</returns>
      <exception cref="T:System.ArgumentException">Width is negative.</exception>
    </member>
    <member name="T:Lib.Color">
      <summary>Colors.</summary>
    </member>
    <member name="F:Lib.Color.Default">
      <summary>The default color.</summary>
    </member>
    <member name="F:Lib.Color.First">
      <summary>The first color.</summary>
    </member>
    <member name="T:Lib.Box`1">
      <summary>Holds one value.</summary>
      <typeparam name="T">The value type.</typeparam>
    </member>
  </members>
</doc>
"""


def method(
    name: str,
    declaring_type: str = "Lib.Widget",
    params: tuple[tuple[str, str], ...] = (),
    **kwargs: object,
) -> MemberDescriptor:
    """Create a method descriptor from (name, type) parameter pairs."""
    return MemberDescriptor(
        kind=MemberKind.METHOD,
        name=name,
        declaring_type=declaring_type,
        parameters=tuple(
            Parameter(name=n, type=t, position=i) for i, (n, t) in enumerate(params)
        ),
        **kwargs,
    )


def widget_type() -> TypeDescriptor:
    """A class with one member of most kinds plus members that stay hidden."""
    return TypeDescriptor(
        full_name="Lib.Widget",
        namespace="Lib",
        kind="class",
        module="Lib",
        signature="public class Widget : IDisposable",
        base_types=("System.Object",),
        implements=("System.IDisposable",),
        members=(
            MemberDescriptor(
                kind=MemberKind.FIELD,
                name="<Size>k__BackingField",
                declaring_type="Lib.Widget",
                visibility=Visibility.PRIVATE,
            ),
            MemberDescriptor(
                kind=MemberKind.PROPERTY,
                name="Size",
                declaring_type="Lib.Widget",
                signature="public int Size { get; }",
                return_type="System.Int32",
            ),
            MemberDescriptor(
                kind=MemberKind.CONSTRUCTOR,
                name=".ctor",
                declaring_type="Lib.Widget",
                signature="public Widget(int size)",
                parameters=(Parameter("size", "System.Int32", 0),),
            ),
            method(
                "Render",
                params=(("width", "System.Int32"), ("title", "System.String")),
                signature="public string Render(int width, string title)",
                return_type="System.String",
            ),
            method("Dispose", signature="public void Dispose()"),
            method("Helper", visibility=Visibility.INTERNAL),
            method("get_Size", special_name=True, return_type="System.Int32"),
        ),
    )


def color_type() -> TypeDescriptor:
    """An enumeration with one undocumented field."""
    fields = [
        MemberDescriptor(
            kind=MemberKind.FIELD,
            name="value__",
            declaring_type="Lib.Color",
            special_name=True,
        )
    ]
    for value, name in enumerate(("Default", "First", "Hidden")):
        fields.append(
            MemberDescriptor(
                kind=MemberKind.FIELD,
                name=name,
                declaring_type="Lib.Color",
                is_static=True,
                value=value,
            )
        )
    return TypeDescriptor(
        full_name="Lib.Color",
        namespace="Lib",
        kind="enum",
        module="Lib",
        signature="public enum Color",
        members=tuple(fields),
    )


def box_type() -> TypeDescriptor:
    """A generic class with a generic method."""
    return TypeDescriptor(
        full_name="Lib.Box`1",
        namespace="Lib",
        kind="class",
        module="Lib",
        generic_parameters=("T",),
        members=(
            method(
                "Map",
                declaring_type="Lib.Box`1",
                params=(("mapper", "System.Func{`0,``0}"),),
                generic_parameters=("TResult",),
                return_type="Lib.Box{``0}",
            ),
        ),
    )


@pytest.fixture
def universe() -> MetadataUniverse:
    """Fixture providing the sample module."""
    return MetadataUniverse("Lib", [widget_type(), color_type(), box_type()])


@pytest.fixture
def docs() -> DocumentationIndex:
    """Fixture providing the documentation of the sample module."""
    return DocumentationIndex.from_string(DOCS_XML)
