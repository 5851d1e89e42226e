"""Process-wide index of platform types that every module can refer to."""

from xmldoc2md.descriptors import TypeDescriptor

PLATFORM_MODULE = "System.Private.CoreLib"

_WELL_KNOWN: dict[str, tuple[str, tuple[str, ...]]] = {
    # full name -> (kind, generic parameter names)
    "System.Object": ("class", ()),
    "System.ValueType": ("class", ()),
    "System.Enum": ("class", ()),
    "System.Void": ("struct", ()),
    "System.Boolean": ("struct", ()),
    "System.Byte": ("struct", ()),
    "System.SByte": ("struct", ()),
    "System.Char": ("struct", ()),
    "System.Int16": ("struct", ()),
    "System.UInt16": ("struct", ()),
    "System.Int32": ("struct", ()),
    "System.UInt32": ("struct", ()),
    "System.Int64": ("struct", ()),
    "System.UInt64": ("struct", ()),
    "System.IntPtr": ("struct", ()),
    "System.Single": ("struct", ()),
    "System.Double": ("struct", ()),
    "System.Decimal": ("struct", ()),
    "System.String": ("class", ()),
    "System.DateTime": ("struct", ()),
    "System.DateTimeOffset": ("struct", ()),
    "System.TimeSpan": ("struct", ()),
    "System.Guid": ("struct", ()),
    "System.Uri": ("class", ()),
    "System.Type": ("class", ()),
    "System.Array": ("class", ()),
    "System.Attribute": ("class", ()),
    "System.Delegate": ("class", ()),
    "System.MulticastDelegate": ("class", ()),
    "System.EventArgs": ("class", ()),
    "System.EventHandler": ("delegate", ()),
    "System.EventHandler`1": ("delegate", ("TEventArgs",)),
    "System.Action": ("delegate", ()),
    "System.Action`1": ("delegate", ("T",)),
    "System.Action`2": ("delegate", ("T1", "T2")),
    "System.Func`1": ("delegate", ("TResult",)),
    "System.Func`2": ("delegate", ("T", "TResult")),
    "System.Func`3": ("delegate", ("T1", "T2", "TResult")),
    "System.Nullable`1": ("struct", ("T",)),
    "System.IDisposable": ("interface", ()),
    "System.IComparable": ("interface", ()),
    "System.IComparable`1": ("interface", ("T",)),
    "System.IEquatable`1": ("interface", ("T",)),
    "System.ICloneable": ("interface", ()),
    "System.IFormattable": ("interface", ()),
    "System.IConvertible": ("interface", ()),
    "System.Exception": ("class", ()),
    "System.SystemException": ("class", ()),
    "System.ArgumentException": ("class", ()),
    "System.ArgumentNullException": ("class", ()),
    "System.ArgumentOutOfRangeException": ("class", ()),
    "System.InvalidOperationException": ("class", ()),
    "System.NotSupportedException": ("class", ()),
    "System.NotImplementedException": ("class", ()),
    "System.ObjectDisposedException": ("class", ()),
    "System.FormatException": ("class", ()),
    "System.IO.IOException": ("class", ()),
    "System.IO.Stream": ("class", ()),
    "System.Collections.IEnumerable": ("interface", ()),
    "System.Collections.IEnumerator": ("interface", ()),
    "System.Collections.Generic.IEnumerable`1": ("interface", ("T",)),
    "System.Collections.Generic.IEnumerator`1": ("interface", ("T",)),
    "System.Collections.Generic.ICollection`1": ("interface", ("T",)),
    "System.Collections.Generic.IList`1": ("interface", ("T",)),
    "System.Collections.Generic.IReadOnlyList`1": ("interface", ("T",)),
    "System.Collections.Generic.IReadOnlyCollection`1": ("interface", ("T",)),
    "System.Collections.Generic.IDictionary`2": ("interface", ("TKey", "TValue")),
    "System.Collections.Generic.IReadOnlyDictionary`2": (
        "interface",
        ("TKey", "TValue"),
    ),
    "System.Collections.Generic.List`1": ("class", ("T",)),
    "System.Collections.Generic.Dictionary`2": ("class", ("TKey", "TValue")),
    "System.Collections.Generic.HashSet`1": ("class", ("T",)),
    "System.Collections.Generic.KeyValuePair`2": ("struct", ("TKey", "TValue")),
    "System.Threading.CancellationToken": ("struct", ()),
    "System.Threading.Tasks.Task": ("class", ()),
    "System.Threading.Tasks.Task`1": ("class", ("TResult",)),
    "System.Threading.Tasks.ValueTask": ("struct", ()),
    "System.Threading.Tasks.ValueTask`1": ("struct", ("TResult",)),
}


def _build() -> dict[str, TypeDescriptor]:
    index = {}
    for full_name, (kind, generic_parameters) in _WELL_KNOWN.items():
        namespace = full_name.rsplit(".", 1)[0]
        index[full_name] = TypeDescriptor(
            full_name=full_name,
            namespace=namespace,
            kind=kind,
            module=PLATFORM_MODULE,
            generic_parameters=generic_parameters,
        )
    return index


WELL_KNOWN_TYPES: dict[str, TypeDescriptor] = _build()


def find_well_known_type(full_name: str) -> TypeDescriptor | None:
    """Look up a platform type by its documentation-id name."""
    return WELL_KNOWN_TYPES.get(full_name)
