"""
Classes & functions that represent core elements of the PDF syntax

Most of what happens in a PDF happens in objects, which are formatted like so:
```
3 0 obj
<< /FunctionType 2 /Domain [0 1] /C0 [1 0 0] /C1 [0 0 1] /N 1 >>
endobj
```

The first line says that this is the third object in the structure of the document.

There are 8 kinds of objects (Adobe Reference, 51):

* Boolean values
* Integer and real numbers
* Strings
* Names
* Arrays
* Dictionaries
* Streams
* The null object

The `<<` in the second line and the `>>` in the line preceding `endobj` denote
that it is a dictionary object. Dictionaries map Names to other objects.

Names are the strings preceded by `/`, and valid Names do not have to start with a
capital letter, they can be any ascii characters, # and two characters can
escape non-printable ascii characters, described on page 57.

`3 0 obj` means what follows here is the third object, but the name Type
(represented here by `/Type`) is mapped to an indirect object reference:
`0 obj` vs `0 R`.

The contents of this module are internal to pdfgradients, and not part of the public API.
They may change at any time without prior warning or any deprecation period,
in non-backward-compatible ways.
"""

import re
from typing import Any, Iterable, Optional


def create_dictionary_string(
    dict_: dict[str, Any],
    open_dict: str = "<<",
    close_dict: str = ">>",
    field_join: str = " ",
    key_value_join: str = " ",
    has_empty_fields: bool = False,
) -> str:
    """format dictionary as PDF dictionary

    @param dict_: dictionary of values to render
    @param open_dict: string to open PDF dictionary
    @param close_dict: string to close PDF dictionary
    @param field_join: string to join fields with
    @param key_value_join: string to join key to value with
    @param has_empty_fields: whether or not to clear_empty fields first.
    """
    fields = field_join.join(
        key_value_join.join((f, str(v)))
        for f, v in dict_.items()
        if has_empty_fields or v
    )
    if not fields:
        return f"{open_dict}{close_dict}"
    return f"{open_dict}{field_join}{fields}{field_join}{close_dict}"


def create_list_string(list_: Iterable[Any]) -> str:
    """format list of strings as PDF array"""
    return f"[{' '.join(str(item) for item in list_)}]"


def iobj_ref(n: int) -> str:
    """format an indirect PDF Object reference from its id number"""
    return f"{n} 0 R"


def camel_case(snake_case: str) -> str:
    return "".join(x for x in snake_case.title() if x != "_")


def build_obj_dict(key_values: dict[str, Any]) -> dict[str, Any]:
    """
    Build the PDF Object associative map to serialize,
    based on a key-values dict.
    The property names are converted from snake_case to CamelCase,
    and prefixed with a slash character "/".
    Entries are kept in insertion order, so that objects render their keys
    in the order their attributes were assigned.
    """
    obj_dict = {}
    for key, value in key_values.items():
        if callable(value) or key.startswith("_") or value is None:
            continue
        if isinstance(value, PDFObject):  # indirect object reference
            value = value.ref
        elif hasattr(value, "serialize"):  # e.g. Name, PDFArray
            value = value.serialize()
        elif isinstance(value, bool):
            value = str(value).lower()
        elif hasattr(value, "value"):  # e.g. Enum
            value = value.value
        obj_dict[f"/{camel_case(key)}"] = value
    return obj_dict


class Name(str):
    """
    str subclass signifying a PDF name, which are emitted differently than normal strings.
    """

    NAME_ESC = re.compile(
        b"[^" + bytes(v for v in range(33, 127) if v not in b"()<>[]{}/%#\\") + b"]"
    )

    def serialize(self) -> str:
        escaped = self.NAME_ESC.sub(
            lambda m: b"#%02X" % m[0][0], self.encode()
        ).decode()
        return f"/{escaped}"


class PDFArray(list):
    "A PDF array, whose PDFObject elements are rendered as indirect references"

    def serialize(self) -> str:
        return create_list_string(
            elem.ref if isinstance(elem, PDFObject) else elem for elem in self
        )


class PDFObject:
    """
    Main features of this class:
    * delay ID assignement
    * implement serializing
    """

    # Note: __slots__ = "_id" is not used here, as it can't be combined with multiple inheritance

    @property
    def id(self) -> int:
        if not hasattr(self, "_id"):
            raise AttributeError(
                f"{self.__class__.__name__} has not been assigned an ID yet"
            )
        return self._id

    @id.setter
    def id(self, n: int) -> None:
        self._id = n

    @property
    def ref(self) -> str:
        return iobj_ref(self.id)

    def content(self, obj_dict: Optional[dict[str, Any]] = None) -> str:
        "Render the object dictionary, without the object header"
        if not obj_dict:
            obj_dict = self._build_obj_dict()
        return create_dictionary_string(obj_dict)

    def body(self) -> str:
        "The object content terminated by endobj, as handed to an object store"
        return "\n".join((self.content(), "endobj"))

    def serialize(self) -> str:
        return "\n".join((f"{self.id} 0 obj", self.body()))

    def _build_obj_dict(self) -> dict[str, Any]:
        """
        Build the PDF Object associative map to serialize.
        Only attributes assigned on the instance are rendered,
        in the order they were assigned.
        """
        return build_obj_dict(vars(self))
