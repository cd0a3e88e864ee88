"""
This module contains the logic that turns a gradient into PDF objects:
allocating their ids, writing them to an object store, and indexing the
resulting pattern so that content streams can paint with it.

Objects are written in this order: stitching function, segment functions,
shading dictionary, pattern dictionary.
As the stitching function refers to segment functions written after it,
the ids of all the objects of a gradient are predicted before any of them is rendered.
"""

import logging
import re
import threading
from collections import defaultdict
from contextlib import contextmanager
from typing import Hashable, ItemsView, Iterable, Iterator, NamedTuple, Optional

from .config import get_settings
from .errors import (
    AllocationOrderViolation,
    ColorSpaceArityMismatch,
    GradientAlreadyRegistered,
)
from .pattern import FunctionChain, Pattern, Shading, compile_functions
from .schemas import GradientSpec
from .syntax import (
    Name,
    PDFObject,
    create_dictionary_string as pdf_dict,
    iobj_ref as pdf_ref,
)

LOGGER = logging.getLogger(__name__)


class ObjectIdAllocator:
    """
    Hands out consecutive PDF object ids, starting after the highest id already
    reserved by the document.

    Ids that are going to be allocated can be predicted with `predict()`.
    A prediction only holds if nothing else allocates ids in between:
    callers needing several ids in a row must do so inside `contiguous_run()`.
    """

    def __init__(self, last_reserved_object_id: int = 0) -> None:
        self.obj_id: int = last_reserved_object_id  # last allocated PDF object number
        self._lock = threading.RLock()

    def next(self) -> int:
        "Allocate & return the next object id"
        with self._lock:
            self.obj_id += 1
            return self.obj_id

    def predict(self, k: int = 0) -> int:
        """
        Return the id that the k-th future call to next() will return, without allocating it.

        Outside of `contiguous_run()`, other threads may allocate ids before
        the predicted one is, making the prediction stale.
        """
        if k < 0:
            raise ValueError(f"Can only predict future object ids, got k={k}")
        with self._lock:
            return self.obj_id + 1 + k

    @contextmanager
    def contiguous_run(self) -> Iterator["ObjectIdAllocator"]:
        "Prevent other threads from allocating ids until the block exits"
        with self._lock:
            yield self


class ObjectStore:
    """
    In-memory sink for the PDF objects of a document, keyed by object id.

    Objects are kept in the order they were appended,
    which may differ from the order of their ids.
    """

    def __init__(self) -> None:
        self.objects: dict[int, str] = {}
        self.trace_labels_per_obj_id: dict[int, str] = {}
        self.sections_size_per_trace_label: dict[str, int] = defaultdict(int)
        self.buffer: bytearray = bytearray()

    def append_object(
        self, obj_id: int, body: str, trace_label: Optional[str] = None
    ) -> None:
        if obj_id in self.objects:
            raise AllocationOrderViolation(f"Object {obj_id} has already been written")
        self.objects[obj_id] = body
        if trace_label:
            self.trace_labels_per_obj_id[obj_id] = trace_label

    def get(self, obj_id: int) -> Optional[str]:
        return self.objects.get(obj_id)

    def __contains__(self, obj_id: object) -> bool:
        return obj_id in self.objects

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self.objects.items())

    def bufferize(self) -> bytearray:
        "Render all objects, with their headers, in the order they were appended"
        self.buffer = bytearray()
        self.sections_size_per_trace_label.clear()
        for obj_id, body in self.objects.items():
            trace_label = self.trace_labels_per_obj_id.get(obj_id)
            if trace_label:
                with self._trace_size(trace_label):
                    self._out(f"{obj_id} 0 obj\n{body}")
            else:
                self._out(f"{obj_id} 0 obj\n{body}")
        self._log_final_sections_sizes()
        return self.buffer

    def _out(self, data: str) -> None:
        "Append data to the buffer"
        self.buffer += data.encode("latin1") + b"\n"

    @contextmanager
    def _trace_size(self, label: str) -> Iterator[None]:
        prev_size = len(self.buffer)
        yield
        self.sections_size_per_trace_label[label] += len(self.buffer) - prev_size

    def _log_final_sections_sizes(self) -> None:
        LOGGER.debug("Final size summary of the object store sections:")
        for label, section_size in self.sections_size_per_trace_label.items():
            LOGGER.debug("- %s: %s", label, _sizeof_fmt(section_size))


class GradientEntry(NamedTuple):
    shading_object_id: int
    pattern_object_id: int
    resource_name: str
    shading_resource_name: str


class GradientRegistry:
    "Map gradient ids chosen by callers to the PDF objects emitted for them"

    PATTERN_FILL_REGEX = re.compile(r"/(P\d+)\s+scn")
    PATTERN_STROKE_REGEX = re.compile(r"/(P\d+)\s+SCN")
    SHADING_REGEX = re.compile(r"/(Sh\d+)\s+sh\b")

    def __init__(self) -> None:
        self._entries: dict[Hashable, GradientEntry] = {}

    def register(
        self, gradient_id: Hashable, shading_object_id: int, pattern_object_id: int
    ) -> GradientEntry:
        if gradient_id in self._entries:
            raise GradientAlreadyRegistered(gradient_id)
        index = len(self._entries) + 1
        entry = GradientEntry(
            shading_object_id, pattern_object_id, f"P{index}", f"Sh{index}"
        )
        self._entries[gradient_id] = entry
        return entry

    def lookup(self, gradient_id: Hashable) -> Optional[GradientEntry]:
        return self._entries.get(gradient_id)

    def __contains__(self, gradient_id: object) -> bool:
        return gradient_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> ItemsView[Hashable, GradientEntry]:
        return self._entries.items()

    def paint_operator(self, gradient_id: Hashable, stroke: bool = False) -> str:
        """
        Content stream operators selecting the gradient as current color.

        Raises:
            KeyError: if no gradient has been registered with this id
        """
        name = Name(self._entries[gradient_id].resource_name).serialize()
        if stroke:
            return f"/Pattern CS {name} SCN"
        return f"/Pattern cs {name} scn"

    def resources_dict(self, names: Optional[Iterable[str]] = None) -> str:
        "Value of the /Pattern entry of a resources dictionary, optionally restricted to some names"
        if names is not None:
            names = set(names)
        return pdf_dict(
            {
                Name(entry.resource_name).serialize(): pdf_ref(entry.pattern_object_id)
                for entry in self._entries.values()
                if names is None or entry.resource_name in names
            }
        )

    def shading_operator(self, gradient_id: Hashable) -> str:
        """
        Content stream operator painting the gradient's shading directly,
        over the current clipping path.

        Raises:
            KeyError: if no gradient has been registered with this id
        """
        name = Name(self._entries[gradient_id].shading_resource_name).serialize()
        return f"{name} sh"

    def shading_resources_dict(self, names: Optional[Iterable[str]] = None) -> str:
        "Value of the /Shading entry of a resources dictionary, optionally restricted to some names"
        if names is not None:
            names = set(names)
        return pdf_dict(
            {
                Name(entry.shading_resource_name).serialize(): pdf_ref(
                    entry.shading_object_id
                )
                for entry in self._entries.values()
                if names is None or entry.shading_resource_name in names
            }
        )

    def patterns_used_in(self, content_stream: str) -> set[str]:
        "Parse a rendered content stream and return the pattern names it paints with"
        found: set[str] = set()
        for m in self.PATTERN_FILL_REGEX.finditer(content_stream):
            found.add(m.group(1))
        for m in self.PATTERN_STROKE_REGEX.finditer(content_stream):
            found.add(m.group(1))
        return found

    def shadings_used_in(self, content_stream: str) -> set[str]:
        "Parse a rendered content stream and return the shading names painted with sh"
        return {m.group(1) for m in self.SHADING_REGEX.finditer(content_stream)}


class ShadingPatternEmitter:
    """
    Write the objects of gradients into a document object store.

    The allocator, store & registry all belong to the same document.
    Emission is all-or-nothing: if anything goes wrong,
    no object of the gradient reaches the store.
    """

    def __init__(
        self,
        allocator: ObjectIdAllocator,
        store: ObjectStore,
        registry: GradientRegistry,
        precision: Optional[int] = None,
    ) -> None:
        self.allocator = allocator
        self.store = store
        self.registry = registry
        self.precision = (
            get_settings().real_precision if precision is None else precision
        )

    def add_gradient(self, gradient_id: Hashable, spec: GradientSpec) -> GradientEntry:
        "Compile the functions of a gradient, then emit all its objects"
        chain = compile_functions(
            spec.stops, spec.resolved_color_space, self.precision
        )
        return self.emit(spec, chain, gradient_id)

    def emit(
        self, spec: GradientSpec, chain: FunctionChain, gradient_id: Hashable
    ) -> GradientEntry:
        if gradient_id in self.registry:
            raise GradientAlreadyRegistered(gradient_id)
        color_space = spec.resolved_color_space
        if chain.color_space is not color_space:
            raise ColorSpaceArityMismatch(
                color_space.value,
                color_space.arity,
                chain.color_space.arity,
                f"the functions compiled for {chain.color_space.value}",
            )
        if spec.background is not None and len(spec.background) != color_space.arity:
            raise ColorSpaceArityMismatch(
                color_space.value,
                color_space.arity,
                len(spec.background),
                "the background",
            )
        shading = Shading(
            shading_type=spec.kind,
            color_space=color_space,
            coords=spec.coords,
            function=chain.stitching,
            extend=spec.extend,
            background=spec.background,
            anti_alias=spec.antialias,
            precision=self.precision,
        )
        pattern = Pattern(shading, matrix=spec.matrix, precision=self.precision)
        allocation_order: list[PDFObject] = [*chain.objects(), shading, pattern]
        write_order: list[tuple[PDFObject, str]] = [
            (chain.stitching, "function"),
            *((segment, "function") for segment in chain.segments),
            (shading, "shading"),
            (pattern, "pattern"),
        ]

        with self.allocator.contiguous_run() as allocator:
            for k, pdf_obj in enumerate(allocation_order):
                pdf_obj.id = allocator.predict(k)
            # All references now point to predicted ids:
            bodies = [
                (pdf_obj.id, pdf_obj.body(), trace_label)
                for pdf_obj, trace_label in write_order
            ]
            for pdf_obj in allocation_order:
                obj_id = allocator.next()
                if obj_id != pdf_obj.id:
                    raise AllocationOrderViolation(
                        f"{pdf_obj.__class__.__name__} was predicted to get id"
                        f" {pdf_obj.id} but was allocated id {obj_id}"
                    )

        for obj_id, _, _ in bodies:
            if obj_id in self.store:
                raise AllocationOrderViolation(
                    f"Object {obj_id} has already been written to the store"
                )
        for obj_id, body, trace_label in bodies:
            self.store.append_object(obj_id, body, trace_label)
        entry = self.registry.register(gradient_id, shading.id, pattern.id)
        LOGGER.debug(
            "Gradient %r emitted with %d segment(s): shading=%d pattern=%d (%s)",
            gradient_id,
            len(chain.segments),
            entry.shading_object_id,
            entry.pattern_object_id,
            entry.resource_name,
        )
        return entry


def _sizeof_fmt(num: float, suffix: str = "B") -> str:
    # Recipe from: https://stackoverflow.com/a/1094933/636849
    for unit in ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]:
        if abs(num) < 1024:
            return f"{num:3.1f}{unit}{suffix}"
        num /= 1024
    return f"{num:.1f}Yi{suffix}"
