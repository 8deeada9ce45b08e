"""Filter expression model: atomic filters, labeled chains and pipelines.

Every value renders to ffmpeg's filtergraph micro-syntax:

    AtomicFilter("scale", ["1280", "-1"])        -> scale=1280:-1
    Chain(["0:v"], AtomicFilter("hflip"), "out")  -> [0:v]hflip[out]
    Pipeline([a, b])                              -> <a>,<b>

Values are immutable and rendering has no side effects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ffmpeg_stages.common import InvalidArgument

PARAM_SEPARATOR = ":"
PIPELINE_SEPARATOR = ","


class Filter(ABC):
    """A node of the filter model."""

    @abstractmethod
    def render(self) -> str:
        """Render this node in ffmpeg filtergraph syntax."""

    @abstractmethod
    def needs_complex(self) -> bool:
        """Whether this node must be attached with -filter_complex."""

    def __str__(self) -> str:
        return self.render()


def _freeze(values: Iterable, what: str) -> Tuple:
    if isinstance(values, (str, bytes)):
        raise InvalidArgument(f"{what} must be a sequence, not a single string")
    return tuple(values)


@dataclass(frozen=True)
class AtomicFilter(Filter):
    """A single named filter with ordered parameters, e.g. scale=1280:-1."""

    name: str
    params: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        params = _freeze(self.params, "Filter params")
        object.__setattr__(self, "params", tuple(str(p) for p in params))

    def render(self) -> str:
        if not self.params:
            return self.name
        # An empty name still renders "=p1:p2"; callers use it for raw tokens
        return f"{self.name}={PARAM_SEPARATOR.join(self.params)}"

    def needs_complex(self) -> bool:
        return False


@dataclass(frozen=True)
class Chain(Filter):
    """One atomic filter wired to named input pads and an optional output pad."""

    inputs: Tuple[str, ...]
    filter: AtomicFilter
    output: str = ""

    def __post_init__(self):
        object.__setattr__(self, "inputs", _freeze(self.inputs, "Chain inputs"))
        if not isinstance(self.filter, AtomicFilter):
            raise InvalidArgument(
                f"Chain filter must be an AtomicFilter, got {type(self.filter).__name__}"
            )

    def render(self) -> str:
        parts = [f"[{label}]" for label in self.inputs]
        parts.append(self.filter.render())
        if self.output:
            parts.append(f"[{self.output}]")
        return "".join(parts)

    def needs_complex(self) -> bool:
        return True


@dataclass(frozen=True)
class Pipeline(Filter):
    """An ordered sequence of nodes, rendered one after another."""

    nodes: Tuple[Filter, ...] = field(default_factory=tuple)

    def __post_init__(self):
        nodes = _freeze(self.nodes, "Pipeline nodes")
        for node in nodes:
            if not isinstance(node, Filter):
                raise InvalidArgument(
                    f"Pipeline nodes must be filters, got {type(node).__name__}"
                )
        object.__setattr__(self, "nodes", nodes)

    def render(self) -> str:
        return PIPELINE_SEPARATOR.join(node.render() for node in self.nodes)

    def needs_complex(self) -> bool:
        return any(node.needs_complex() for node in self.nodes)
