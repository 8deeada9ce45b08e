"""Mutable command accumulator shared by the stages of one builder session."""

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_BINARY = "ffmpeg"
INPUT_FLAG = "-i"


@dataclass
class InputSpec:
    """One declared input and the read-side flags that precede its -i."""

    path: str
    options: List[str] = field(default_factory=list)

    def to_args(self) -> List[str]:
        return [*self.options, INPUT_FLAG, self.path]


@dataclass(frozen=True)
class FilterGraph:
    """A rendered filter pipeline recorded for one input."""

    input_index: int
    rendered: str
    complex: bool


@dataclass
class CommandState:
    """Token groups of a command under construction.

    Owned by exactly one builder session. The stages append to it; only
    command_generator reads it back out.
    """

    binary: str = DEFAULT_BINARY
    global_args: List[str] = field(default_factory=list)
    inputs: List[InputSpec] = field(default_factory=list)
    write_args: List[str] = field(default_factory=list)
    filters: List[FilterGraph] = field(default_factory=list)
    output: Optional[str] = None

    @property
    def current_input(self) -> InputSpec:
        """The most recently declared input (the read stage's scope)."""
        return self.inputs[-1]

    @property
    def current_index(self) -> int:
        return len(self.inputs) - 1

    def add_input(self, path: str) -> InputSpec:
        spec = InputSpec(path=str(path))
        self.inputs.append(spec)
        return spec

    @property
    def needs_complex(self) -> bool:
        return any(graph.complex for graph in self.filters)
