"""Filter stage: attach filter-model values to the current input."""

import logging
from typing import List

from ffmpeg_stages.common import InvalidArgument
from ffmpeg_stages.filters import Filter, Pipeline
from ffmpeg_stages.output import WriteStage
from ffmpeg_stages.state import CommandState, FilterGraph

logger = logging.getLogger(__name__)


class FilterStage:
    """Collects filter nodes for one input until done() records them."""

    def __init__(self, state: CommandState, input_index: int):
        self._state = state
        self._input_index = input_index
        self._nodes: List[Filter] = []

    def add(self, node: Filter) -> "FilterStage":
        """Attach an AtomicFilter, Chain or Pipeline to this input."""
        if not isinstance(node, Filter):
            raise InvalidArgument(
                f"Expected AtomicFilter, Chain or Pipeline, got {type(node).__name__}"
            )
        self._nodes.append(node)
        return self

    def done(self) -> WriteStage:
        """Render the attached nodes as one pipeline and move to the write stage."""
        # Nodes rendering to "" (empty pipelines) would leave stray separators
        pipeline = Pipeline([node for node in self._nodes if node.render()])
        self._nodes = []
        rendered = pipeline.render()
        if rendered:
            graph = FilterGraph(
                input_index=self._input_index,
                rendered=rendered,
                complex=pipeline.needs_complex(),
            )
            self._state.filters.append(graph)
            logger.debug(
                "[FILTER] Input #%d: %s (complex=%s)",
                graph.input_index, graph.rendered, graph.complex,
            )
        else:
            logger.debug("[FILTER] Input #%d: nothing to record", self._input_index)
        return WriteStage(self._state)
