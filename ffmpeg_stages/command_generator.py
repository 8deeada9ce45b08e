"""Full command generation from an accumulated CommandState."""

import logging
from typing import List

from ffmpeg_stages.state import CommandState, FilterGraph
from ffmpeg_stages.validation import validate_state

logger = logging.getLogger(__name__)

COMPLEX_FILTER_FLAG = "-filter_complex"
SIMPLE_FILTER_FLAG = "-vf"
COMPLEX_GRAPH_SEPARATOR = ";"
SIMPLE_GRAPH_SEPARATOR = ","


def generate_filter_flags(filters: List[FilterGraph]) -> List[str]:
    """Generate the filter flag and its graph from recorded filter graphs.

    Any graph that needs pad labels switches the whole section to
    -filter_complex with one filterchain per graph. Otherwise the graphs
    form a single -vf filter list.
    """
    if not filters:
        return []

    if any(graph.complex for graph in filters):
        return [
            COMPLEX_FILTER_FLAG,
            COMPLEX_GRAPH_SEPARATOR.join(graph.rendered for graph in filters),
        ]

    return [
        SIMPLE_FILTER_FLAG,
        SIMPLE_GRAPH_SEPARATOR.join(graph.rendered for graph in filters),
    ]


def generate_command(state: CommandState) -> List[str]:
    """Generate a complete ffmpeg argument list from a command state.

    Argument order: ffmpeg [global] ([input_opts] -i <input>)...
                    [output_opts] [filter] <output>

    No validation happens here; see build_command().
    """
    cmd: List[str] = [state.binary]

    # Global options
    cmd.extend(state.global_args)

    # Inputs in declaration order, each preceded by its own read-side flags
    for spec in state.inputs:
        cmd.extend(spec.to_args())

    # Output-side options (seek, codecs, quality)
    cmd.extend(state.write_args)

    # Filter graph
    cmd.extend(generate_filter_flags(state.filters))

    # Output path is always last
    if state.output:
        cmd.append(state.output)

    return cmd


def build_args(state: CommandState) -> List[str]:
    """Validate the state and return its argument list.

    Raises:
        IncompleteCommand: When no input was declared or no output set.
    """
    result = validate_state(state)
    result.raise_if_invalid()
    for warning in result.warnings:
        logger.warning("[BUILD] %s", warning)

    cmd = generate_command(state)
    logger.debug("[BUILD] Built command with %d args: %s", len(cmd), cmd)
    return cmd


def build_command(state: CommandState) -> str:
    """Validate the state and return the command as one space-joined string."""
    return " ".join(build_args(state))
