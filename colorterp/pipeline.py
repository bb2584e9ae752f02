"""parse → interpolate → transform → format."""
from __future__ import annotations
import logging
from typing import List

from .formatting import format_colors
from .gradients import Gradient1D, compute_fractions
from .host import MacroHost, result_names
from .request import InterpolationRequest

logger = logging.getLogger(__name__)


def interpolate(request: InterpolationRequest) -> List[str]:
    """Formatted colors for a request, in output order."""
    fractions = compute_fractions(request.points, request.spacing, request.include_start)
    gradient = Gradient1D.from_colors(request.start, request.end, fractions).apply(
        modifier=request.modifier,
        invert=request.invert,
        grayscale=request.grayscale,
        grayscale_mode=request.grayscale_mode,
    )
    results = format_colors(gradient, request.output_space)
    logger.debug(
        "Interpolated %d color(s) %s -> %s: %s",
        len(results), request.input_space.value, request.output_space.value, results,
    )
    return results


def run(host: MacroHost) -> List[str]:
    """
    Read the request from ``host``, compute every color, then write them back
    as ``color1`` … ``colorN``. Nothing is written if any step fails.
    """
    request = InterpolationRequest.from_parameters(host.read_parameter)
    logger.debug("Request: %r", request)
    results = interpolate(request)
    for name, value in zip(result_names(len(results)), results):
        host.write_result(name, value)
    return results
