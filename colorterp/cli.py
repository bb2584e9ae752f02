"""Positional command line harness mirroring the host argument order."""
from __future__ import annotations
import logging

import click

from . import constants as c
from .errors import ColorTerpError
from .host import MappingHost
from .pipeline import run
from .types.options import GrayscaleMode, Spacing


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('input_space')
@click.argument('output_space')
@click.argument('start')
@click.argument('end')
@click.argument('points')
@click.argument('modifier', required=False, default="")
@click.argument('invert', required=False, default="false")
@click.argument('grayscale', required=False, default="false")
@click.option('--spacing', type=click.Choice([s.value for s in Spacing], case_sensitive=False),
              default=Spacing.INCLUSIVE.value, show_default=True,
              help='inclusive: the last color is END; interior: all colors lie strictly between.')
@click.option('--include-start', is_flag=True, default=False,
              help='Report the start color as color1.')
@click.option('--legacy-grayscale', is_flag=True, default=False,
              help='Grayscale by re-applying invert, as older releases did.')
@click.option('--names/--no-names', default=False, show_default=True,
              help='Prefix each line with its result name.')
@click.option('-v', '--verbose', is_flag=True, default=False, help='Enable debug logging.')
def cli(input_space: str, output_space: str, start: str, end: str, points: str,
        modifier: str, invert: str, grayscale: str, spacing: str, include_start: bool,
        legacy_grayscale: bool, names: bool, verbose: bool):
    """Interpolate POINTS colors from START to END.

    \b
    Color spaces: rgb rgba srgb srgba hsb hsba web weba hex hexa
    MODIFIER is one of brighter, darker, saturated, desaturated or "".
    INVERT and GRAYSCALE are boolean strings (true/false).
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    host = MappingHost({
        c.MACRO_INPUT_SPACE: input_space,
        c.MACRO_OUTPUT_SPACE: output_space,
        c.MACRO_START_COLOR: start,
        c.MACRO_END_COLOR: end,
        c.MACRO_POINTS: points,
        c.MACRO_MODIFIER: modifier,
        c.MACRO_INVERT: invert,
        c.MACRO_GRAYSCALE: grayscale,
        c.MACRO_SPACING: spacing,
        c.MACRO_INCLUDE_START: str(include_start),
        c.MACRO_GRAYSCALE_MODE: GrayscaleMode.LEGACY_INVERT.value if legacy_grayscale else "",
    })

    try:
        run(host)
    except ColorTerpError as e:
        raise click.ClickException(str(e))

    for name, value in host.results.items():
        click.echo(f"{name}={value}" if names else value)
