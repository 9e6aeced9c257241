#!/usr/bin/env python3

import logging
import os
import time

import click
from PIL import Image, UnidentifiedImageError

from .errors import DegenerateRegion, HalftoneError
from .methods import Method, apply_dither
from .metrics import psnr, ssim
from .pixels import PixelBuffer, detect_grayscale


def default_output_path(input, method):
    stem, extension = os.path.splitext(input)
    return '{}_{}{}'.format(stem, method.value, extension or '.png')


@click.group()
@click.argument('input', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Where to write the result, defaults to <input>_<method>.<ext> next to the input')
@click.option('--mode', type=click.Choice(['auto', 'grayscale', 'color']), default='auto', show_default=True, help='Dither luma only, each channel separately, or pick by checking whether r == g == b everywhere')
@click.option('--metrics/--no-metrics', default=True, show_default=True, help='Report PSNR and SSIM against the input')
@click.option('--verbose', '-v', is_flag=True, default=False, help='Log debug output')
@click.pass_context
def cli(ctx, input, mode, verbose, **kwargs):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        with Image.open(input) as input_image:
            buffer = PixelBuffer.from_image(input_image)
    except UnidentifiedImageError:
        raise click.BadParameter('Input file is not a valid image', param_hint="'INPUT'")

    grayscale = detect_grayscale(buffer) if mode == 'auto' else mode == 'grayscale'
    click.echo('{} × {}px • {}'.format(buffer.width, buffer.height, 'Grayscale' if grayscale else 'RGB'))

    ctx.obj = {'buffer': buffer, 'grayscale': grayscale}


@cli.result_callback()
@click.pass_obj
def process_result(input_obj, method, input, output, metrics, **kwargs):
    buffer = input_obj['buffer']
    grayscale = input_obj['grayscale']

    try:
        start = time.perf_counter()
        result = apply_dither(buffer, method, grayscale)
        elapsed = (time.perf_counter() - start) * 1000.0

        summary = '{} • {:.1f} ms'.format(method.label, elapsed)
        if metrics:
            summary += ' • PSNR={:.2f}'.format(psnr(buffer, result))
            try:
                summary += ' • SSIM={:.3f}'.format(ssim(buffer, result))
            except DegenerateRegion:
                summary += ' • SSIM=n/a'
    except HalftoneError as e:
        raise click.ClickException(str(e))

    click.echo(summary)

    # Alpha is always opaque, so it is not worth keeping in the file
    image_output = result.to_image().convert('L' if grayscale else 'RGB')

    output = output or default_output_path(input, method)
    try:
        image_output.save(output)
    except (ValueError, OSError) as e:
        raise click.ClickException('Could not write {}: {}'.format(output, e))

    click.echo('Saved {}'.format(output))


@cli.command(help='Ordered dithering by the 4x4 Bayer matrix')
def bayer():
    return Method.BAYER


@cli.command(help='Floyd-Steinberg error diffusion')
def fs():
    return Method.FS


@cli.command(help='Stucki error diffusion')
def stucki():
    return Method.STUCKI


@cli.command(help='Jarvis-Judice-Ninke error diffusion')
def jjn():
    return Method.JJN


@cli.command(help='Jarvis-Judice-Ninke error diffusion with the error bent by e + sin(4*pi*e) / (4*pi)')
def rong():
    return Method.RONG


if __name__ == '__main__':
    cli()
