import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image

from halftone import Method
from halftone.cli import cli, default_output_path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def photo_path(tmp_path, photo):
    path = tmp_path / 'photo.png'
    Image.fromarray(np.ascontiguousarray(photo.data[..., :3])).save(path)
    return path


def test_default_output_path():
    assert default_output_path('pictures/cat.jpeg', Method.RONG) == 'pictures/cat_rong.jpeg'
    assert default_output_path('cat', Method.FS) == 'cat_fs.png'


@pytest.mark.parametrize('method', [method.value for method in Method])
def test_writes_dithered_image(runner, photo_path, method):
    result = runner.invoke(cli, [str(photo_path), method])

    assert result.exit_code == 0, result.output
    assert '24 × 20px • RGB' in result.output
    assert Method(method).label in result.output
    assert 'PSNR=' in result.output
    assert 'SSIM=' in result.output

    written = Image.open(photo_path.parent / 'photo_{}.png'.format(method))
    assert written.size == (24, 20)
    assert written.mode == 'RGB'
    assert set(np.unique(np.array(written)).tolist()) <= {0, 255}


def test_grayscale_input(runner, tmp_path):
    path = tmp_path / 'ramp.png'
    Image.fromarray(np.tile(np.arange(0, 256, 8, dtype=np.uint8), (16, 1))).save(path)
    output = tmp_path / 'out.png'

    result = runner.invoke(cli, ['--output', str(output), str(path), 'bayer'])

    assert result.exit_code == 0, result.output
    assert '32 × 16px • Grayscale' in result.output
    assert Image.open(output).mode == 'L'


def test_forced_mode(runner, photo_path, tmp_path):
    output = tmp_path / 'forced.png'
    result = runner.invoke(cli, ['--mode', 'grayscale', '-o', str(output), str(photo_path), 'fs'])

    assert result.exit_code == 0, result.output
    assert 'Grayscale' in result.output
    assert Image.open(output).mode == 'L'


def test_small_image_has_no_ssim(runner, tmp_path):
    path = tmp_path / 'tiny.png'
    Image.fromarray(np.full((4, 4), 200, dtype=np.uint8)).save(path)

    result = runner.invoke(cli, [str(path), 'stucki'])

    assert result.exit_code == 0, result.output
    assert 'SSIM=n/a' in result.output
    assert (tmp_path / 'tiny_stucki.png').exists()


def test_no_metrics(runner, photo_path):
    result = runner.invoke(cli, ['--no-metrics', str(photo_path), 'jjn'])

    assert result.exit_code == 0, result.output
    assert 'PSNR' not in result.output
    assert 'SSIM' not in result.output


def test_rejects_non_images(runner, tmp_path):
    path = tmp_path / 'notes.png'
    path.write_bytes(b'definitely not a png')

    result = runner.invoke(cli, [str(path), 'fs'])

    assert result.exit_code == 2
    assert 'not a valid image' in result.output


def test_unknown_method(runner, photo_path):
    result = runner.invoke(cli, [str(photo_path), 'atkinson'])
    assert result.exit_code == 2
