# -*- coding: utf-8 -*-
import base64
from io import BytesIO

import pytest
from PIL import Image

from qrmatrix import RenderStyle, encode, render_png, render_png_bytes, render_svg, render_zones_png
from qrmatrix.versions import raw_data_modules


@pytest.fixture
def matrix():
    return encode('HELLO', ec_level='M', mask_pattern=1)


def test_render_png_size_and_colors(matrix):
    img = render_png(matrix)
    assert img.mode == 'RGB'
    assert img.size == ((21 + 8) * 10,) * 2
    assert img.getpixel((0, 0)) == (255, 255, 255)
    # Top-left finder corner is dark
    assert img.getpixel((40, 40)) == (0, 0, 0)
    assert img.getpixel((40 + 15, 40 + 15)) == (255, 255, 255)


def test_render_png_custom_style(matrix):
    style = RenderStyle(module_size=4, border=2, active_color='navy',
                        inactive_color='#eeeeee', background_color='yellow')
    img = render_png(matrix, style)
    assert img.size == (100, 100)
    assert img.getpixel((0, 0)) == (255, 255, 0)
    assert img.getpixel((8, 8)) == (0, 0, 128)
    assert img.getpixel((8 + 5, 8 + 5)) == (238, 238, 238)


def test_render_png_rounded_modules(matrix):
    img = render_png(matrix, RenderStyle(module_size=10, border=0, corner_radius=5))
    # Corner of the first finder module is cut, its centre stays dark
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((5, 5)) == (0, 0, 0)


def test_render_png_logo(matrix):
    logo = Image.new('RGB', (40, 40), (255, 0, 0))
    img = render_png(matrix, RenderStyle(logo=logo, logo_ratio=0.3))
    assert img.getpixel((img.width // 2, img.height // 2)) == (255, 0, 0)


def test_render_png_bytes(matrix):
    data = render_png_bytes(matrix, RenderStyle(module_size=2))
    assert data.startswith(b'\x89PNG\r\n\x1a\n')
    assert Image.open(BytesIO(data)).size == (58, 58)


def test_render_svg(matrix):
    svg = render_svg(matrix, RenderStyle(module_size=5, border=1)).decode('utf-8')
    assert svg.startswith('<?xml')
    assert 'width="115" height="115"' in svg
    dark = sum(sum(row) for row in matrix.modules)
    assert svg.count('<rect ') == dark + 2
    assert ' rx=' not in svg
    assert svg.rstrip().endswith('</svg>')


def test_render_svg_rounded_with_logo(matrix):
    logo = Image.new('RGB', (8, 8), 'blue')
    svg = render_svg(matrix, RenderStyle(corner_radius=3, logo=logo)).decode('utf-8')
    assert ' rx="3"' in svg
    assert '<image ' in svg and 'data:image/png;base64,' in svg


def test_render_zones_png(matrix):
    b64, metrics = render_zones_png(matrix, scale=6, border=4)
    img = Image.open(BytesIO(base64.b64decode(b64)))
    assert img.size == ((21 + 8) * 6,) * 2
    assert metrics['size'] == 21
    assert metrics['modules'] == 441
    assert metrics['border'] == 4
    assert metrics['data_modules'] == 16 * 8
    assert metrics['ecc_modules'] == 10 * 8
    assert metrics['remainder_modules'] == 0
    assert metrics['functional_modules'] == 441 - raw_data_modules(1)
    assert metrics['dark_modules'] == sum(sum(row) for row in matrix.modules)
