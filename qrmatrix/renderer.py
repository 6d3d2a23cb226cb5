# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

This module turns an encoded ModuleMatrix into images. Plain renderings
follow a RenderStyle (module size, colours, rounded modules, quiet zone,
embedded logo); the zone rendering colours every region of the symbol
differently to help understand its structure.

Functions:
    render_png: Render a matrix as a PIL image
    render_png_bytes: Render a matrix as PNG file content
    render_svg: Render a matrix as SVG file content
    render_zones_png: Render a colour-coded zone view as base64 PNG plus metrics
"""

import base64
from io import BytesIO
from typing import Any, Dict, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .config import RenderStyle
from .functional_areas import (
    ALIGNMENT, DARK, DATA, ECC, FINDER, FORMAT, REMAINDER, RESERVED_REGIONS,
    SEPARATOR, TIMING, VERSION, ModuleMatrix,
)

# Color palette for QR code zone visualization
PALETTE = {
    'background': (255, 255, 255),    # White background
    FINDER: (128, 0, 128),            # Purple - Finder patterns (3 corners)
    SEPARATOR: (230, 230, 230),       # Light gray - Visual separators
    TIMING: (255, 165, 0),            # Orange - Timing patterns (row/col 6)
    ALIGNMENT: (0, 128, 128),         # Teal - Alignment patterns
    FORMAT: (255, 0, 0),              # Red - Format information bits
    DARK: (255, 0, 0),                # Red - Dark module next to format info
    VERSION: (180, 0, 0),             # Dark red - Version information (v>=7)
    DATA: (35, 35, 35),               # Dark gray - Data payload
    ECC: (20, 90, 160),               # Blue - Error correction codes
    REMAINDER: (120, 120, 120),       # Gray - Remainder bits
}


def _module_codes(matrix: ModuleMatrix, border: int) -> np.ndarray:
    """0 = quiet zone, 1 = inactive module, 2 = active module."""
    codes = np.zeros((matrix.size + 2 * border,) * 2, dtype=np.uint8)
    codes[border:border + matrix.size, border:border + matrix.size] = 1 + matrix.to_array()
    return codes


def _paste_logo(img: Image.Image, logo: Image.Image, ratio: float, symbol_px: int, offset: int) -> None:
    target = max(1, int(symbol_px * ratio))
    logo = logo.convert('RGBA')
    scale = target / max(logo.size)
    logo = logo.resize((max(1, int(logo.width * scale)), max(1, int(logo.height * scale))), Image.LANCZOS)
    x = offset + (symbol_px - logo.width) // 2
    y = offset + (symbol_px - logo.height) // 2
    img.paste(logo, (x, y), logo)


def render_png(matrix: ModuleMatrix, style: Optional[RenderStyle] = None) -> Image.Image:
    """
    Render a QR matrix as an RGB image.

    Args:
        matrix (ModuleMatrix): Encoded symbol
        style (Optional[RenderStyle]): Visual parameters, defaults to black on white

    Returns:
        Image.Image: ``(size + 2 * border) * module_size`` pixels per side

    Example:
        >>> img = render_png(encode('HELLO'), RenderStyle(module_size=4, border=2))
        >>> img.size
        (100, 100)
    """
    style = style or RenderStyle()
    scale = style.module_size
    codes = _module_codes(matrix, style.border)

    colors = np.array(
        [style.background_color, style.inactive_color,
         style.inactive_color if style.corner_radius else style.active_color],
        dtype=np.uint8,
    )
    pixels = colors[codes].repeat(scale, axis=0).repeat(scale, axis=1)
    img = Image.fromarray(pixels)

    if style.corner_radius:
        draw = ImageDraw.Draw(img)
        for r, c in zip(*np.nonzero(codes == 2)):
            x0, y0 = int(c) * scale, int(r) * scale
            draw.rounded_rectangle(
                [x0, y0, x0 + scale - 1, y0 + scale - 1],
                radius=style.corner_radius, fill=style.active_color,
            )

    if style.logo is not None:
        _paste_logo(img, style.logo, style.logo_ratio, matrix.size * scale, style.border * scale)
    return img


def render_png_bytes(matrix: ModuleMatrix, style: Optional[RenderStyle] = None) -> bytes:
    buf = BytesIO()
    render_png(matrix, style).save(buf, format='PNG')
    return buf.getvalue()


def render_svg(matrix: ModuleMatrix, style: Optional[RenderStyle] = None) -> bytes:
    """
    Render a QR matrix as SVG.

    Useful for high-quality printing and web display. Active modules are
    drawn as one rect each; the logo, if any, is embedded as a base64 PNG.

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    style = style or RenderStyle()
    scale = style.module_size
    size_mod = matrix.size + 2 * style.border
    px = size_mod * scale
    symbol_px = matrix.size * scale
    offset = style.border * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="rgb{style.background_color}"/>')
    out.append(f'<rect x="{offset}" y="{offset}" width="{symbol_px}" height="{symbol_px}" '
               f'fill="rgb{style.inactive_color}"/>')

    rx = f' rx="{style.corner_radius}"' if style.corner_radius else ''
    for r, row in enumerate(matrix.modules):
        for c, active in enumerate(row):
            if not active:
                continue
            x = offset + c * scale
            y = offset + r * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}"{rx} fill="rgb{style.active_color}"/>')

    if style.logo is not None:
        target = max(1, int(symbol_px * style.logo_ratio))
        logo = style.logo.convert('RGBA')
        ratio = target / max(logo.size)
        width, height = max(1, int(logo.width * ratio)), max(1, int(logo.height * ratio))
        buffer = BytesIO()
        logo.resize((width, height), Image.LANCZOS).save(buffer, format='PNG')
        b64 = base64.b64encode(buffer.getvalue()).decode()
        x = offset + (symbol_px - width) // 2
        y = offset + (symbol_px - height) // 2
        out.append(f'<image x="{x}" y="{y}" width="{width}" height="{height}" href="data:image/png;base64,{b64}"/>')

    out.append('</svg>')
    return "\n".join(out).encode("utf-8")


def render_zones_png(matrix: ModuleMatrix, scale: int = 6, border: int = 4) -> Tuple[str, Dict[str, Any]]:
    """
    Render the matrix with every region in its own colour.

    Dark modules take the colour of their region (finder, timing, alignment,
    format, version, data, ECC); light separator modules are drawn light
    gray so the finder boundaries stay visible.

    Args:
        matrix (ModuleMatrix): Encoded symbol
        scale (int): Pixel size per module
        border (int): Quiet zone size in modules

    Returns:
        Tuple[str, Dict[str, Any]]: (base64_png, metrics_dict)
            - base64_png: Base64-encoded PNG image
            - metrics_dict: size, module counts per category and border
    """
    size = matrix.size
    img_px = (size + 2 * border) * scale
    img = Image.new('RGB', (img_px, img_px), PALETTE['background'])
    draw = ImageDraw.Draw(img)

    counts = {DATA: 0, ECC: 0, REMAINDER: 0}
    functional = 0
    dark_modules = 0
    for r in range(size):
        for c in range(size):
            region = matrix.regions[r][c]
            is_dark = matrix.modules[r][c]
            if region in RESERVED_REGIONS:
                functional += 1
            else:
                counts[region] += 1

            x0 = (c + border) * scale
            y0 = (r + border) * scale
            box = [x0, y0, x0 + scale - 1, y0 + scale - 1]
            if not is_dark:
                if region == SEPARATOR:
                    draw.rectangle(box, fill=PALETTE[SEPARATOR])
                continue
            dark_modules += 1
            draw.rectangle(box, fill=PALETTE[region])

    buf = BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('ascii')

    return b64, {
        'size': size,
        'modules': size * size,
        'dark_modules': dark_modules,
        'functional_modules': functional,
        'data_modules': counts[DATA],
        'ecc_modules': counts[ECC],
        'remainder_modules': counts[REMAINDER],
        'border': border
    }
