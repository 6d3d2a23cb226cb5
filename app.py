#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Matrix Encoder - Flask Web Application

Collects the payload, error correction level, mask pattern, mode override,
charset and rendering parameters, encodes the symbol with ``qrmatrix`` and
shows a zone-coloured preview with export links.

Run:
    python app.py
Open:
    http://127.0.0.1:5000/
"""

import base64
import logging
from io import BytesIO
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlencode

from flask import Flask, render_template_string, request, send_file
from PIL import Image

from qrmatrix import (
    EncodeOptions, QRMatrixError, RenderStyle, make_qr,
    render_png_bytes, render_svg, render_zones_png,
)
from qrmatrix.renderer import PALETTE

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Matrix Encoder</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff}
    .card{max-width:640px;border:1px solid #ddd;padding:10px;border-radius:8px}
    img{display:block;margin:6px 0;border:1px solid #ccc;max-width:100%}
    .sw{display:inline-block;width:18px;height:12px;border:1px solid #aaa;margin-right:8px}
    .metrics{font-size:12px;color:#333}
    .error{color:#b00;font-weight:600}
    textarea{font-family:monospace;width:100%}
  </style>
</head>
<body>
  <h2>QR Matrix Encoder</h2>
  <form method="post" enctype="multipart/form-data">
    <textarea name="text" rows="3">{{ text }}</textarea><br>
    ECC <select name="ecc">
      {% for level in ['L', 'M', 'Q', 'H'] %}
      <option value="{{ level }}" {% if level == ecc %}selected{% endif %}>{{ level }}</option>
      {% endfor %}
    </select>
    Mask <select name="mask">
      {% for m in range(8) %}
      <option value="{{ m }}" {% if m|string == mask|string %}selected{% endif %}>{{ m }}</option>
      {% endfor %}
    </select>
    Mode <select name="mode">
      {% for m in ['auto', 'numeric', 'alphanumeric', 'byte'] %}
      <option value="{{ m }}" {% if m == mode %}selected{% endif %}>{{ m }}</option>
      {% endfor %}
    </select>
    Charset <input type="text" name="encoding" value="{{ encoding }}" size="10">
    Border <input type="number" name="border" value="{{ border }}" min="0" max="20">
    Logo <input type="file" name="logo" accept="image/*">
    <button type="submit">Generate</button>
  </form>
  {% if error %}<p class="error">{{ error }}</p>{% endif %}
  {% if qr %}
  <div class="card">
    <img src="data:image/png;base64,{{ qr.img_b64 }}" alt="QR zones">
    <div class="metrics">
      Version {{ qr.version }} ({{ qr.size }}x{{ qr.size }}), ECC {{ qr.ecc }}, mask {{ qr.mask }},
      mode {{ qr.mode }}<br>
      Modules: {{ qr.modules }}, dark: {{ qr.dark_modules }}, functional: {{ qr.functional_modules }},
      data: {{ qr.data_modules }}, ecc: {{ qr.ecc_modules }}
    </div>
    <a href="/export/png?{{ query }}">PNG</a> |
    <a href="/export/svg?{{ query }}">SVG</a> |
    <a href="/export/zones.png?{{ query }}">Zones PNG</a>
  </div>
  <div>
    {% for name, color in palette.items() %}
    <div><span class="sw" style="background:rgb{{ color }}"></span>{{ name }}</div>
    {% endfor %}
  </div>
  {% endif %}
</body>
</html>
"""

# Logo of the last form submission, reused by the SVG/PNG exports
_current_logo_image = None


def _read_params(values) -> Tuple[str, EncodeOptions, RenderStyle]:
    """
    Extract and validate QR generation parameters from request values.

    Raises:
        InvalidConfiguration: If a value is rejected by the option records
    """
    text = (values.get('text') or "").strip()
    ecc = (values.get('ecc') or "M").strip().upper()
    mode = (values.get('mode') or "auto").strip().lower()
    encoding = (values.get('encoding') or "utf-8").strip()
    mask = values.get('mask') or "0"

    try:
        mask = int(mask)
    except (ValueError, TypeError):
        mask = -1  # rejected by EncodeOptions
    try:
        border = int(values.get('border') or 4)
        if border < 0 or border > 20:
            border = 4
    except (ValueError, TypeError):
        border = 4
    try:
        scale = int(values.get('scale') or 10)
        radius = int(values.get('radius') or 0)
    except (ValueError, TypeError):
        scale, radius = 0, -1  # rejected by RenderStyle

    options = EncodeOptions(
        ec_level=ecc, mask_pattern=mask, charset=encoding,
        mode=None if mode == 'auto' else mode,
    )
    style = RenderStyle(
        module_size=scale, border=border,
        active_color=values.get('dark') or '#000000',
        inactive_color=values.get('light') or '#ffffff',
        background_color=values.get('background') or values.get('light') or '#ffffff',
        corner_radius=radius,
        logo=_current_logo_image,
    )
    return text, options, style


app = Flask(__name__)


@app.route('/', methods=['GET', 'POST'])
def index():
    global _current_logo_image

    text = ""
    ecc = "M"
    mask = "0"
    mode = "auto"
    encoding = "utf-8"
    border = 4

    qr_view: Optional[Dict[str, Any]] = None
    error = None
    query = ""

    if request.method == 'POST':
        text = (request.form.get('text') or "").strip()
        ecc = (request.form.get('ecc') or "M").strip().upper()
        mask = request.form.get('mask') or "0"
        mode = (request.form.get('mode') or "auto").strip().lower()
        encoding = (request.form.get('encoding') or "utf-8").strip()
        try:
            border = int(request.form.get('border') or 4)
        except (ValueError, TypeError):
            border = 4

        # Read the logo file if one was uploaded
        if 'logo' in request.files and request.files['logo'].filename:
            file = request.files['logo']
            try:
                _current_logo_image = Image.open(file.stream)
                _current_logo_image.load()
                logger.info(f"Logo uploaded: {file.filename} ({_current_logo_image.size})")
            except OSError as ex:
                logger.warning(f"Could not load logo: {ex}")
                _current_logo_image = None

        if not text:
            error = "Enter the text you want to encode."
        else:
            try:
                _, options, _ = _read_params(request.form)
                logger.info(f"Generating QR code with parameters: ecc={ecc}, mask={mask}, mode={mode}")
                matrix = make_qr(text, options)
                logger.info(f"Successfully generated QR code version {matrix.version}")
            except QRMatrixError as ex:
                error = f"Could not generate the QR code with the chosen parameters: {ex}"
                logger.error(f"QR generation failed: {ex}")
                matrix = None

            if matrix is not None:
                b64, metrics = render_zones_png(matrix, scale=6, border=border)
                query = urlencode({
                    'text': text, 'ecc': ecc, 'mask': mask, 'mode': mode,
                    'encoding': encoding, 'border': border,
                })
                qr_view = {
                    'version': matrix.version,
                    'ecc': matrix.ec_level.letter,
                    'mask': matrix.mask_pattern,
                    'mode': matrix.mode.name.lower(),
                    'img_b64': b64,
                    **metrics,
                }

    return render_template_string(
        TEMPLATE,
        text=text, ecc=ecc, mask=mask, mode=mode, encoding=encoding, border=border,
        qr=qr_view, error=error, palette=PALETTE, query=query,
    )


def _export_matrix():
    text, options, style = _read_params(request.args)
    if not text:
        return None, style, ("Missing text", 400)
    return make_qr(text, options), style, None


@app.errorhandler(QRMatrixError)
def handle_qr_error(ex):
    logger.error(f"Export failed: {ex}")
    return f"Invalid request: {ex}", 400


@app.route('/export/png', methods=['GET'])
def export_png():
    matrix, style, failure = _export_matrix()
    if failure:
        return failure
    buf = BytesIO(render_png_bytes(matrix, style))
    return send_file(buf, as_attachment=True, download_name='qr.png', mimetype='image/png')


@app.route('/export/svg', methods=['GET'])
def export_svg():
    matrix, style, failure = _export_matrix()
    if failure:
        return failure
    buf = BytesIO(render_svg(matrix, style))
    return send_file(buf, as_attachment=True, download_name='qr.svg', mimetype='image/svg+xml')


@app.route('/export/zones.png', methods=['GET'])
def export_zones_png():
    matrix, style, failure = _export_matrix()
    if failure:
        return failure
    b64, _ = render_zones_png(matrix, scale=style.module_size, border=style.border)
    buf = BytesIO(base64.b64decode(b64))
    return send_file(buf, as_attachment=True, download_name='qr_zones.png', mimetype='image/png')


if __name__ == "__main__":
    app.run(debug=True)
