from __future__ import annotations

from io import BytesIO

import numpy as np
from PIL import Image, ImageDraw


def cell_color(k: int):
    # distinct, never white
    return ((37 * k + 40) % 200, (91 * k + 80) % 200, (53 * k + 120) % 200)


def map_pt(p, box_size: float, size_px: int):
    s = (size_px - 1) / float(box_size)
    return (float(p[0]) * s, float(p[1]) * s)


def render_cells_png(diagram, box_size: float, size_px: int = 400) -> bytes:
    """
    Fill every enumerated cell with cell_color(face_id) on a white canvas.
    """
    img = Image.new("RGB", (size_px, size_px), (255, 255, 255))
    draw = ImageDraw.Draw(img)

    for cell in diagram.cells():
        pts = [map_pt(p, box_size, size_px) for p in cell.points_array()]
        draw.polygon(pts, fill=cell_color(cell.face_id))

    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def load_png(png_bytes: bytes) -> np.ndarray:
    return np.asarray(Image.open(BytesIO(png_bytes)).convert("RGB"), dtype=np.int16)
