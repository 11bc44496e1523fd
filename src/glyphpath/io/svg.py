"""SVG output for laid out text.

TextPaths are replayed onto fonttools pens, so any segment pen (for
instance a RecordingPen or a TTGlyphPen) can consume them. SVG output is
produced with fonttools' SVGPathPen.
"""

import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fontTools.pens.svgPathPen import SVGPathPen

from glyphpath.domain.path import LineTo, MoveTo, QuadCurveTo, TextPath

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def draw_text_path(path: TextPath, pen: Any) -> None:
    """Replay a path onto a fonttools segment pen.

    Each contour is closed before the next MoveTo and after the last op.

    Args:
        path: Path to draw
        pen: Pen implementing moveTo, lineTo, qCurveTo and closePath
    """
    open_contour = False
    for op in path:
        match op:
            case MoveTo(x=x, y=y):
                if open_contour:
                    pen.closePath()
                pen.moveTo((x, y))
                open_contour = True
            case LineTo(x=x, y=y):
                pen.lineTo((x, y))
            case QuadCurveTo(x=x, y=y, control_x=cx, control_y=cy):
                pen.qCurveTo((cx, cy), (x, y))
    if open_contour:
        pen.closePath()


def _number_formatter(precision: int) -> Callable[[float], str]:
    def format_number(value: float) -> str:
        text = f"{round(value, precision):.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return text

    return format_number


def to_svg_path_data(path: TextPath, precision: int = 2) -> str:
    """Serialize a path to SVG path data.

    Args:
        path: Path to serialize
        precision: Number of decimals kept for coordinates

    Returns:
        Content for the ``d`` attribute of an SVG path element
    """
    pen = SVGPathPen(None, ntos=_number_formatter(precision))
    draw_text_path(path, pen)
    return pen.getCommands()


def to_svg_document(path: TextPath, height: float, padding: float = 0.0, precision: int = 2) -> str:
    """Build a standalone SVG document showing a path.

    The viewport spans the path width horizontally and ``height`` vertically,
    both extended by ``padding`` on each side.

    Args:
        path: Path to render
        height: Viewport height in pixels
        padding: Margin around the viewport in pixels
        precision: Number of decimals kept for coordinates

    Returns:
        SVG document as a string
    """
    format_number = _number_formatter(precision)
    width = path.width + 2 * padding
    total_height = height + 2 * padding

    ET.register_namespace("", SVG_NAMESPACE)
    root = ET.Element(
        f"{{{SVG_NAMESPACE}}}svg",
        {
            "width": format_number(width),
            "height": format_number(total_height),
            "viewBox": " ".join(
                format_number(v) for v in (-padding, -padding, width, total_height)
            ),
        },
    )
    ET.SubElement(
        root,
        f"{{{SVG_NAMESPACE}}}path",
        {"d": to_svg_path_data(path, precision), "fill": "black"},
    )
    return ET.tostring(root, encoding="unicode")


def write_svg(path: TextPath, output_path: Path, height: float, padding: float = 0.0) -> None:
    """Write a path as an SVG file.

    Args:
        path: Path to render
        output_path: Destination file
        height: Viewport height in pixels
        padding: Margin around the viewport in pixels
    """
    output_path.write_text(to_svg_document(path, height, padding), encoding="utf-8")
