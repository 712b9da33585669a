# renderer/ppm.py
"""
Plain-text pixel map (PPM "P3") encoding.

Layout: a three-line header (magic number, "width height", maximum channel
value) followed by one line per pixel, rows top-to-bottom and pixels
left-to-right. Each pixel is three right-aligned, 3-character-wide decimal
fields separated by single spaces.
"""
from typing import Iterator
from core.image import Image
from core.pixel import CHANNEL_MAX, Pixel

MAGIC_NUMBER = "P3"


def format_pixel(pixel: Pixel) -> str:
    """Accepts a Pixel or any (r, g, b) triple."""
    r, g, b = pixel
    return f"{r:>3} {g:>3} {b:>3}"


def iter_ppm_lines(image: Image) -> Iterator[str]:
    """Yields the encoded file one newline-terminated line at a time."""
    yield f"{MAGIC_NUMBER}\n"
    yield f"{image.width} {image.height}\n"
    yield f"{CHANNEL_MAX}\n"
    for row in image.pixels.tolist():
        for pixel in row:
            yield format_pixel(pixel) + "\n"


def encode_ppm(image: Image) -> str:
    return "".join(iter_ppm_lines(image))


def write_ppm(image: Image, path: str) -> None:
    """
    Write the image to path in P3 format.

    Raises:
        OSError: If the file cannot be opened or written. A partially
            written file is left in place.
    """
    with open(path, "w", encoding="ascii", newline="\n") as f:
        f.writelines(iter_ppm_lines(image))
