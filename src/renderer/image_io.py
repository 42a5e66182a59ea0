# renderer/image_io.py
import numpy as np
from PIL import Image

def to_pixel_bytes(framebuffer: np.ndarray) -> np.ndarray:
    """
    Convert float RGB to 8-bit-scale integers by truncating c * 255.

    Nothing is clamped: channels outside [0, 1] give values below 0 or
    above 255, and they are returned as is.
    """
    return np.trunc(framebuffer * 255).astype(np.int64)

def write_ppm(path: str, framebuffer: np.ndarray) -> None:
    """
    Write a plain-text (P3) PPM file, rows top to bottom, one pixel per line.
    """
    height, width = framebuffer.shape[:2]
    pixels = to_pixel_bytes(framebuffer).reshape(-1, 3)
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for r, g, b in pixels:
            f.write(f"{r} {g} {b}\n")

def write_png(path: str, framebuffer: np.ndarray) -> None:
    """
    Write a PNG. Unlike PPM, PNG cannot hold out-of-range samples, so
    channels are clipped to 0..255 here.
    """
    output = to_pixel_bytes(framebuffer).clip(0, 255).astype("uint8")
    Image.fromarray(output).save(path)

def save_image(path: str, framebuffer: np.ndarray) -> None:
    """
    Dispatch on the file extension: .png goes through PIL, anything else is
    written as PPM.
    """
    if path.lower().endswith(".png"):
        write_png(path, framebuffer)
    else:
        write_ppm(path, framebuffer)
