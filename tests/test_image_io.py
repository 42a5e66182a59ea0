import numpy as np
from PIL import Image

from renderer.image_io import save_image, to_pixel_bytes, write_png, write_ppm


def test_to_pixel_bytes_truncates_without_clamping():
    framebuffer = np.array([[[-0.5, 0.5, 1.5]]])

    assert to_pixel_bytes(framebuffer).tolist() == [[[-127, 127, 382]]]


def test_write_ppm(tmp_path):
    framebuffer = np.array([
        [[0.0, 0.5, 1.0], [1.0, 1.0, 1.0]],
        [[0.1, 0.2, 0.3], [2.0, -1.0, 0.999]],
    ])
    path = tmp_path / "out.ppm"

    write_ppm(str(path), framebuffer)

    assert path.read_text().splitlines() == [
        "P3",
        "2 2",
        "255",
        "0 127 255",
        "255 255 255",
        "25 51 76",
        "510 -255 254",
    ]


def test_write_png_clips(tmp_path):
    framebuffer = np.array([[[2.0, -1.0, 0.5]]])
    path = tmp_path / "out.png"

    write_png(str(path), framebuffer)

    with Image.open(path) as img:
        assert img.size == (1, 1)
        assert img.getpixel((0, 0)) == (255, 0, 127)


def test_save_image_dispatches_on_extension(tmp_path):
    framebuffer = np.zeros((1, 2, 3))

    save_image(str(tmp_path / "a.PNG"), framebuffer)
    save_image(str(tmp_path / "b.ppm"), framebuffer)

    assert (tmp_path / "a.PNG").read_bytes().startswith(b"\x89PNG")
    assert (tmp_path / "b.ppm").read_text().startswith("P3\n2 1\n255\n")
