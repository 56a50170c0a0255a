from PIL import Image

from figures.models.canvas_model import Canvas, OutputFormat


def test_defaults():
    canvas = Canvas()
    assert (canvas.box_width, canvas.box_height) == (0, 0)
    assert canvas.opacity == 0
    assert canvas.output_format is OutputFormat.PNG
    assert not canvas.has_raster()
    assert (canvas.x, canvas.y) == (0, 0)


def test_fluent_setters_chain():
    canvas = Canvas()
    assert canvas.set_box(10, 20).set_opacity(50).set_position(3, 4).to_jpg() is canvas
    assert (canvas.box_width, canvas.box_height, canvas.opacity) == (10, 20, 50)
    assert (canvas.x, canvas.y) == (3, 4)
    assert canvas.output_format is OutputFormat.JPEG
    assert canvas.to_gif().output_format is OutputFormat.GIF
    assert canvas.to_png().output_format is OutputFormat.PNG


def test_has_raster():
    assert Canvas(raster=Image.new("RGBA", (1, 1))).has_raster()


def test_format_extensions():
    assert OutputFormat.PNG.extension == ".png"
    assert OutputFormat.JPEG.extension == ".jpg"
    assert OutputFormat.GIF.extension == ".gif"
    assert OutputFormat.JPEG.pil_format == "JPEG"
