import pytest

from figures.models.canvas_model import Canvas, OutputFormat
from figures.models.errors import EmptyFigureError, NoRasterError
from figures.models.figure_model import Figure
from figures.services.compose_service import ComposeService


@pytest.fixture()
def service() -> ComposeService:
    return ComposeService()


def test_blank(service):
    canvas = service.blank(5, 4, (1, 2, 3, 255))
    assert canvas.raster.size == (5, 4)
    assert (canvas.box_width, canvas.box_height) == (5, 4)
    assert canvas.raster.getpixel((4, 3)) == (1, 2, 3, 255)


def test_blank_empty(service):
    with pytest.raises(EmptyFigureError):
        service.blank(0, 4)


def test_compose_places_layer_at_position(service):
    bg = service.blank(20, 20, (0, 0, 255, 255))
    square = Figure(5, 5).set_background_color(255, 0, 0).create()
    square.canvas.set_position(10, 10)

    result = service.compose(bg, [square.canvas])

    assert result.raster.getpixel((12, 12)) == (255, 0, 0, 255)
    assert result.raster.getpixel((5, 5)) == (0, 0, 255, 255)
    # фон не мутируется
    assert bg.raster.getpixel((12, 12)) == (0, 0, 255, 255)


def test_compose_keeps_background_outside_ellipse(service):
    bg = service.blank(10, 10, (0, 255, 0, 255))
    dot = Figure(10, 10).set_background_color(255, 0, 0).is_ellipse().create()
    result = service.compose(bg, [dot.canvas])
    assert result.raster.getpixel((0, 0)) == (0, 255, 0, 255)
    assert result.raster.getpixel((5, 5)) == (255, 0, 0, 255)


def test_compose_clips_negative_offsets(service):
    bg = service.blank(10, 10)
    square = Figure(6, 6).set_background_color(9, 9, 9).create()
    square.canvas.set_position(-3, 7)
    result = service.compose(bg, [square.canvas])
    assert result.raster.getpixel((0, 9)) == (9, 9, 9, 255)
    assert result.raster.getpixel((3, 9))[3] == 0


def test_compose_fully_outside_is_noop(service):
    bg = service.blank(4, 4)
    square = Figure(2, 2).create()
    square.canvas.set_position(50, 50)
    result = service.compose(bg, [square.canvas])
    assert result.raster.tobytes() == bg.raster.tobytes()


def test_compose_inherits_background_format(service):
    bg = service.blank(4, 4).to_gif()
    assert service.compose(bg, []).output_format is OutputFormat.GIF


def test_compose_requires_rasters(service):
    with pytest.raises(NoRasterError):
        service.compose(Canvas(), [])
    with pytest.raises(NoRasterError):
        service.compose(service.blank(2, 2), [Figure(2, 2).canvas])


def test_centered(service):
    bg = service.blank(40, 30)
    fig = Figure(10, 10).create()
    service.centered(bg, fig.canvas)
    assert (fig.canvas.x, fig.canvas.y) == (15, 10)
