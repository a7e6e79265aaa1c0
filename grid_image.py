"""Render a month grid to an in-memory PIL image."""

from PIL import Image, ImageDraw, ImageFont

from day_of_week import DayOfWeek
from min_max import BoundaryStyle, MinMaxController
from month_graph import WEEK_LENGTH, DayOfMonth, MonthItem, WeekHeader

# Colours
ACCENT = "#0078D4"
GRID_BG = "white"
FG = "#333333"
HEADER_FG = "#888888"
DISABLED_BG = "#EEEEEE"
DISABLED_FG = "#AAAAAA"
SELECTED_FG = "white"

WEEKDAY_ABBR = {
    DayOfWeek.SUNDAY: "Su",
    DayOfWeek.MONDAY: "Mo",
    DayOfWeek.TUESDAY: "Tu",
    DayOfWeek.WEDNESDAY: "We",
    DayOfWeek.THURSDAY: "Th",
    DayOfWeek.FRIDAY: "Fr",
    DayOfWeek.SATURDAY: "Sa",
}


def _draw_centered(draw: ImageDraw.ImageDraw, box: tuple[int, int, int, int],
                   text: str, font, fill: str) -> None:
    # Centre the actual visible pixels (compensate for font metric offsets)
    x0, y0, x1, y1 = box
    bbox = draw.textbbox((0, 0), text, font=font)
    x = x0 + (x1 - x0 + 1 - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = y0 + (y1 - y0 + 1 - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill=fill, font=font)


def _draw_tube(draw: ImageDraw.ImageDraw, box: tuple[int, int, int, int],
               style: BoundaryStyle, inset: int) -> None:
    """Background of a disabled day: rounded on the ends of its run."""
    x0, y0, x1, y1 = box
    tube = (x0, y0 + inset, x1, y1 - inset)
    if style is BoundaryStyle.MIDDLE:
        draw.rectangle(tube, fill=DISABLED_BG)
        return
    radius = (tube[3] - tube[1]) // 2
    draw.rounded_rectangle(tube, radius=radius, fill=DISABLED_BG)
    cx = (x0 + x1) // 2
    if style is BoundaryStyle.START:
        draw.rectangle((cx, tube[1], x1, tube[3]), fill=DISABLED_BG)
    elif style is BoundaryStyle.END:
        draw.rectangle((x0, tube[1], cx, tube[3]), fill=DISABLED_BG)


def _disabled_style(item: DayOfMonth, min_max: MinMaxController | None) -> BoundaryStyle | None:
    if min_max is None:
        return None
    snapshot = item.snapshot()
    if min_max.is_out_of_min_range(snapshot):
        return min_max.get_out_of_min_range_style(snapshot)
    if min_max.is_out_of_max_range(snapshot):
        return min_max.get_out_of_max_range_style(snapshot)
    return None


def render_month_image(items: list[MonthItem],
                       min_max: MinMaxController | None = None,
                       cell_size: int = 32) -> Image.Image:
    """Return an RGBA image of ``items`` laid out seven cells per row.

    Selected days get a filled circle, today an outline, and days outside
    ``min_max`` a tube-shaped grey background.
    """
    rows = -(-len(items) // WEEK_LENGTH)
    img = Image.new("RGBA", (WEEK_LENGTH * cell_size, rows * cell_size), GRID_BG)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    inset = max(1, cell_size // 8)

    for index, item in enumerate(items):
        row, col = divmod(index, WEEK_LENGTH)
        box = (col * cell_size, row * cell_size,
               (col + 1) * cell_size - 1, (row + 1) * cell_size - 1)

        if isinstance(item, WeekHeader):
            _draw_centered(draw, box, WEEKDAY_ABBR[item.day_of_week], font, HEADER_FG)
            continue
        if item.is_filler:
            continue

        circle = (box[0] + 2, box[1] + 2, box[2] - 2, box[3] - 2)
        style = _disabled_style(item, min_max)
        if style is not None:
            _draw_tube(draw, box, style, inset)
            fill = DISABLED_FG
        elif item.is_selected:
            draw.ellipse(circle, fill=ACCENT)
            fill = SELECTED_FG
        else:
            fill = FG
        if item.is_today and not item.is_selected:
            draw.ellipse(circle, outline=ACCENT, width=1)
        _draw_centered(draw, box, str(item.day), font, fill)

    return img
