"""
Portfolio card renderer.

Draws the alumni portfolio as a 4:5 PNG card with Pillow: a gradient header
with the photo placeholder, name and badges, then a contact/skills/awards
column next to the about, work, education and experience sections.

Coordinates are expressed for a 1000x1250 card and multiplied by ``scale``.
"""

import io
import logging
from datetime import date
from functools import lru_cache

from django.conf import settings
from PIL import Image
from PIL import ImageDraw
from PIL import ImageFont

from records_portal.alumni.schemas import AlumniSchema
from records_portal.alumni.schemas.alumni import EMPLOYED
from records_portal.core.exceptions import RenderError

logger = logging.getLogger(__name__)

WIDTH = 1000
HEIGHT = 1250
HEADER_HEIGHT = 330
DEFAULT_POSITION = "ศิษย์เก่า"

MAX_AWARDS = 3
MAX_EDUCATION = 2
MAX_EXPERIENCE = 2

COLORS = {
    "background": "#ffffff",
    "header_start": (37, 99, 235),
    "header_end": (124, 58, 237),
    "header_text": "#ffffff",
    "header_muted": "#dbeafe",
    "photo": "#e0e7ff",
    "photo_text": "#4338ca",
    "employed": "#16a34a",
    "seeking": "#f97316",
    "panel": "#f8fafc",
    "border": "#e2e8f0",
    "heading": "#1f2937",
    "text": "#374151",
    "muted": "#6b7280",
    "skill": "#6d28d9",
    "award": "#fef9c3",
    "education": "#ea580c",
    "experience": "#0891b2",
}


@lru_cache(maxsize=32)
def load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """
    Load the card font at ``size`` pixels.

    ``PORTFOLIO_FONT_PATH`` should point to a TrueType font with Thai glyphs.
    Without it Pillow's bundled font is used.
    """
    path = settings.PORTFOLIO_FONT_PATH
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            logger.warning("Portfolio font %s could not be loaded", path)
    return ImageFont.load_default(size=size)


def thai_date(day: date) -> str:
    """Format a date the way th-TH does (Buddhist era), e.g. 31/5/2567."""
    return f"{day.day}/{day.month}/{day.year + 543}"


def initials(alumni: AlumniSchema) -> str:
    return f"{alumni.first_name[:1]}{alumni.last_name[:1]}".upper() or "?"


def portfolio_filename(alumni: AlumniSchema) -> str:
    return f"Portfolio_{alumni.first_name}_{alumni.last_name}.png"


class PortfolioRenderer:
    """
    Render alumni portfolio cards.

    Args:
        scale: Pixel density multiplier, ``settings.PORTFOLIO_SCALE`` by default
    """

    def __init__(self, scale: int | None = None):
        self.scale = scale or settings.PORTFOLIO_SCALE

    def s(self, value: float) -> int:
        return int(value * self.scale)

    def font(self, size: int):
        return load_font(self.s(size))

    @property
    def size(self) -> tuple[int, int]:
        return self.s(WIDTH), self.s(HEIGHT)

    def render(self, alumni: AlumniSchema, today: date | None = None) -> bytes:
        """
        Render the card as PNG bytes.

        Raises:
            RenderError: Pillow failed to draw or encode the image
        """
        try:
            img = Image.new("RGB", self.size, COLORS["background"])
            draw = ImageDraw.Draw(img)
            self._draw_header(img, draw, alumni)
            self._draw_sidebar(draw, alumni)
            self._draw_main(draw, alumni)
            self._draw_footer(draw, today or date.today())

            output = io.BytesIO()
            img.save(output, format="PNG")
        except (OSError, ValueError) as exc:
            logger.exception("Portfolio rendering failed for alumni %s", alumni.id)
            raise RenderError() from exc
        return output.getvalue()

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def _draw_header(self, img: Image.Image, draw: ImageDraw.ImageDraw, alumni: AlumniSchema) -> None:
        width = img.width
        start, end = COLORS["header_start"], COLORS["header_end"]
        for x in range(width):
            ratio = x / max(width - 1, 1)
            color = tuple(int(start[i] + (end[i] - start[i]) * ratio) for i in range(3))
            draw.line([(x, 0), (x, self.s(HEADER_HEIGHT))], fill=color)

        # Photo placeholder with initials
        box = [self.s(60), self.s(60), self.s(260), self.s(260)]
        draw.rounded_rectangle(box, radius=self.s(24), fill=COLORS["photo"], outline="#ffffff", width=self.s(6))
        draw.text(
            (self.s(160), self.s(160)),
            initials(alumni),
            fill=COLORS["photo_text"],
            font=self.font(72),
            anchor="mm",
        )

        employed = alumni.employment_status == EMPLOYED
        badge = "มีงานทำ" if employed else "หางาน"
        draw.rounded_rectangle(
            [self.s(170), self.s(240), self.s(290), self.s(280)],
            radius=self.s(20),
            fill=COLORS["employed"] if employed else COLORS["seeking"],
        )
        draw.text((self.s(230), self.s(260)), badge, fill="#ffffff", font=self.font(18), anchor="mm")

        draw.text((self.s(320), self.s(80)), alumni.full_name, fill=COLORS["header_text"], font=self.font(48))
        draw.text(
            (self.s(320), self.s(148)),
            alumni.position or DEFAULT_POSITION,
            fill=COLORS["header_muted"],
            font=self.font(26),
        )
        draw.text((self.s(320), self.s(200)), alumni.department, fill=COLORS["header_text"], font=self.font(20))
        draw.text(
            (self.s(320), self.s(232)),
            f"จบปี {alumni.graduation_year}",
            fill=COLORS["header_text"],
            font=self.font(20),
        )
        if alumni.alumni_id:
            draw.text(
                (self.s(950), self.s(40)),
                alumni.alumni_id,
                fill=COLORS["header_text"],
                font=self.font(18),
                anchor="ra",
            )

    # ------------------------------------------------------------------
    # Left column
    # ------------------------------------------------------------------

    def _heading(self, draw: ImageDraw.ImageDraw, x: int, y: int, title: str) -> int:
        draw.text((self.s(x), self.s(y)), title, fill=COLORS["heading"], font=self.font(22))
        return y + 36

    def _draw_sidebar(self, draw: ImageDraw.ImageDraw, alumni: AlumniSchema) -> None:
        left, right = 40, 360
        draw.rounded_rectangle(
            [self.s(left - 10), self.s(HEADER_HEIGHT + 20), self.s(right + 10), self.s(HEIGHT - 70)],
            radius=self.s(16),
            fill=COLORS["panel"],
            outline=COLORS["border"],
        )
        y = HEADER_HEIGHT + 40

        y = self._heading(draw, left, y, "ติดต่อ")
        contacts = [
            ("อีเมล", alumni.email),
            ("เบอร์โทร", alumni.phone),
            ("ที่อยู่", alumni.address),
            ("เว็บไซต์", alumni.portfolio),
        ]
        for label, value in contacts:
            if not value:
                continue
            draw.text((self.s(left), self.s(y)), label, fill=COLORS["muted"], font=self.font(14))
            y += 20
            y = self._paragraph(draw, value, left, y, right - left, 16, max_lines=2)
            y += 8

        if alumni.skills:
            y = self._heading(draw, left, y + 10, "ทักษะ")
            y = self._chips(draw, alumni.skills, left, y, right - left)

        awards = alumni.custom_fields[:MAX_AWARDS]
        if awards:
            y = self._heading(draw, left, y + 10, "รางวัล")
            for field in awards:
                draw.rounded_rectangle(
                    [self.s(left), self.s(y), self.s(right), self.s(y + 56)],
                    radius=self.s(10),
                    fill=COLORS["award"],
                )
                draw.text((self.s(left + 10), self.s(y + 6)), field.label, fill=COLORS["muted"], font=self.font(14))
                draw.text((self.s(left + 10), self.s(y + 26)), field.value, fill=COLORS["text"], font=self.font(16))
                y += 64

    def _chips(self, draw: ImageDraw.ImageDraw, labels: list[str], x0: int, y: int, width: int) -> int:
        """Draw wrapped skill chips and return the y below them."""
        font = self.font(14)
        x = x0
        for label in labels:
            chip_width = draw.textlength(label, font=font) / self.scale + 24
            if x > x0 and x + chip_width > x0 + width:
                x = x0
                y += 34
            draw.rounded_rectangle(
                [self.s(x), self.s(y), self.s(x + chip_width), self.s(y + 28)],
                radius=self.s(14),
                fill=COLORS["skill"],
            )
            draw.text((self.s(x + 12), self.s(y + 14)), label, fill="#ffffff", font=font, anchor="lm")
            x += chip_width + 8
        return y + 40

    # ------------------------------------------------------------------
    # Right column
    # ------------------------------------------------------------------

    def _draw_main(self, draw: ImageDraw.ImageDraw, alumni: AlumniSchema) -> None:
        left, right = 400, 960
        y = HEADER_HEIGHT + 40

        if alumni.about_me:
            y = self._heading(draw, left, y, "เกี่ยวกับฉัน")
            y = self._paragraph(draw, alumni.about_me, left, y, right - left, 18, max_lines=6) + 20

        if alumni.workplace:
            y = self._heading(draw, left, y, "การทำงานปัจจุบัน")
            draw.text((self.s(left), self.s(y)), alumni.position, fill=COLORS["heading"], font=self.font(20))
            draw.text((self.s(left), self.s(y + 30)), alumni.workplace, fill=COLORS["text"], font=self.font(18))
            y += 80

        half = (right - left - 20) // 2
        columns = [
            (left, "การศึกษา", COLORS["education"], [
                (e.institution, e.years, e.grade) for e in alumni.education[:MAX_EDUCATION]
            ]),
            (left + half + 20, "ประสบการณ์", COLORS["experience"], [
                (e.position, e.company, e.years) for e in alumni.experience[:MAX_EXPERIENCE]
            ]),
        ]
        for x, title, color, entries in columns:
            if not entries:
                continue
            entry_y = self._heading(draw, x, y, title)
            for heading, first, second in entries:
                draw.rectangle([self.s(x), self.s(entry_y), self.s(x + 4), self.s(entry_y + 70)], fill=color)
                entry_y = self._paragraph(draw, heading, x + 14, entry_y, half - 14, 16, max_lines=2)
                draw.text((self.s(x + 14), self.s(entry_y)), first, fill=COLORS["text"], font=self.font(14))
                draw.text((self.s(x + 14), self.s(entry_y + 20)), second, fill=COLORS["muted"], font=self.font(14))
                entry_y += 56

    def _paragraph(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        x: int,
        y: int,
        width: int,
        size: int,
        max_lines: int,
    ) -> int:
        """Draw ``text`` wrapped to ``width`` and return the y below it."""
        font = self.font(size)
        lines = wrap_text(text, lambda chunk: draw.textlength(chunk, font=font), self.s(width))
        if len(lines) > max_lines:
            lines = lines[:max_lines]
            lines[-1] = lines[-1].rstrip() + "…"
        line_height = size + 8
        for line in lines:
            draw.text((self.s(x), self.s(y)), line, fill=COLORS["text"], font=font)
            y += line_height
        return y

    def _draw_footer(self, draw: ImageDraw.ImageDraw, today: date) -> None:
        draw.line(
            [(self.s(40), self.s(HEIGHT - 50)), (self.s(WIDTH - 40), self.s(HEIGHT - 50))],
            fill=COLORS["border"],
            width=self.s(1),
        )
        draw.text(
            (self.s(WIDTH - 40), self.s(HEIGHT - 25)),
            f"Updated: {thai_date(today)}",
            fill=COLORS["muted"],
            font=self.font(14),
            anchor="rm",
        )


def wrap_text(text: str, measure, width: float) -> list[str]:
    """
    Greedy line wrapping.

    Breaks on spaces where possible; Thai runs without spaces are broken
    between characters.
    """
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if measure(candidate) <= width:
                line = candidate
                continue
            if line:
                lines.append(line)
                line = ""
            for char in word:
                if line and measure(line + char) > width:
                    lines.append(line)
                    line = ""
                line += char
        lines.append(line)
    return lines
