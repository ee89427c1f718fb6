import shutil
import subprocess

import pytest
from PIL import Image, ImageDraw

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


class FakeFont:
    """Fixed-metrics font that fills each glyph's cell with a solid colour."""

    def __init__(self, widths=None, default_width=2, height=2, line_gap=0, bearing=0):
        self.widths = widths or {}
        self.default_width = default_width
        self.height = height
        self.gap = line_gap
        self.bearing = bearing
        self.calls = []

    def advance(self, char):
        return self.widths.get(char, self.default_width) - self.bearing

    def side_bearing(self, char):
        return self.bearing

    def line_height(self):
        return self.height

    def line_gap(self):
        return self.gap

    def draw_glyph(self, canvas, position, char, colour):
        self.calls.append((position, char, colour))
        x, y = position
        w = int(self.advance(char) + self.side_bearing(char))
        h = int(self.height - self.gap)
        ImageDraw.Draw(canvas).rectangle((x, y, x + w - 1, y + h - 1), fill=colour)


class SequenceSource:
    def __init__(self, chars):
        self.chars = list(chars)
        self.index = 0

    def next_char(self):
        char = self.chars[self.index % len(self.chars)]
        self.index += 1
        return char


@pytest.fixture
def fake_font():
    return FakeFont()


@pytest.fixture
def red_image():
    return Image.new("RGB", (4, 4), (255, 0, 0))
