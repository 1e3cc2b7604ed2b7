"""
Tests for the demo entry point.
"""
import sys
import pytest
from PIL import Image

import main as demo


class FakeImage:
    """Stands in for an opened image file"""

    def __init__(self):
        self.closed = False
        self.mode = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def convert(self, mode):
        self.mode = mode
        return Image.new(mode, (2, 2))


class FakeApplication:
    """Records the argv it is built with instead of starting Qt"""

    created = []

    def __init__(self, argv):
        FakeApplication.created.append(list(argv))

    def exec_(self):
        return 0


# ══════════════════════════════════════════════════════════════════════════
# Image Loading
# ══════════════════════════════════════════════════════════════════════════

class TestLoadImage:

    def test_reads_rgba(self, tmp_path):
        path = tmp_path / 'surface.png'
        Image.new('RGB', (4, 3), (255, 99, 71)).save(path)
        image = demo.load_image(str(path))
        assert image.mode == 'RGBA'
        assert image.size == (4, 3)
        assert image.getpixel((0, 0)) == (255, 99, 71, 255)

    def test_closes_file(self, monkeypatch):
        opened = FakeImage()
        monkeypatch.setattr(demo.Image, 'open', lambda path: opened)
        image = demo.load_image('whatever.png')
        assert opened.closed
        assert opened.mode == 'RGBA'
        assert image.mode == 'RGBA'


# ══════════════════════════════════════════════════════════════════════════
# main()
# ══════════════════════════════════════════════════════════════════════════

class TestMain:

    @pytest.fixture
    def windows(self, qapp, monkeypatch):
        """Run main() against a recording application; collect the window"""
        shown = []
        FakeApplication.created = []
        monkeypatch.setattr(demo, 'QApplication', FakeApplication)
        monkeypatch.setattr(demo, 'set_main_window', shown.append)
        yield shown
        for window in shown:
            window.close()
            window.deleteLater()

    def test_qt_gets_only_program_name(self, windows, tmp_path):
        argv = ['--config', str(tmp_path / 'none.json'), '--policy', 'at_center', '--outer-ring']
        assert demo.main(argv) == 0
        assert FakeApplication.created == [[sys.argv[0]]]

    def test_overrides_applied(self, windows, tmp_path):
        argv = ['--config', str(tmp_path / 'none.json'), '--policy', 'at_center', '--outer-ring']
        demo.main(argv)
        picker = windows[0].picker
        assert picker.sampling_policy.value == 'at_center'
        assert picker.outer_ring_visible

    def test_image_file_used(self, windows, tmp_path):
        path = tmp_path / 'surface.png'
        Image.new('RGB', (30, 20), (0, 0, 255)).save(path)
        demo.main(['--config', str(tmp_path / 'none.json'), '--image', str(path)])
        surface_image = windows[0].surface.image()
        assert (surface_image.width(), surface_image.height()) == (30, 20)

    def test_missing_image(self, windows, tmp_path, capsys):
        argv = ['--config', str(tmp_path / 'none.json'), '--image', str(tmp_path / 'missing.png')]
        assert demo.main(argv) == 1
        assert 'not found' in capsys.readouterr().out
        assert windows == []
