"""
Tests for the headless sampling CLI.
"""
import argparse
import pytest
from PIL import Image, ImageDraw

import headless
from services.surface_snapshot import SurfaceSnapshot
from services.color_sampler import SampleResult


@pytest.fixture
def image_path(tmp_path):
    """20x10 PNG: left half tomato, right half white"""
    image = Image.new('RGB', (20, 10), (255, 99, 71))
    ImageDraw.Draw(image).rectangle([10, 0, 19, 9], fill=(255, 255, 255))
    path = tmp_path / 'surface.png'
    image.save(path)
    return str(path)


class TestParsePoint:

    def test_integers(self):
        assert headless.parse_point('3,4') == (3.0, 4.0)

    def test_floats(self):
        assert headless.parse_point('1.5,-2') == (1.5, -2.0)

    @pytest.mark.parametrize("text", ['3', '1,2,3', 'a,b', ''])
    def test_malformed(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            headless.parse_point(text)


class TestFormatting:

    def test_sample_line(self):
        line = headless.format_sample((1.0, 2.5), SampleResult(1.0, 2.5, 0xFFFF6347))
        assert line == '1,2.5  #FF6347  0xFFFF6347  Tomato'

    def test_out_of_bounds_line(self):
        assert headless.format_sample((-1.0, 0.0), None) == '-1,0  out of bounds'

    def test_sample_points(self, image_path):
        snapshot = SurfaceSnapshot.from_file(image_path)
        results = headless.sample_points(snapshot, [(0, 0), (15, 5), (20, 0)])
        assert [r.hex_color if r else None for _, r in results] == ['#FF6347', '#FFFFFF', None]


class TestMain:

    def test_points(self, image_path, capsys):
        assert headless.main([image_path, '-p', '2,3', '-p', '12,3', '-p', '50,50']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '2,3  #FF6347  0xFFFF6347  Tomato',
            '12,3  #FFFFFF  0xFFFFFFFF  White',
            '50,50  out of bounds',
        ]

    def test_defaults_to_center(self, image_path, capsys):
        assert headless.main([image_path]) == 0
        assert capsys.readouterr().out.strip() == '10,5  #FFFFFF  0xFFFFFFFF  White'

    def test_name_lookup(self, capsys):
        assert headless.main(['--name', 'ff7f50']) == 0
        assert capsys.readouterr().out.strip() == 'Coral'

    def test_name_lookup_unknown(self, capsys):
        assert headless.main(['--name', '#123456']) == 0
        assert capsys.readouterr().out.strip() == 'Unknown Color'

    def test_missing_file(self, tmp_path, capsys):
        assert headless.main([str(tmp_path / 'missing.png')]) == 1
        assert 'not found' in capsys.readouterr().out

    def test_image_required(self):
        with pytest.raises(SystemExit):
            headless.main([])
