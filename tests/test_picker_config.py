"""
Tests for PickerConfig loading and saving.
"""
import json
import pytest

from models.picker_config import PickerConfig, load_picker_config, save_picker_config
from constants import DEFAULT_STROKE_WIDTH, DEFAULT_CIRCLE_RADIUS, SAMPLING_AT_POINTER


class TestPickerConfig:

    def test_defaults(self):
        config = PickerConfig()
        assert config.stroke_width == DEFAULT_STROKE_WIDTH
        assert config.circle_radius == DEFAULT_CIRCLE_RADIUS
        assert config.stroke_color == 0xFF000000
        assert config.live_recolor is True
        assert config.show_outer_ring is False
        assert config.sampling_policy == SAMPLING_AT_POINTER
        assert config.density is None

    def test_policy_is_normalized(self):
        assert PickerConfig(sampling_policy='AT_Center').sampling_policy == 'at_center'

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            PickerConfig(sampling_policy='sideways')

    def test_from_dict_hex_colors(self):
        config = PickerConfig.from_dict({
            'stroke_color': '#00FF00',
            'outer_ring_color': '#80FFFFFF',
        })
        assert config.stroke_color == 0xFF00FF00
        assert config.outer_ring_color == 0x80FFFFFF

    def test_from_dict_int_color_is_masked(self):
        assert PickerConfig.from_dict({'stroke_color': -1}).stroke_color == 0xFFFFFFFF

    @pytest.mark.parametrize("bad", ['green', True, None, '#12'])
    def test_from_dict_rejects_bad_color(self, bad):
        with pytest.raises(ValueError):
            PickerConfig.from_dict({'stroke_color': bad})

    def test_from_dict_ignores_unknown_keys(self):
        config = PickerConfig.from_dict({'circle_radius': 80, 'favourite_food': 'soup'})
        assert config.circle_radius == 80

    def test_to_dict_writes_hex(self):
        data = PickerConfig(stroke_color=0xFF123456).to_dict()
        assert data['stroke_color'] == '#FF123456'
        assert data['sampling_policy'] == 'at_pointer'


class TestConfigFile:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_picker_config(str(tmp_path / 'nope.json')) == PickerConfig()

    def test_no_path_gives_defaults(self):
        assert load_picker_config(None) == PickerConfig()

    def test_save_then_load(self, tmp_path):
        path = tmp_path / 'nested' / 'picker.json'
        config = PickerConfig(
            stroke_width=12, stroke_color=0xFFABCDEF, circle_radius=90,
            live_recolor=False, show_outer_ring=True, sampling_policy='at_center',
            density=2.0,
        )
        save_picker_config(config, str(path))
        assert path.exists()
        assert load_picker_config(str(path)) == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / 'picker.json'
        path.write_text(json.dumps({'show_outer_ring': True}))
        config = load_picker_config(str(path))
        assert config.show_outer_ring is True
        assert config.circle_radius == DEFAULT_CIRCLE_RADIUS

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / 'picker.json'
        path.write_text('{not json')
        with pytest.raises(ValueError):
            load_picker_config(str(path))

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / 'picker.json'
        path.write_text('[1, 2, 3]')
        with pytest.raises(ValueError):
            load_picker_config(str(path))
