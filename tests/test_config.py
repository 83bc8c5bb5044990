"""Tests for config module."""

import pytest

from config import WorldConfig, get_world_config, WORLD_PRESETS


class TestWorldConfig:
    def test_reference_defaults(self):
        config = WorldConfig()
        assert (config.cols, config.rows) == (20, 20)
        assert config.cell_size == 1.0
        assert config.npc_count == 10
        assert config.npc_speed < config.player_speed

    @pytest.mark.parametrize("kwargs", [
        {"cols": 0},
        {"rows": -1},
        {"cell_size": 0.0},
        {"npc_count": -2},
        {"player_radius": 0.5},
        {"player_radius": -0.1},
        {"cols": 5.0},
        {"rows": 2.5},
        {"npc_count": 1.5},
        {"cols": True},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            WorldConfig(**kwargs)

    def test_copy_overrides_without_touching_original(self):
        base = WorldConfig(cols=8)
        changed = base.copy(rows=3, npc_count=1)
        assert (changed.cols, changed.rows, changed.npc_count) == (8, 3, 1)
        assert (base.rows, base.npc_count) == (20, 10)

    def test_copy_validates(self):
        with pytest.raises(ValueError):
            WorldConfig().copy(cols=0)


class TestPresets:
    @pytest.mark.parametrize("name", ["reference", "small", "large"])
    def test_known_presets(self, name):
        assert get_world_config(name) is WORLD_PRESETS[name]

    def test_default_is_reference(self):
        assert (get_world_config().cols, get_world_config().rows) == (20, 20)

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="unknown world preset"):
            get_world_config("nightmare")
