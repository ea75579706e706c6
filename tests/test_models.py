"""Unit tests for Pydantic models and config persistence."""

import json

import pytest
from pydantic import ValidationError

from colorpicker.exceptions import ConfigFileInvalidError, ConfigValidationError
from colorpicker.model_manager import PydanticPersistence
from colorpicker.models import (
    Color,
    Coordinate,
    InputMode,
    PickerConfig,
    SelectionState,
    SurfaceGeometry,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_frozen(self):
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 10

    @pytest.mark.unit
    def test_white(self):
        assert Color.white() == Color(r=255, g=255, b=255)

    @pytest.mark.unit
    def test_hex_conversions(self):
        color = Color.from_hex("#f80")
        assert color == Color(r=255, g=136, b=0)
        assert color.to_hex() == "#ff8800"
        assert Color.from_hex("not a color") is None

    @pytest.mark.unit
    def test_hsv_conversions(self):
        assert Color.from_hsv((240, 100, 100)) == Color(r=0, g=0, b=255)
        assert Color(r=0, g=0, b=255).to_hsv() == (240, 100.0, 100.0)

    @pytest.mark.unit
    def test_to_rgb_tuple(self):
        """Test RGB tuple conversion."""
        color = Color(r=10, g=20, b=30)
        assert color.to_rgb_tuple() == (10, 20, 30)
        assert Color.from_rgb_tuple((10, 20, 30)) == color


class TestSelectionState:
    """Test SelectionState record."""

    @pytest.mark.unit
    def test_defaults(self):
        """An untouched picker is white with the hue selector on red."""
        state = SelectionState()
        assert state.color == Color.white()
        assert state.hue == Color(r=255, g=0, b=0)
        assert state.hue_position == 0.0
        assert state.surface_coordinate == Coordinate(x=0, y=0)

    @pytest.mark.unit
    def test_derived_forms(self):
        state = SelectionState(color=Color(r=255, g=136, b=0))
        assert state.hex == "#ff8800"
        assert state.hsv == (32, 100.0, 100.0)

    @pytest.mark.unit
    def test_geometry_must_be_positive(self):
        with pytest.raises(ValidationError):
            SurfaceGeometry(surface_width=0)


class TestPickerConfig:
    """Test PickerConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = PickerConfig()
        assert config.surface_width == 48
        assert config.surface_height == 16
        assert config.hue_width == 48
        assert config.initial_color is None
        assert config.input_mode == InputMode.HEX
        assert config.numeric_parse_fallback == 255

    @pytest.mark.unit
    def test_geometry(self):
        config = PickerConfig(surface_width=20, surface_height=10, hue_width=30)
        assert config.geometry() == SurfaceGeometry(
            surface_width=20, surface_height=10, hue_width=30
        )

    @pytest.mark.unit
    def test_initial_color_must_be_hex(self):
        assert PickerConfig(initial_color="#3366cc").initial_color == "#3366cc"
        with pytest.raises(ValidationError):
            PickerConfig(initial_color="blue")

    @pytest.mark.unit
    def test_parse_fallback_range(self):
        with pytest.raises(ValidationError):
            PickerConfig(numeric_parse_fallback=300)

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        config = PickerConfig(initial_color="#3366cc", input_mode=InputMode.RGB)
        config.save(path)

        loaded = PickerConfig.load_or_default(path)
        assert loaded == config

    @pytest.mark.unit
    def test_load_missing_file_returns_default(self, temp_dir):
        loaded = PickerConfig.load_or_default(temp_dir / "missing.json")
        assert loaded == PickerConfig()
        assert not (temp_dir / "missing.json").exists()

    @pytest.mark.unit
    def test_load_invalid_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"surface_width": 10,}')

        with pytest.raises(ConfigFileInvalidError):
            PickerConfig.load_or_default(path)

    @pytest.mark.unit
    def test_load_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PickerConfig.load_or_default(path)
        assert "empty" in exc_info.value.user_message

    @pytest.mark.unit
    def test_load_invalid_value(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"surface_width": -3}))

        with pytest.raises(ConfigValidationError) as exc_info:
            PickerConfig.load_or_default(path)
        assert exc_info.value.field == "surface_width"
        assert "terminal cells" in exc_info.value.recovery_hint


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, temp_dir):
        """Test that save_json creates a .bak file before overwriting."""
        path = temp_dir / "config.json"
        PydanticPersistence.save_json(PickerConfig(hue_width=10), path, backup=False)
        PydanticPersistence.save_json(PickerConfig(hue_width=20), path, backup=True)

        backup_path = temp_dir / "config.json.bak"
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, PickerConfig).hue_width == 10
        assert PydanticPersistence.load_json(path, PickerConfig).hue_width == 20

    @pytest.mark.unit
    def test_save_without_backup(self, temp_dir):
        path = temp_dir / "config.json"
        PydanticPersistence.save_json(PickerConfig(), path, backup=False)
        PydanticPersistence.save_json(PickerConfig(), path, backup=False)
        assert not (temp_dir / "config.json.bak").exists()

    @pytest.mark.unit
    def test_no_temp_file_left_behind(self, temp_dir):
        path = temp_dir / "nested" / "config.json"
        PydanticPersistence.save_json(PickerConfig(), path)
        assert path.exists()
        assert not (temp_dir / "nested" / "config.json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(temp_dir / "nope.json", PickerConfig)
