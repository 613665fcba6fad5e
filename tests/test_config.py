"""Tests for layout configuration models."""

import pytest
from pydantic import ValidationError

from diagram_layout import (
    CircularLayoutConfig,
    ForceDirectedLayoutConfig,
    GridAlignment,
    GridLayoutConfig,
    LayeredDigraphLayoutConfig,
    LayoutDirection,
    TreeAlignment,
    TreeLayoutConfig,
    parse_layout_config,
)


class TestDefaults:

    def test_tree_defaults(self):
        config = TreeLayoutConfig()
        assert config.angle == 90
        assert config.layer_spacing == 50
        assert config.node_spacing == 30
        assert config.alignment == TreeAlignment.CENTER_CHILDREN

    def test_layered_defaults(self):
        config = LayeredDigraphLayoutConfig()
        assert config.direction == LayoutDirection.DOWN
        assert config.layer_spacing == 80
        assert config.node_spacing == 40
        assert config.crossing_reduction_iterations == 10

    def test_force_defaults(self):
        config = ForceDirectedLayoutConfig()
        assert config.iterations == 100
        assert config.cooling_factor == 0.95
        assert config.seed is None


class TestValidation:

    def test_negative_spacing_rejected(self):
        with pytest.raises(ValidationError):
            TreeLayoutConfig(layer_spacing=-1)
        with pytest.raises(ValidationError):
            GridLayoutConfig(horizontal_spacing=-5)

    def test_negative_iterations_rejected(self):
        with pytest.raises(ValidationError):
            ForceDirectedLayoutConfig(iterations=-1)

    @pytest.mark.parametrize("factor", [0, 1.5, -0.5])
    def test_cooling_factor_range(self, factor):
        with pytest.raises(ValidationError):
            ForceDirectedLayoutConfig(cooling_factor=factor)

    def test_assignment_is_validated(self):
        config = GridLayoutConfig()
        with pytest.raises(ValidationError):
            config.columns = -2

    def test_comparator_excluded_from_dump(self):
        config = CircularLayoutConfig(sort_nodes=True, node_comparator=lambda a, b: 0)
        assert "node_comparator" not in config.model_dump()


class TestParse:

    def test_parse_by_kind(self):
        config = parse_layout_config({"kind": "grid", "columns": 3, "alignment": "top_left"})
        assert isinstance(config, GridLayoutConfig)
        assert config.columns == 3
        assert config.alignment == GridAlignment.TOP_LEFT

    def test_parse_layered_direction(self):
        config = parse_layout_config({"kind": "layered", "direction": "right"})
        assert isinstance(config, LayeredDigraphLayoutConfig)
        assert config.direction == LayoutDirection.RIGHT

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            parse_layout_config({"kind": "spiral"})
