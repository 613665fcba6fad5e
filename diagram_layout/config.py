"""
Layout configuration using Pydantic models.

Each strategy has its own model carrying a `kind` tag; `LayoutConfig` is the
closed union of all of them, so a config object fully describes which
algorithm runs and how.
"""

from enum import Enum
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# Comparator over LayoutNode objects: negative, zero or positive like cmp()
NodeComparator = Callable[[Any, Any], int]


class TreeAlignment(str, Enum):
    """Where a parent sits within the width allocated to its subtree."""
    START = "start"
    CENTER = "center"
    END = "end"
    CENTER_CHILDREN = "center_children"


class LayoutDirection(str, Enum):
    """Flow direction of a layered layout."""
    DOWN = "down"
    UP = "up"
    RIGHT = "right"
    LEFT = "left"


class GridAlignment(str, Enum):
    """Anchor of a node within its grid cell."""
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    LEFT_CENTER = "left_center"
    CENTER = "center"
    RIGHT_CENTER = "right_center"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


class _BaseLayoutConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator(
        "layer_spacing", "node_spacing", "tree_spacing",
        "horizontal_spacing", "vertical_spacing",
        check_fields=False
    )
    @classmethod
    def spacing_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("spacing must be >= 0")
        return value


class TreeLayoutConfig(_BaseLayoutConfig):
    """Hierarchical placement for forests (org charts)."""
    kind: Literal["tree"] = "tree"
    angle: float = 90  # 90=down, 270=up, 0=right, 180=left
    layer_spacing: float = 50
    node_spacing: float = 30
    tree_spacing: float = 90  # Gap between separate root trees
    alignment: TreeAlignment = TreeAlignment.CENTER_CHILDREN
    sort_children: bool = False
    child_comparator: Optional[NodeComparator] = Field(default=None, exclude=True)


class LayeredDigraphLayoutConfig(_BaseLayoutConfig):
    """Sugiyama-style rank placement for flowcharts."""
    kind: Literal["layered"] = "layered"
    direction: LayoutDirection = LayoutDirection.DOWN
    layer_spacing: float = 80
    node_spacing: float = 40
    crossing_reduction_iterations: int = Field(default=10, ge=0)


class ForceDirectedLayoutConfig(_BaseLayoutConfig):
    """Spring-electrical simulation for general graphs."""
    kind: Literal["force"] = "force"
    iterations: int = Field(default=100, ge=0)
    spring_constant: float = 0.5
    spring_length: float = Field(default=100, ge=0)
    repulsion_constant: float = 5000
    cooling_factor: float = 0.95
    initial_temperature: float = Field(default=100, ge=0)
    randomize_initial_positions: bool = True
    spread: float = Field(default=500, ge=0)  # Side of the random start square
    seed: Optional[int] = None  # None = nondeterministic start
    min_distance: float = Field(default=0.01, gt=0)

    @field_validator("cooling_factor")
    @classmethod
    def cooling_in_range(cls, value: float) -> float:
        if not 0 < value <= 1:
            raise ValueError("cooling_factor must be in (0, 1]")
        return value


class CircularLayoutConfig(_BaseLayoutConfig):
    """Even placement around a circle."""
    kind: Literal["circular"] = "circular"
    radius: float = Field(default=200, ge=0)
    auto_radius: bool = True
    node_spacing: float = 50
    min_radius: float = Field(default=100, ge=0)
    start_angle: float = 0  # Degrees; 0 = right, 90 = down
    sort_nodes: bool = False
    node_comparator: Optional[NodeComparator] = Field(default=None, exclude=True)


class GridLayoutConfig(_BaseLayoutConfig):
    """Uniform row/column grid."""
    kind: Literal["grid"] = "grid"
    columns: int = Field(default=0, ge=0)  # 0 = auto
    rows: int = Field(default=0, ge=0)     # 0 = auto
    horizontal_spacing: float = 50
    vertical_spacing: float = 50
    alignment: GridAlignment = GridAlignment.CENTER
    sort_nodes: bool = False
    node_comparator: Optional[NodeComparator] = Field(default=None, exclude=True)


LayoutConfig = Annotated[
    Union[
        TreeLayoutConfig,
        LayeredDigraphLayoutConfig,
        ForceDirectedLayoutConfig,
        CircularLayoutConfig,
        GridLayoutConfig,
    ],
    Field(discriminator="kind"),
]

_layout_config_adapter: TypeAdapter = TypeAdapter(LayoutConfig)


def parse_layout_config(data: dict) -> LayoutConfig:
    """
    Build a layout config from a plain mapping, selected by its "kind" key.

    Raises:
        pydantic.ValidationError: unknown kind or invalid field values
    """
    return _layout_config_adapter.validate_python(data)
