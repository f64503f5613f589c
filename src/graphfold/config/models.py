"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphfold.toml only contains
overrides. An empty (or absent) config file is valid.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- graphfold.toml sections ---


class RenderConfig(BaseModel):
    """[render] section - SVG grid geometry and labels."""

    model_config = {"frozen": True}

    cell_width: int = Field(default=100, gt=0)
    cell_height: int = Field(default=100, gt=0)
    node_radius: int = Field(default=20, gt=0)
    link_padding: int = Field(default=20, ge=0)
    # Circles are drawn only when the sampled labels are all shorter than this.
    short_label_max: int = 3
    short_label_sample: int = 5
    node_label: str | None = None


class ReduceConfig(BaseModel):
    """[reduce] section - defaults for the built-in CLI reducers."""

    model_config = {"frozen": True}

    node_op: str = "count"
    edge_op: str = "pass"
    edge_weight_attr: str = "count"


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    default_format: Literal["svg", "dot", "json"] = "svg"


class GraphfoldConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    render: RenderConfig = Field(default_factory=RenderConfig)
    reduce: ReduceConfig = Field(default_factory=ReduceConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
