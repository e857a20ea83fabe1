"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric constants of the
helix model, the projection and the interaction loop.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (rise, twist, focal length, zoom
   limits...) scattered throughout the code.
2. Overrides: The Qt application layer reads user overrides from QSettings
   and builds new instances of these dataclasses with `dataclasses.replace`.

Exports:
    DEFAULT_GEOMETRY (HelixGeometry): Layout of the synthetic double helix.
    DEFAULT_PROJECTION (ProjectionSettings): Camera and depth cueing.
    DEFAULT_INTERACTION (InteractionSettings): Drag, auto-rotate and zoom.
    DEFAULT_GENERATION (GenerationSettings): Window size and staged loading.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HelixGeometry:
    """Lengths are in helix-local units, angles in degrees."""
    rise: float = 4.0
    twist_deg: float = 34.0
    strand_phase_deg: float = 180.0

    backbone_radius: float = 12.0
    sugar_radius: float = 10.0
    sugar_tangential_offset: float = 1.0
    sugar_phase_deg: float = 5.0

    # Radius of the ring atom that attaches to the sugar
    base_anchor_radius: float = 7.0
    base_scale: float = 1.5

    hbond_cutoff: float = 5.0


@dataclass(frozen=True)
class ProjectionSettings:
    focal_length: float = 400.0
    base_scale: float = 6.0

    # Depth fog: opacity = 1 - (depth + fog_offset) / fog_range
    fog_offset: float = 50.0
    fog_range: float = 200.0
    min_opacity: float = 0.2
    bond_opacity: float = 0.6

    charge_halo_threshold: float = 0.3
    charge_halo_scale: float = 1.2
    charge_halo_opacity: float = 0.1

    glow_min_scale: float = 1.5
    glow_max_scale: float = 2.2
    glow_min_opacity: float = 0.1
    glow_max_opacity: float = 0.3
    glow_period_s: float = 3.0


@dataclass(frozen=True)
class InteractionSettings:
    drag_sensitivity: float = 0.5
    autorotate_step_deg: float = 0.2
    autorotate_interval_ms: int = 30

    zoom_min: float = 0.5
    zoom_max: float = 5.0
    zoom_initial: float = 1.0
    zoom_button_step: float = 0.2
    # Zoom change per wheel notch (120 units of QWheelEvent.angleDelta)
    zoom_wheel_step: float = 0.12
    # Touchpads report pixelDelta only; this many pixels count as one notch
    zoom_wheel_pixels_per_notch: float = 120.0

    def __post_init__(self) -> None:
        if self.zoom_min <= 0.0 or self.zoom_min > self.zoom_max:
            raise ValueError(
                f"Invalid zoom range [{self.zoom_min}, {self.zoom_max}]."
            )
        if self.zoom_wheel_pixels_per_notch <= 0.0:
            raise ValueError(
                f"zoom_wheel_pixels_per_notch must be positive, got {self.zoom_wheel_pixels_per_notch}."
            )


@dataclass(frozen=True)
class GenerationSettings:
    window_steps: int = 18
    # BRCA1 region, shown when no variant is selected
    default_position: int = 43_000_000
    stage_delay_ms: int = 800
    blank_while_pending: bool = True


DEFAULT_GEOMETRY = HelixGeometry()
DEFAULT_PROJECTION = ProjectionSettings()
DEFAULT_INTERACTION = InteractionSettings()
DEFAULT_GENERATION = GenerationSettings()
