"""Cave configuration — loads generator options from config/cave.yaml.

Provides a single ``CaveConfig`` dataclass that the cellular automaton
generator consumes. Command line flags are layered on top of the file
with ``dataclasses.replace``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from numbers import Real
from pathlib import Path
from typing import Any, Optional

import yaml

from rhombus.models.hex import NUM_DIRECTIONS, HexCoord
from rhombus.models.region import CubicRangeRegion, HexDiskRegion, HexRectRegion, HexRegion
from rhombus.util.errors import InvalidArgument

log = logging.getLogger(__name__)

DEFAULT_CAVE_CONFIG_PATH = "config/cave.yaml"

SHAPES = ("disk", "rect", "cubic")


def _check_int(name: str, value: Any, minimum: Optional[int] = None,
               maximum: Optional[int] = None) -> None:
    # bool is an int subclass; YAML turns yes/no into one
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidArgument(f"{name} must be <= {maximum}, got {value}")


def _check_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidArgument(f"{name} must be true or false, got {value!r}")


def _check_range(name: str, value: Any) -> None:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidArgument(f"{name} must be a [min, max] pair, got {value!r}")
    for bound in value:
        _check_int(name, bound)


@dataclass
class CaveConfig:
    """All tunable cave generation options.

    Every field has a default so a generator can run without a file.
    ``threshold`` is used for both the birth and the survival rule unless
    ``birth_threshold`` or ``survival_threshold`` override it.
    ``cell_radius`` above 0 adds a coarse pass over big cells (hex disks
    of that radius) before the per-cell iterations.
    """

    # -- Region ------------------------------------------------------
    shape: str = "disk"
    radius: int = 12
    width: int = 40
    height: int = 20
    range_q: tuple[int, int] = (-12, 12)
    range_r: tuple[int, int] = (-8, 8)
    range_s: tuple[int, int] = (-12, 12)

    # -- Seeding -----------------------------------------------------
    wall_probability: float = 0.45
    seed: Optional[int] = None

    # -- Rule --------------------------------------------------------
    threshold: int = 4
    birth_threshold: Optional[int] = None
    survival_threshold: Optional[int] = None
    iterations: int = 5
    boundary_is_wall: bool = True
    hard_border: bool = False
    stop_when_stable: bool = False

    # -- Coarse pass -------------------------------------------------
    cell_radius: int = 0
    coarse_iterations: int = 3

    @property
    def birth(self) -> int:
        return self.threshold if self.birth_threshold is None else self.birth_threshold

    @property
    def survival(self) -> int:
        return self.threshold if self.survival_threshold is None else self.survival_threshold

    def validate(self) -> None:
        """Check every option, raising InvalidArgument on the first bad one.

        Types are checked as well as ranges: values read from YAML may be
        strings or floats where an integer is expected.
        """
        if self.shape not in SHAPES:
            raise InvalidArgument(f"Unknown shape {self.shape!r}, expected one of {SHAPES}")
        if self.shape == "disk":
            _check_int("radius", self.radius, minimum=0)
        elif self.shape == "rect":
            _check_int("width", self.width, minimum=1)
            _check_int("height", self.height, minimum=1)
        else:
            for name, value in (
                ("range_q", self.range_q),
                ("range_r", self.range_r),
                ("range_s", self.range_s),
            ):
                _check_range(name, value)
            self.region()

        p = self.wall_probability
        if isinstance(p, bool) or not isinstance(p, Real):
            raise InvalidArgument(f"wall_probability must be a number, got {p!r}")
        if not 0.0 <= p <= 1.0:
            raise InvalidArgument(f"wall_probability must be in [0, 1], got {p}")
        if self.seed is not None:
            _check_int("seed", self.seed)

        _check_int("threshold", self.threshold, 0, NUM_DIRECTIONS)
        for name, value in (
            ("birth_threshold", self.birth_threshold),
            ("survival_threshold", self.survival_threshold),
        ):
            if value is not None:
                _check_int(name, value, 0, NUM_DIRECTIONS)
        _check_int("iterations", self.iterations, minimum=1)
        for name in ("boundary_is_wall", "hard_border", "stop_when_stable"):
            _check_bool(name, getattr(self, name))

        _check_int("cell_radius", self.cell_radius, minimum=0)
        _check_int("coarse_iterations", self.coarse_iterations, minimum=1)

    def region(self) -> HexRegion:
        """Build the region descriptor selected by ``shape``."""
        if self.shape == "rect":
            return HexRectRegion(self.width, self.height)
        if self.shape == "cubic":
            return CubicRangeRegion(
                tuple(self.range_q), tuple(self.range_r), tuple(self.range_s)
            )
        return HexDiskRegion(self.radius, HexCoord(0, 0))


def load_cave_config(path: str | Path = DEFAULT_CAVE_CONFIG_PATH) -> CaveConfig:
    """Load cave configuration from a YAML file.

    Missing keys fall back to dataclass defaults. If the file does not
    exist, a warning is logged and pure defaults are returned. Unknown keys
    are logged and ignored.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Cave config not found at %s — using defaults", p)
        return CaveConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise InvalidArgument(f"Cave config at {p} must be a mapping, got {type(raw).__name__}")

    log.info("Loaded cave config from %s (%d keys)", p, len(raw))

    known = {f.name for f in fields(CaveConfig)}
    unknown = sorted(k for k in raw if k not in known)
    if unknown:
        log.warning("Ignoring unknown cave config keys: %s", ", ".join(unknown))

    return CaveConfig(**{k: v for k, v in raw.items() if k in known})
