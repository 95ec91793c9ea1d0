"""
Ship Specification Module
=========================

Static hull, keel, rudder and rig dimensions, plus the geometric and
buoyancy checks a design must pass before it may sail.

Coordinates along the hull axis are measured from the hull centre,
positive towards the bow.
"""

from dataclasses import dataclass, field
from typing import Tuple
import logging

logger = logging.getLogger(__name__)


DENSITY_AIR = 1.225      # kg/m³
DENSITY_WATER = 1027.0   # kg/m³ sea water
DENSITY_WOOD = 750.0     # kg/m³ solid white oak
DENSITY_SAIL = 0.237     # kg/m² canvas (7 oz/yd²)

# Masts need roughly 1 cm of thickness per m² of sail
MAST_THICKNESS_PER_SAIL_AREA = 0.01


class InvalidShipSpecification(ValueError):
    """Raised when a ship is built from a specification that fails validation."""


@dataclass(frozen=True)
class SailSpec:
    """Triangular sail hung from a mast, boom extending aft."""
    mast_offset: float    # m from hull centre, bow positive
    width: float          # m, boom length (foot of the sail)
    height: float         # m, luff length

    @property
    def area(self) -> float:
        return self.width * self.height * 0.5


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ShipSpecification.validate()."""
    ok: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class ShipSpecification:
    """
    Immutable ship design.

    Defaults describe a 10 m wooden hull with a single 7 x 10 m sail.
    """
    # Hull
    hull_width: float = 3.0          # m
    hull_length: float = 10.0        # m
    hull_depth: float = 0.33         # m below waterline
    hull_thickness: float = 0.05     # m shell thickness

    # Keel
    keel_start_offset: float = 1.0   # m, forward end of the keel
    keel_length: float = 2.0         # m
    keel_height: float = 2.0         # m

    # Rudder (hung at the stern)
    rudder_length: float = 1.0       # m
    rudder_height: float = 1.0       # m

    # Rig, ordered bow to stern
    sails: Tuple[SailSpec, ...] = field(
        default_factory=lambda: (SailSpec(mast_offset=4.0, width=7.0, height=10.0),)
    )

    def __post_init__(self):
        object.__setattr__(self, 'sails', tuple(self.sails))

    @classmethod
    def default(cls) -> 'ShipSpecification':
        return cls()

    def validate(self) -> ValidationResult:
        """
        Check the design, stopping at the first violated constraint.

        Checked in order: positive dimensions, keel within the hull,
        sails ordered bow to stern without overlap, buoyancy.
        """
        dimensions = (
            self.hull_width, self.hull_length, self.hull_depth, self.hull_thickness,
            self.keel_length, self.keel_height,
            self.rudder_length, self.rudder_height,
        )
        if not all(d > 0.0 for d in dimensions) or not all(
                s.width > 0.0 and s.height > 0.0 for s in self.sails):
            return ValidationResult(False, "Ship dimensions must all be greater than zero")

        half_hull_length = self.hull_length / 2.0
        if (self.keel_start_offset > half_hull_length
                or self.keel_start_offset - self.keel_length < -half_hull_length):
            return ValidationResult(False, "Keel is outside the hull footprint")

        sail_start_limit = half_hull_length
        for index, sail in enumerate(self.sails):
            sail_start = sail.mast_offset
            sail_end = sail.mast_offset - sail.width
            if sail_start >= sail_start_limit:
                return ValidationResult(
                    False, f"Sail {index} is too far forward or sails are not in order")
            if index + 1 < len(self.sails):
                sail_end_limit = self.sails[index + 1].mast_offset
            else:
                sail_end_limit = -half_hull_length
            if sail_end <= sail_end_limit:
                return ValidationResult(
                    False, f"Sail {index} extends too far aft or sails are not in order")
            sail_start_limit = sail_end

        if self.calculate_deadweight_tonnage() < 0.0:
            return ValidationResult(False, "Ship is not buoyant")

        return ValidationResult(True)

    def require_valid(self) -> 'ShipSpecification':
        """
        Return self if the design is valid.

        Raises:
            InvalidShipSpecification: naming the first violated constraint
        """
        result = self.validate()
        if not result:
            logger.warning(f"Rejected ship specification: {result.reason}")
            raise InvalidShipSpecification(result.reason)
        return self

    def calculate_mass(self) -> float:
        """Total mass (kg) of the hull shell, sails and masts."""
        mass_hull = DENSITY_WOOD * self.hull_thickness * (
            self.hull_length * self.hull_width            # Bottom
            + 2.0 * self.hull_width * self.hull_depth     # Two ends
            + 2.0 * self.hull_length * self.hull_depth    # Two sides
        )
        mass_sails = 0.0
        for sail in self.sails:
            canvas = DENSITY_SAIL * sail.area
            mast_thickness = MAST_THICKNESS_PER_SAIL_AREA * sail.width * sail.height
            mast = DENSITY_WOOD * sail.height * mast_thickness * mast_thickness
            mass_sails += canvas + mast
        return mass_hull + mass_sails

    @property
    def inverse_mass(self) -> float:
        return 1.0 / self.calculate_mass()

    def displaced_water_mass(self) -> float:
        """Mass (kg) of water displaced by the fully submerged hull."""
        return DENSITY_WATER * self.hull_depth * self.hull_length * self.hull_width

    def calculate_deadweight_tonnage(self) -> float:
        """Load (kg) the ship can carry before sinking; negative if it cannot float."""
        return self.displaced_water_mass() - self.calculate_mass()
