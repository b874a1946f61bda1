"""
EvoForage Configuration
All tunable parameters for the food-seeking evolution simulation.

The module constants are the defaults; the simulation itself only ever
reads a `SimulationConfig`, so tests and drivers can vary any of them.
"""

import math

from exceptions import ConfigError

# ─── World ────────────────────────────────────────────────────────────────────
NUM_ANIMALS = 40     # animals per generation
NUM_FOODS   = 60     # food items on the torus

# ─── Generation ───────────────────────────────────────────────────────────────
GENERATION_LENGTH = 2500   # steps before the population is evolved

# ─── Motion ───────────────────────────────────────────────────────────────────
SPEED_MIN      = 0.001          # keeps animals moving
SPEED_MAX      = 0.005          # upper bound on speed
SPEED_ACCEL    = 0.2            # max speed change the brain can ask for per step
ROTATION_ACCEL = math.pi / 2    # max rotation change per step (radians)
INITIAL_SPEED  = 0.002          # speed of freshly spawned animals

# ─── Eating ───────────────────────────────────────────────────────────────────
EAT_RADIUS = 0.013   # animal-food distance at which the food is eaten

# ─── Eye ──────────────────────────────────────────────────────────────────────
FOV_RANGE = 0.25                      # how far an animal can see
FOV_ANGLE = math.pi + math.pi / 4     # total width of the field of view
EYE_CELLS = 9                         # photoreceptors = brain inputs

# ─── Evolution ────────────────────────────────────────────────────────────────
MUTATION_CHANCE = 0.01   # probability a single gene is perturbed
MUTATION_COEFF  = 0.3    # max magnitude of a perturbation


class SimulationConfig:
    """
    Explicit settings handed to the simulation at construction.
    Every field defaults to the module constant of the same (lowercased) name.
    """

    __slots__ = (
        "num_animals", "num_foods", "generation_length",
        "speed_min", "speed_max", "speed_accel", "rotation_accel",
        "initial_speed", "eat_radius",
        "fov_range", "fov_angle", "eye_cells",
        "mutation_chance", "mutation_coeff",
    )

    def __init__(
        self,
        num_animals:       int   = NUM_ANIMALS,
        num_foods:         int   = NUM_FOODS,
        generation_length: int   = GENERATION_LENGTH,
        speed_min:         float = SPEED_MIN,
        speed_max:         float = SPEED_MAX,
        speed_accel:       float = SPEED_ACCEL,
        rotation_accel:    float = ROTATION_ACCEL,
        initial_speed:     float = INITIAL_SPEED,
        eat_radius:        float = EAT_RADIUS,
        fov_range:         float = FOV_RANGE,
        fov_angle:         float = FOV_ANGLE,
        eye_cells:         int   = EYE_CELLS,
        mutation_chance:   float = MUTATION_CHANCE,
        mutation_coeff:    float = MUTATION_COEFF,
    ):
        self.num_animals       = num_animals
        self.num_foods         = num_foods
        self.generation_length = generation_length
        self.speed_min         = speed_min
        self.speed_max         = speed_max
        self.speed_accel       = speed_accel
        self.rotation_accel    = rotation_accel
        self.initial_speed     = initial_speed
        self.eat_radius        = eat_radius
        self.fov_range         = fov_range
        self.fov_angle         = fov_angle
        self.eye_cells         = eye_cells
        self.mutation_chance   = mutation_chance
        self.mutation_coeff    = mutation_coeff
        self._validate()

    # ──────────────────────────────────────────────────────────────────────────

    def _validate(self):
        if self.num_animals < 1:
            raise ConfigError(f"num_animals must be >= 1, got {self.num_animals}")
        for name in ("num_foods", "generation_length"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.speed_min > self.speed_max:
            raise ConfigError(
                f"speed_min ({self.speed_min}) exceeds speed_max ({self.speed_max})")
        if not self.speed_min <= self.initial_speed <= self.speed_max:
            raise ConfigError(
                f"initial_speed ({self.initial_speed}) outside "
                f"[{self.speed_min}, {self.speed_max}]")
        if self.speed_accel < 0 or self.rotation_accel < 0:
            raise ConfigError("acceleration bounds must be >= 0")
        if self.eat_radius < 0:
            raise ConfigError(f"eat_radius must be >= 0, got {self.eat_radius}")
        if self.fov_range <= 0:
            raise ConfigError(f"fov_range must be > 0, got {self.fov_range}")
        if not 0 < self.fov_angle <= 2 * math.pi:
            raise ConfigError(f"fov_angle must be in (0, 2pi], got {self.fov_angle}")
        if self.eye_cells < 1:
            raise ConfigError(f"eye_cells must be >= 1, got {self.eye_cells}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ConfigError(
                f"mutation_chance must be in [0, 1], got {self.mutation_chance}")
        if self.mutation_coeff < 0:
            raise ConfigError(f"mutation_coeff must be >= 0, got {self.mutation_coeff}")

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"SimulationConfig({fields})"
