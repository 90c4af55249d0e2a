# base_params.py

from dataclasses import dataclass

@dataclass
class CaneDefaults:
    outer_radius: float = 15.0
    inner_radius: float = 7.5
    color_height: float = 18.0
    straight_part_length: float = 210.0
    curve_radius: float = 60.0

    def as_row(self) -> dict:
        return {
            "outer_radius": self.outer_radius,
            "inner_radius": self.inner_radius,
            "color_height": self.color_height,
            "straight_part_length": self.straight_part_length,
            "curve_radius": self.curve_radius,
        }
