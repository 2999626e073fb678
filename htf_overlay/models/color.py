"""
Color Model
RGBA-Farben für Drawables und Farb-Parameter
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Color:
    """
    RGBA-Farbe mit Kanälen 0-255

    Attributes:
        r: Rot
        g: Grün
        b: Blau
        a: Alpha (255 = deckend)
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel, value in (('r', self.r), ('g', self.g), ('b', self.b), ('a', self.a)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Ungültiger Farbkanal {channel}={value!r} (erwartet 0-255)")

    @classmethod
    def pine(cls, r: int, g: int, b: int, transparency: int) -> 'Color':
        """
        Erstellt Farbe mit Pine-Script Transparenz (0 = deckend, 100 = unsichtbar)

        Example:
            >>> Color.pine(38, 166, 153, 58).a
            107
        """
        alpha = int(255 * (100 - transparency) / 100.0)
        return cls(r, g, b, max(0, min(255, alpha)))

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Parst '#rrggbb' oder '#rrggbbaa'

        Raises:
            ValueError: Bei ungültigem Hex-String
        """
        text = value.strip().lstrip('#')
        if len(text) not in (6, 8):
            raise ValueError(f"Ungültiger Hex-Farbwert: {value!r}")
        try:
            channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError as e:
            raise ValueError(f"Ungültiger Hex-Farbwert: {value!r}") from e
        return cls(*channels)

    @classmethod
    def coerce(cls, value: Any) -> Optional['Color']:
        """
        Interpretiert Host-Farbwert tolerant

        Akzeptiert Color, Hex-String, (r, g, b[, a]) Tuple/Liste oder Dict.

        Returns:
            Color oder None wenn nicht interpretierbar
        """
        if isinstance(value, Color):
            return value
        try:
            if isinstance(value, str):
                return cls.from_hex(value)
            if isinstance(value, (tuple, list)) and len(value) in (3, 4):
                return cls(*value)
            if isinstance(value, dict):
                return cls(value['r'], value['g'], value['b'], value.get('a', 255))
        except (ValueError, KeyError, TypeError):
            return None
        return None

    def to_hex(self) -> str:
        """'#rrggbbaa' (Alpha nur wenn nicht deckend)"""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return base if self.a == 255 else f"{base}{self.a:02x}"

    def to_rgba(self) -> str:
        """CSS rgba() mit Alpha 0-1"""
        return f"rgba({self.r}, {self.g}, {self.b}, {round(self.a / 255, 3)})"

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}


GRAY = Color(128, 128, 128)
