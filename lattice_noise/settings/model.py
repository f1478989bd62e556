from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class NoiseSettings:
    id: str
    seed: int
    precision: str
    normalized: bool
    fbm: Dict[str, Any]

    # merged source dict, kept for tooling
    raw: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "seed": self.seed,
            "precision": self.precision,
            "normalized": bool(self.normalized),
            "fbm": dict(self.fbm),
        }
