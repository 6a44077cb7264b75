"""ExportQuery input value and its validation."""

import enum
from dataclasses import dataclass

from app.errors import InvalidQuery


class Experience(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


@dataclass(frozen=True)
class ExportQuery:
    product: str
    country: str
    experience: Experience

    @property
    def is_beginner(self) -> bool:
        return self.experience == Experience.BEGINNER


def build_query(
    product: str | None,
    country: str | None,
    experience: str | None,
) -> ExportQuery:
    """Validate raw inputs into an ExportQuery.

    Blank or whitespace-only values count as missing. Experience is matched
    case-insensitively.

    Raises:
        InvalidQuery: naming every missing field, or an unrecognised experience.
    """
    raw = {"product": product, "country": country, "experience": experience}
    missing = [name for name, value in raw.items() if not str(value or "").strip()]
    if missing:
        raise InvalidQuery(
            f"Missing required field(s): {', '.join(missing)}",
            missing_fields=missing,
        )

    try:
        level = Experience(str(experience).strip().lower())
    except ValueError:
        allowed = ", ".join(e.value for e in Experience)
        raise InvalidQuery(f"experience must be one of: {allowed}")

    return ExportQuery(product=str(product).strip(), country=str(country).strip(), experience=level)
