"""Query parameter helpers shared by the routers."""

from __future__ import annotations

from restcraft.exceptions import ValidationError

EMBEDDABLE_RELATIONS = frozenset({"media"})


def _relations(raw: str | None, parameter: str) -> set[str]:
    """Split a comma-separated relation list and reject unknown names."""
    if not raw:
        return set()
    names = {name.strip() for name in raw.split(",") if name.strip()}
    unknown = sorted(names - EMBEDDABLE_RELATIONS)
    if unknown:
        raise ValidationError(
            message=(
                f"Unknown relation(s) {', '.join(unknown)}; "
                f"allowed: {', '.join(sorted(EMBEDDABLE_RELATIONS))}"
            ),
            parameter=parameter,
        )
    return names


def resolve_include_media(include: str | None, exclude: str | None) -> bool:
    """Decide whether media is embedded in post views.

    Media is included unless ``exclude`` names it. Naming it in both
    parameters is contradictory and rejected.

    Raises:
        ValidationError: On unknown relation names or a contradiction.
    """
    included = _relations(include, "include")
    excluded = _relations(exclude, "exclude")
    if "media" in included and "media" in excluded:
        raise ValidationError(
            message="'media' cannot be both included and excluded",
            parameter="include",
        )
    return "media" not in excluded
