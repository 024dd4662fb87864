"""Rule-mode configuration for a game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable rule switches consulted by the generator and controller.

    Args:
        validate_in_check: Run the own-king safety scan even when the game
            is already in ``CHECK``. When ``False`` a side in check may make
            any geometrically valid move.
        pawn_push_requires_empty: Forward pawn steps need empty target
            squares (and an empty intermediate square for the double step).
            When ``False`` a pawn may capture straight ahead.
        discovered_checks: Report ``CHECK`` whenever any piece of the mover
            attacks the opposing king, not only the piece that moved.
    """

    validate_in_check: bool = False
    pawn_push_requires_empty: bool = True
    discovered_checks: bool = False

    # Presets
    @classmethod
    def standard(cls) -> RuleSet:
        """Default rules: empty-square pawn pushes, in-check scan skipped."""
        return cls()

    @classmethod
    def legacy(cls) -> RuleSet:
        """Reference behaviour, including pawns capturing straight ahead."""
        return cls(pawn_push_requires_empty=False)

    @classmethod
    def strict(cls) -> RuleSet:
        """Always validate king safety and report discovered checks."""
        return cls(validate_in_check=True, discovered_checks=True)

    @classmethod
    def by_name(cls, name: str) -> RuleSet:
        presets = {"standard": cls.standard, "legacy": cls.legacy, "strict": cls.strict}
        try:
            return presets[name]()
        except KeyError:
            raise ValueError(f"Unknown rule set: {name!r}") from None
