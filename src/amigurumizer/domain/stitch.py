"""Stitch actions used in row instructions."""

from enum import Enum


class StitchAction(Enum):
    """One action worked into the previous row.

    - SINGLE_CROCHET: one stitch into one stitch
    - INCREASE: two stitches into one stitch
    - DECREASE: one stitch over two stitches (sc2tog)
    - INVISIBLE_DECREASE: one stitch over two front loops
    """

    SINGLE_CROCHET = "sc"
    INCREASE = "inc"
    DECREASE = "dec"
    INVISIBLE_DECREASE = "invdec"

    @property
    def abbreviation(self) -> str:
        """Pattern abbreviation, e.g. "sc"."""
        return self.value

    @property
    def consumes(self) -> int:
        """Previous-row stitches used by this action."""
        match self:
            case StitchAction.SINGLE_CROCHET | StitchAction.INCREASE:
                return 1
            case StitchAction.DECREASE | StitchAction.INVISIBLE_DECREASE:
                return 2

    @property
    def emits(self) -> int:
        """New-row stitches produced by this action."""
        match self:
            case StitchAction.INCREASE:
                return 2
            case (
                StitchAction.SINGLE_CROCHET
                | StitchAction.DECREASE
                | StitchAction.INVISIBLE_DECREASE
            ):
                return 1

    @property
    def is_decrease(self) -> bool:
        """Whether this action is either decrease style."""
        return self in (StitchAction.DECREASE, StitchAction.INVISIBLE_DECREASE)

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "StitchAction":
        """Look up an action by its abbreviation (case-insensitive).

        Args:
            abbreviation: Abbreviation such as "sc" or "INVDEC"

        Returns:
            Matching StitchAction

        Raises:
            ValueError: If the abbreviation is unknown
        """
        return cls(abbreviation.strip().lower())


STITCH_KEY: dict[str, str] = {
    "MR": "magic ring",
    "sc": "single crochet",
    "inc": "increase (2 sc in same stitch)",
    "dec": "decrease (sc2tog)",
    "invdec": "invisible decrease (sc2tog through front loops only)",
    "rep": "repeat",
}
