"""Row transition planning.

The planner turns a change of stitch count between two rows into the
sequence of actions worked into the previous row. Increases and decreases
are spread evenly around the round so that they never cluster.
"""

from amigurumizer.config import DecreaseStyle
from amigurumizer.domain import StitchAction
from amigurumizer.exceptions import DegenerateRowError, OverDecreaseError, OverIncreaseError


def spread_positions(count: int, slots: int) -> list[int]:
    """Spread `count` marks evenly over `slots` positions.

    Uses position[k] = floor(k * slots / count), which yields strictly
    increasing, distinct positions whenever count <= slots.

    Args:
        count: Number of positions to choose
        slots: Number of available positions

    Returns:
        Sorted list of chosen positions
    """
    if count <= 0:
        return []
    return [(k * slots) // count for k in range(count)]


def shifted_positions(count: int, slots: int, offset: int) -> list[int]:
    """Spread positions as spread_positions() does, rotated by `offset`."""
    if slots <= 0:
        return []
    return sorted((position + offset) % slots for position in spread_positions(count, slots))


def decrease_action(style: DecreaseStyle) -> StitchAction:
    """Map a decrease style to its stitch action."""
    match style:
        case DecreaseStyle.INVISIBLE:
            return StitchAction.INVISIBLE_DECREASE
        case DecreaseStyle.STANDARD:
            return StitchAction.DECREASE


class RowTransitionPlanner:
    """Plans the stitch actions that take one row's count to the next.

    The returned actions consume exactly the previous row's stitches and emit
    exactly the target count.

    Example:
        planner = RowTransitionPlanner()
        actions = planner.plan(12, 18)  # [inc, sc] x 6
        shifted = planner.plan(12, 18, offset=1)  # [sc, inc] x 6
    """

    def __init__(self, decrease_style: DecreaseStyle = DecreaseStyle.INVISIBLE) -> None:
        """Initialize the planner.

        Args:
            decrease_style: Decrease style used on decrease rows
        """
        self.decrease_style = decrease_style
        self._decrease = decrease_action(decrease_style)

    def half_spacing(self, previous: int, target: int) -> int:
        """Half the gap between shaping stitches of a transition.

        Passing this as the `offset` of plan() places the increases or
        decreases midway between those of an unshifted row.

        Args:
            previous: Stitch count of the previous row
            target: Stitch count of the new row

        Returns:
            Offset in stitches for increases or in pair slots for decreases
        """
        delta = target - previous
        if delta == 0:
            return 0
        slots = previous if delta > 0 else previous // 2
        return slots // (2 * abs(delta))

    def plan(self, previous: int, target: int, offset: int = 0) -> list[StitchAction]:
        """Plan the transition from `previous` stitches to `target` stitches.

        Args:
            previous: Stitch count of the previous row
            target: Stitch count of the new row
            offset: Shift of the shaping positions around the round

        Returns:
            Ordered stitch actions worked into the previous row

        Raises:
            DegenerateRowError: If either count is below one
            OverIncreaseError: If more than one increase per stitch is needed
            OverDecreaseError: If the decreases need more than `previous` stitches
        """
        if previous < 1:
            raise DegenerateRowError(previous, "previous row has no stitches")
        if target < 1:
            raise DegenerateRowError(target)

        delta = target - previous
        if delta == 0:
            return [StitchAction.SINGLE_CROCHET] * previous
        if delta > 0:
            return self._plan_increases(previous, target, delta, offset)
        return self._plan_decreases(previous, target, -delta, offset)

    def _plan_increases(
        self, previous: int, target: int, increases: int, offset: int
    ) -> list[StitchAction]:
        if increases > previous:
            raise OverIncreaseError(previous, target)

        actions = [StitchAction.SINGLE_CROCHET] * previous
        for index in shifted_positions(increases, previous, offset):
            actions[index] = StitchAction.INCREASE
        return actions

    def _plan_decreases(
        self, previous: int, target: int, decreases: int, offset: int
    ) -> list[StitchAction]:
        if 2 * decreases > previous:
            raise OverDecreaseError(previous, target)

        # Pair slot s covers previous stitches 2s and 2s + 1
        pair_slots = previous // 2
        chosen = set(shifted_positions(decreases, pair_slots, offset))

        actions: list[StitchAction] = []
        for slot in range(pair_slots):
            if slot in chosen:
                actions.append(self._decrease)
            else:
                actions.extend([StitchAction.SINGLE_CROCHET] * 2)
        if previous % 2:
            actions.append(StitchAction.SINGLE_CROCHET)
        return actions
