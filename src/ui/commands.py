"""QUndoCommand subclasses for share distribution edits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QUndoCommand
from src.utils.i18n import tr

if TYPE_CHECKING:
    from src.models.distribution import DistributionState, ShareMap


class ChangeSharesCommand(QUndoCommand):
    """Replace the whole share map with the result of one drag gesture.

    The gesture is already applied when the command is pushed; the first
    ``redo()`` writes the same shares again.
    """

    def __init__(self, state: DistributionState, old_shares: ShareMap, new_shares: ShareMap):
        super().__init__(tr("Change distribution"))
        self._state = state
        self._old = dict(old_shares)
        self._new = dict(new_shares)

    def redo(self) -> None:
        self._state.shares = dict(self._new)

    def undo(self) -> None:
        self._state.shares = dict(self._old)


class EqualizeSharesCommand(QUndoCommand):
    """Give every item the same share."""

    def __init__(self, state: DistributionState):
        super().__init__(tr("Distribute evenly"))
        self._state = state
        self._old = dict(state.shares)

    def redo(self) -> None:
        self._state.equalize()

    def undo(self) -> None:
        self._state.shares = dict(self._old)
