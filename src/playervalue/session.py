"""Committed/draft editing workflow around a :class:`ConfigStore`."""

from __future__ import annotations

import logging
from typing import Optional, Union

from playervalue.catalog import AttributeCode, Position
from playervalue.models import Player, WeightConfiguration
from playervalue.persistence import ConfigStore, reset_to_default, update_weight
from playervalue.valuation import compute_market_value


logger = logging.getLogger(__name__)


class ValuationSession:
    """Holds the committed configuration and, while editing, a draft.

    ``edit`` opens a draft from the committed value, ``save`` persists the
    draft and commits it, ``discard`` drops it. A failed save leaves the draft
    open so the edits are not lost.
    """

    def __init__(self, store: ConfigStore):
        self.store = store
        self.committed: WeightConfiguration = store.load()
        self.draft: Optional[WeightConfiguration] = None

    @property
    def editing(self) -> bool:
        return self.draft is not None

    def edit(self) -> WeightConfiguration:
        if self.draft is None:
            self.draft = self.committed
        return self.draft

    def set_weight(
        self,
        position: Union[Position, str],
        attribute: Union[AttributeCode, str],
        value: float,
    ) -> WeightConfiguration:
        self.draft = update_weight(self.edit(), position, attribute, value)
        return self.draft

    def replace_draft(self, config: WeightConfiguration) -> WeightConfiguration:
        self.edit()
        self.draft = config
        return config

    def reset_draft(self) -> WeightConfiguration:
        """Replace the draft with the defaults; nothing is saved until :meth:`save`."""

        return self.replace_draft(reset_to_default())

    def save(self) -> WeightConfiguration:
        if self.draft is None:
            return self.committed
        self.store.persist(self.draft)
        self.committed = self.draft
        self.draft = None
        return self.committed

    def discard(self) -> None:
        if self.draft is not None:
            logger.debug("Discarding weight draft")
        self.draft = None

    def value_of(self, player: Player) -> int:
        return compute_market_value(player, self.committed)
