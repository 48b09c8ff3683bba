"""
Action queue - ordered hand-off of a round's events to the presentation layer.

Flow:
    1. execute_round() resolves the round and enqueues its events
    2. The presentation layer dequeues them one at a time to animate
    3. Once the queue is empty the next action may be submitted

Every operation returns a new queue; the original is never changed.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional

from duel.core.component import Component
from duel.components.character import Character
from duel.components.combat import TargetStat
from duel.battle.state import TurnLogEntry
from duel.battle.turn import Side


class QueueItemKind(Enum):
    """Presentation event kinds."""
    DAMAGE = "damage"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"
    DEFEND = "defend"
    EFFECT_EXPIRE = "effect-expire"


class ActionQueueItem(Component):
    """
    One presentation event.

    Attributes:
        kind: Event kind
        actor: Side that acted (or whose effect expired)
        actor_name: Name of that side's character
        description: Text to show
        value: Damage, heal or expired amount; None otherwise
        target_stat: Stat of an expired effect
        log_entry: Log entry the event derives from
        player_snapshot: Player right after this event
        enemy_snapshot: Enemy right after this event
    """
    kind: QueueItemKind
    actor: Side
    actor_name: str
    description: str
    value: Optional[int] = None
    target_stat: Optional[TargetStat] = None
    log_entry: TurnLogEntry
    player_snapshot: Character
    enemy_snapshot: Character


class ActionQueue(Component):
    """Immutable FIFO of ActionQueueItems."""
    items: tuple[ActionQueueItem, ...] = ()

    @classmethod
    def create(cls) -> ActionQueue:
        """Create an empty queue."""
        return cls()

    def enqueue(self, item: ActionQueueItem) -> ActionQueue:
        """Return a queue with ``item`` appended."""
        return ActionQueue(items=self.items + (item,))

    def enqueue_all(self, items: Iterable[ActionQueueItem]) -> ActionQueue:
        """Return a queue with ``items`` appended in order."""
        return ActionQueue(items=self.items + tuple(items))

    def dequeue(self) -> tuple[Optional[ActionQueueItem], ActionQueue]:
        """
        Take the front item.

        Returns:
            (item, remaining); item is None when the queue is empty
        """
        if not self.items:
            return None, ActionQueue()
        return self.items[0], ActionQueue(items=self.items[1:])

    @property
    def is_empty(self) -> bool:
        """Check if the queue has no items."""
        return not self.items

    @property
    def size(self) -> int:
        """Number of queued items."""
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ActionQueueItem]:
        return iter(self.items)
