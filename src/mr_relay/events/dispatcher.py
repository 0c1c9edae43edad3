# src/mr_relay/events/dispatcher.py
import logging
from collections.abc import Callable
from mr_relay.models.webhook import GitLabMREvent, MRAction
from mr_relay.notifiers.base import Notifier
from .formatter import format_approved, format_merged, format_opened


logger = logging.getLogger(__name__)


FORMATTERS: dict[MRAction, Callable[[GitLabMREvent], str]] = {
    MRAction.OPEN: format_opened,
    MRAction.APPROVED: format_approved,
    MRAction.MERGE: format_merged,
}

# Known actions that are deliberately not announced yet.
RESERVED_ACTIONS = frozenset({MRAction.CLOSE, MRAction.UPDATE})


class MergeRequestDispatcher:
    """Routes merge request events to a formatter and sends the result."""

    def __init__(self, notifier: Notifier):
        self.notifier = notifier

    async def handle(self, event: GitLabMREvent) -> bool:
        """Send a message for the event's action.

        Returns True if a message was sent, False if the action is ignored.
        DeliveryError from the notifier propagates to the caller.
        """
        raw_action = event.object_attributes.action
        mr_ref = f"{event.project.name}!{event.object_attributes.iid}"

        try:
            action = MRAction(raw_action)
        except ValueError:
            logger.info(f"Ignoring unknown action {raw_action!r} for MR {mr_ref}")
            return False

        formatter = FORMATTERS.get(action)
        if formatter is None:
            if action in RESERVED_ACTIONS:
                logger.debug(f"Action {action.value!r} not handled yet for MR {mr_ref}")
            else:
                logger.info(f"Ignoring action {action.value!r} for MR {mr_ref}")
            return False

        await self.notifier.send_text(formatter(event))
        logger.info(f"Notified {action.value!r} for MR {mr_ref}")
        return True
