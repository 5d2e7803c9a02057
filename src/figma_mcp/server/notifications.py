# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Notification delivery for list-changed events.

Sessions that have issued a ``*/list`` request are remembered as observers;
when the underlying collection changes the owning service broadcasts a
``notifications/*/list_changed`` message to each of them.  Sessions are held
weakly so a closed connection drops out on its own.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable
import weakref

from mcp.server.lowlevel.server import request_ctx

from .. import types


@runtime_checkable
class NotificationSink(Protocol):
    async def send_notification(self, session: Any, notification: types.ServerNotification) -> None: ...


class DefaultNotificationSink:
    """Deliver notifications through the session's own ``send_notification``."""

    async def send_notification(self, session: Any, notification: types.ServerNotification) -> None:
        await session.send_notification(notification)


class ObserverRegistry:
    """Weak set of sessions interested in one list-changed notification."""

    def __init__(self, sink: NotificationSink) -> None:
        self._sink = sink
        self._observers: weakref.WeakSet[Any] = weakref.WeakSet()

    def __len__(self) -> int:
        return len(self._observers)

    def remember_current_session(self) -> None:
        try:
            context = request_ctx.get()
        except LookupError:
            return
        self._observers.add(context.session)

    async def broadcast(self, notification: types.ServerNotification, logger: logging.Logger) -> None:
        stale: list[Any] = []
        for session in list(self._observers):
            try:
                await self._sink.send_notification(session, notification)
            except Exception as exc:
                logger.warning("dropping observer after failed notification: %s", exc)
                stale.append(session)
        for session in stale:
            self._observers.discard(session)


__all__ = ["NotificationSink", "DefaultNotificationSink", "ObserverRegistry"]
