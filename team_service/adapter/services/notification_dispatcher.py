import logging
from typing import Optional

import httpx

from team_service.app.services.notification_dispatcher import (
    NotificationDispatcher,
    NotificationEvent,
)

logger = logging.getLogger(__name__)


class LoggingNotificationDispatcher(NotificationDispatcher):
    """Records events in the application log; used when no webhook is configured"""

    async def notify(self, event: NotificationEvent) -> None:
        logger.info(
            "Notification %s: team=%s actor=%s recipient=%s subject=%s",
            event.kind.value,
            event.team_id,
            event.actor_id,
            event.recipient_id,
            event.subject_id,
        )


class WebhookNotificationDispatcher(NotificationDispatcher):
    """POSTs each event as JSON to the notification service"""

    def __init__(
        self,
        url: str,
        timeout: float = 2.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.client = client

    async def notify(self, event: NotificationEvent) -> None:
        payload = event.model_dump(mode="json")
        if self.client is not None:
            response = await self.client.post(self.url, json=payload, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=payload)
        response.raise_for_status()
        logger.debug("Delivered notification %s to %s", event.kind.value, self.url)
