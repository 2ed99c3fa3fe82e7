import asyncio
import logging

import aio_pika

from .config import RABBIT_URL, EXCHANGE_NAME
from .events import build_event, to_json

logger = logging.getLogger(__name__)


class EventPublisher:
    """
    Sends GharSeva domain events (``worker.assigned``) to the topic exchange,
    routed by event type.

    Without RABBIT_URL the publisher is disabled and ``emit`` only builds the
    event. Broker failures are logged; they never fail the assignment that
    produced the event.
    """

    def __init__(self, url: str | None = RABBIT_URL, exchange_name: str = EXCHANGE_NAME):
        self.url = url
        self.exchange_name = exchange_name
        self._lock = asyncio.Lock()
        self._connection: aio_pika.abc.AbstractRobustConnection | None = None
        self._exchange: aio_pika.abc.AbstractExchange | None = None

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    @property
    def connected(self) -> bool:
        return self._connection is not None and not self._connection.is_closed

    async def start(self):
        if not self.enabled:
            logger.info("RABBIT_URL not set; domain events disabled")
            return

        async with self._lock:
            if self.connected:
                return
            connection = await aio_pika.connect_robust(self.url)
            try:
                channel = await connection.channel()
                self._exchange = await channel.declare_exchange(
                    self.exchange_name,
                    aio_pika.ExchangeType.TOPIC,
                    durable=True,
                )
            except Exception:
                await connection.close()
                raise
            self._connection = connection
            logger.info("publishing domain events to exchange %s", self.exchange_name)

    async def emit(self, event_type: str, data: dict) -> dict:
        event = build_event(event_type, data)
        if not self.enabled:
            return event

        try:
            await self.start()
            await self._exchange.publish(
                aio_pika.Message(
                    body=to_json(event).encode("utf-8"),
                    content_type="application/json",
                    delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
                    message_id=event["event_id"],
                    type=event_type,
                ),
                routing_key=event_type,
            )
        except Exception as e:
            logger.warning("could not publish %s event %s: %s", event_type, event["event_id"], e)
        return event

    async def stop(self):
        async with self._lock:
            connection, self._connection, self._exchange = self._connection, None, None
        if connection is not None and not connection.is_closed:
            await connection.close()


publisher = EventPublisher()
