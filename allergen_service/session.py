"""
Chat session controller — the client side of the allergen chat.

Holds the transcript, talks to the gateway over HTTP and appends exactly one
reply per request. ``reset()`` advances a generation counter; any request that
started before the reset still runs to completion but its reply is dropped.
"""

import asyncio
import itertools
from typing import List, Optional, Tuple

import httpx

from allergen_service import config
from allergen_service.images import encode_data_url
from allergen_service.logger import get_logger
from allergen_service.models import ErrorMessage, ImageMessage, Message, TextMessage
from allergen_service.prompts import GREETING, IMAGE_APOLOGY, TEXT_APOLOGY

logger = get_logger(__name__)

TIMEOUT = 60.0


class ChatSession:
    def __init__(self, gateway_url: str = config.GATEWAY_URL, client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(base_url=gateway_url, timeout=TIMEOUT)
        self._messages: List[Message] = [TextMessage(text=GREETING, sender="bot")]
        self._generation = 0
        self._pending = set()
        self._ids = itertools.count()

    # ── State ─────────────────────────────────────────────────────────────────

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def loading(self) -> bool:
        return bool(self._pending)

    def reset(self) -> None:
        """Back to a single greeting. Replies still in flight will be discarded."""
        self._generation += 1
        self._messages = [TextMessage(text=GREETING, sender="bot")]

    def _append(self, message: Message, generation: int) -> Optional[Message]:
        if generation != self._generation:
            logger.info("Dropping reply from before the last reset")
            return None
        self._messages.append(message)
        return message

    # ── Sending ───────────────────────────────────────────────────────────────

    async def send_text(self, text: str) -> Optional[Message]:
        """Look up a dish by name. Blank input is ignored."""
        dish_name = text.strip()
        if not dish_name:
            return None

        generation = self._generation
        self._messages.append(TextMessage(text=dish_name, sender="user"))

        request_id = next(self._ids)
        self._pending.add(request_id)
        try:
            resp = await self._client.post("/api/chat", json={"dishName": dish_name})
            resp.raise_for_status()
            reply = TextMessage(text=resp.json()["response"], sender="bot")
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning("Failed to fetch from LLM: %s", e)
            reply = ErrorMessage(text=TEXT_APOLOGY)
        finally:
            self._pending.discard(request_id)

        return self._append(reply, generation)

    async def send_image(self, path) -> Optional[Message]:
        """Upload a menu photo from disk. Raises OSError if the file can't be read."""
        data_url = await asyncio.to_thread(encode_data_url, path)
        return await self.send_image_data_url(data_url)

    async def send_image_data_url(self, data_url: str) -> Optional[Message]:
        generation = self._generation
        self._messages.append(ImageMessage(image_url=data_url))

        request_id = next(self._ids)
        self._pending.add(request_id)
        try:
            resp = await self._client.post("/api/image-chat", json={"imageDataUrl": data_url})
            data = _json_or_empty(resp)
            if resp.is_error or data.get("isLlmError"):
                reply = ErrorMessage(text=data.get("response") or IMAGE_APOLOGY)
            else:
                reply = TextMessage(text=data["response"], sender="bot")
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning("Failed to process image: %s", e)
            reply = ErrorMessage(text=IMAGE_APOLOGY)
        finally:
            self._pending.discard(request_id)

        return self._append(reply, generation)

    async def aclose(self):
        await self._client.aclose()


def _json_or_empty(resp: httpx.Response) -> dict:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
