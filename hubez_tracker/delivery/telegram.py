"""
Telegram Bot API transport.
Only ``sendMessage`` is needed.
"""

from typing import Optional
import aiohttp
from loguru import logger

from hubez_tracker.config import DEFAULT_TELEGRAM_API_URL
from hubez_tracker.exceptions import DeliveryError


class TelegramBot:
    """
    Minimal Telegram Bot API client.
    
    Requires a bot token from @BotFather. Messages are sent as plain text so
    the body matches the console output exactly.
    """
    
    def __init__(self, token: str, api_url: str = DEFAULT_TELEGRAM_API_URL):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._session: Optional[aiohttp.ClientSession] = None
    
    def _method_url(self, method: str) -> str:
        return f"{self.api_url}/bot{self.token}/{method}"
    
    async def _ensure_session(self):
        """Ensure HTTP session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
    
    async def close(self):
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
    
    async def send_message(self, chat_id: str, text: str) -> dict:
        """
        Send a text message to a chat.
        
        Returns:
            The ``result`` object of the API response (the sent message)
            
        Raises:
            DeliveryError: on network failure or if Telegram rejects the call
        """
        await self._ensure_session()
        
        payload = {"chat_id": chat_id, "text": text}
        
        try:
            async with self._session.post(self._method_url("sendMessage"), json=payload) as resp:
                try:
                    data = await resp.json(content_type=None)
                except ValueError:
                    data = {}
                if not isinstance(data, dict):
                    data = {}
                
                if resp.status != 200 or not data.get("ok"):
                    description = data.get("description") or await resp.text()
                    raise DeliveryError(
                        f"Telegram sendMessage failed: {resp.status} - {description}"
                    )
                
                logger.debug(f"Telegram message delivered to chat {chat_id}")
                return data.get("result", {})
                
        except aiohttp.ClientError as e:
            raise DeliveryError(f"Telegram request failed: {e}") from e
