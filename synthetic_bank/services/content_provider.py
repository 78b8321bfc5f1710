"""
Content providers: the source of human-readable text.

Accounts need a person behind them and transactions need a
merchant description. Two providers produce that text:

- FallbackContentProvider draws from fixed reference tables.
  It never fails and never touches the network.
- GeminiContentProvider asks Google Gemini for the text. Any
  failure (network error, timeout, unparseable reply) is logged
  and answered by the fallback instead, so callers never see a
  provider error.

Which one runs is decided once, at startup, by
select_content_provider(). Neither provider caches results.
"""

import abc
import asyncio
import json
import logging
import random

from google import genai
from pydantic import ValidationError

from synthetic_bank.config import Settings
from synthetic_bank.exceptions import ContentProviderError
from synthetic_bank.reference_data import (
    CITIES,
    FIRST_NAMES,
    LAST_NAMES,
    STATES,
    descriptions_for,
)
from synthetic_bank.schemas.account import Identity
from synthetic_bank.services.randomness import random_digits

logger = logging.getLogger(__name__)


IDENTITY_PROMPT = """Generate realistic Indian personal details in JSON format with the following structure:
{
  "name": "Full name with first and last name",
  "email": "realistic email address",
  "phone": "+91 followed by 10 digit mobile number",
  "address": {
    "street": "Indian street address",
    "city": "Indian city",
    "state": "Indian state",
    "pincode": "6 digit pincode"
  }
}

Use common Indian names from different regions (North, South, East, West India). Make it diverse and realistic. Return only valid JSON, no additional text."""

DESCRIPTION_PROMPT = """Generate a realistic Indian transaction description for:
Category: {category}
Type: {transaction_type}

Make it sound like a real Indian merchant or service that Indians would recognize. Be specific and authentic.

Examples:
- For Food: "Domino's Pizza", "Haldiram's", "McDonald's India"
- For Groceries: "Big Bazaar", "Reliance Fresh", "DMart"
- For Transport: "Ola Cab", "Uber India", "Metro Card Recharge"
- For Bills: "MSEB Bill Payment", "Airtel Mobile", "BSES Electricity"

Return only the merchant/description name, no quotes or extra text."""


class ContentProvider(abc.ABC):
    """Capability interface shared by both providers."""

    #: Human-readable provider name
    name: str
    #: Short machine-readable code reported by the generate endpoint
    code: str
    #: Whether bulk generation must pace its calls to this provider
    paces_requests: bool = False

    @abc.abstractmethod
    async def generate_identity(self) -> dict:
        """Return a person record shaped like the Identity schema."""

    @abc.abstractmethod
    async def generate_transaction_description(
        self, category: str, transaction_type: str
    ) -> str:
        """Return a merchant or payment description."""


class FallbackContentProvider(ContentProvider):
    """Deterministic, table-driven provider."""

    name = "Fallback Templates"
    code = "fallback_mode"

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    async def generate_identity(self) -> dict:
        return self.build_identity()

    async def generate_transaction_description(
        self, category: str, transaction_type: str
    ) -> str:
        return self.build_description(category)

    def build_identity(self) -> dict:
        first_name = self.rng.choice(FIRST_NAMES)
        last_name = self.rng.choice(LAST_NAMES)
        return {
            "name": f"{first_name} {last_name}",
            "email": f"{first_name.lower()}.{last_name.lower()}@gmail.com",
            "phone": (
                f"+91 {random_digits(self.rng, 5)}-{random_digits(self.rng, 5)}"
            ),
            "address": {
                "street": f"{self.rng.randint(1, 999)}, {last_name} Colony",
                "city": self.rng.choice(CITIES),
                "state": self.rng.choice(STATES),
                "pincode": str(self.rng.randint(100000, 999999)),
            },
        }

    def build_description(self, category: str) -> str:
        return self.rng.choice(descriptions_for(category))


def extract_identity(text: str) -> dict:
    """
    Parse the first JSON object out of a model reply.

    Models often wrap JSON in prose or code fences, so decoding
    starts at the first "{" and stops at the end of that object.
    The result must match the Identity schema.
    """
    start = text.find("{")
    if start == -1:
        raise ContentProviderError("No JSON object in identity response")
    try:
        data, _ = json.JSONDecoder().raw_decode(text, start)
        identity = Identity.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ContentProviderError(f"Invalid identity response: {e}") from e
    return identity.model_dump()


def clean_description(text: str) -> str:
    """Trim a description reply and strip double quotes."""
    description = text.strip().replace('"', "")
    if not description:
        raise ContentProviderError("Empty description response")
    return description


class GeminiContentProvider(ContentProvider):
    """
    Provider backed by Google Gemini.

    Every call is bounded by a timeout. A timed-out call is
    treated exactly like a failed one: the fallback answers.
    """

    name = "Google Gemini"
    code = "google_gemini"
    paces_requests = True

    def __init__(
        self,
        client: genai.Client,
        model: str,
        timeout: float,
        fallback: FallbackContentProvider | None = None,
    ):
        self.client = client
        self.model = model
        self.timeout = timeout
        self.fallback = fallback or FallbackContentProvider()

    async def _generate(self, prompt: str) -> str:
        response = await asyncio.wait_for(
            self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            ),
            timeout=self.timeout,
        )
        text = response.text
        if not text:
            raise ContentProviderError("Empty response from Gemini")
        return text

    async def generate_identity(self) -> dict:
        try:
            identity = extract_identity(await self._generate(IDENTITY_PROMPT))
        except Exception as e:
            logger.warning(
                "Gemini identity generation failed, using fallback: %s", e
            )
            return self.fallback.build_identity()
        logger.debug("Generated identity using Gemini")
        return identity

    async def generate_transaction_description(
        self, category: str, transaction_type: str
    ) -> str:
        prompt = DESCRIPTION_PROMPT.format(
            category=category, transaction_type=transaction_type
        )
        try:
            description = clean_description(await self._generate(prompt))
        except Exception as e:
            logger.warning(
                "Gemini description generation failed, using fallback: %s", e
            )
            return self.fallback.build_description(category)
        logger.debug("Generated transaction description: %s", description)
        return description


def select_content_provider(
    settings: Settings, rng: random.Random | None = None
) -> ContentProvider:
    """
    Choose the provider for the lifetime of the process.

    Gemini is used only when an API key is configured and the
    client can be built. There is no re-probing later on.
    """
    fallback = FallbackContentProvider(rng)
    if not settings.GEMINI_API_KEY:
        logger.warning(
            "GEMINI_API_KEY not set; using fallback data generation"
        )
        return fallback

    try:
        client = genai.Client(api_key=settings.GEMINI_API_KEY)
    except Exception as e:
        logger.error("Failed to initialize Gemini client: %s", e)
        return fallback

    logger.info("Google Gemini content provider initialized (%s)", settings.GEMINI_MODEL)
    return GeminiContentProvider(
        client=client,
        model=settings.GEMINI_MODEL,
        timeout=settings.CONTENT_PROVIDER_TIMEOUT,
        fallback=fallback,
    )
