"""
Identity factory: turns provider output into an AccountHolder.
"""

from synthetic_bank.models.account_holder import AccountHolder
from synthetic_bank.schemas.account import Identity
from synthetic_bank.services.content_provider import ContentProvider


class IdentityFactory:

    def __init__(self, provider: ContentProvider):
        self.provider = provider

    async def create_identity(self) -> Identity:
        """Ask the content provider for a person and validate it."""
        return Identity.model_validate(await self.provider.generate_identity())

    async def create_account_holder(self) -> AccountHolder:
        identity = await self.create_identity()
        return AccountHolder(
            name=identity.name,
            email=identity.email,
            phone=identity.phone,
            street=identity.address.street,
            city=identity.address.city,
            state=identity.address.state,
            pincode=identity.address.pincode,
        )
