"""DirectoryRepository - read-only access to the legacy ``MintDb`` table."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from directory_gate.domain.entities.directory_contact import DirectoryContact
from directory_gate.infrastructure.persistence.models.legacy_directory import mint_db


class DirectoryRepository:
    """Legacy directory reader.

    Selects only the exposed columns. Rows are returned in store order
    (no ORDER BY) with values exactly as stored.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_contacts(self) -> list[DirectoryContact]:
        stmt = select(
            mint_db.c["NAME"],
            mint_db.c["MOBILE"],
            mint_db.c["PAN"],
            mint_db.c["RELATIONSHIP  MANAGER"],
            mint_db.c["FAMILY HEAD"],
        )
        result = await self.session.execute(stmt)
        return [
            DirectoryContact(
                name=name,
                mobile=mobile,
                pan=pan,
                relationship_manager=relationship_manager,
                family_head=family_head,
            )
            for name, mobile, pan, relationship_manager, family_head in result.all()
        ]
