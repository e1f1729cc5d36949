"""Scenario catalog: read-only lookups over the seeded prompts."""
from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zoomingo.models.scenario import Scenario
from zoomingo.services.errors import CatalogError


async def pick_random(db: AsyncSession, n: int) -> list[Scenario]:
    """Return n distinct non-free scenarios, drawn uniformly without replacement."""
    result = await db.execute(
        select(Scenario).where(Scenario.is_free == False).order_by(func.random()).limit(n)  # noqa: E712
    )
    scenarios = list(result.scalars().all())
    if len(scenarios) < n:
        raise CatalogError(f"Catalog has {len(scenarios)} scenarios, {n} needed")
    return scenarios


async def get_free(db: AsyncSession) -> Scenario:
    result = await db.execute(select(Scenario).where(Scenario.is_free == True).limit(1))  # noqa: E712
    free = result.scalar_one_or_none()
    if free is None:
        raise CatalogError("No free scenario in catalog")
    return free


async def get_by_ids(db: AsyncSession, ids: Iterable[int]) -> dict[int, Scenario]:
    """Return one scenario per requested id; a missing id is a CatalogError."""
    wanted = set(ids)
    if not wanted:
        return {}
    result = await db.execute(select(Scenario).where(Scenario.id.in_(wanted)))
    found = {s.id: s for s in result.scalars().all()}
    missing = wanted - found.keys()
    if missing:
        raise CatalogError(f"Unknown scenario ids: {sorted(missing)}")
    return found
