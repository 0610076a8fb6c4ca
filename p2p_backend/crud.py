from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from . import models, schemas


async def list_ads(db: AsyncSession) -> Sequence[models.Ad]:
    result = await db.execute(select(models.Ad))
    return result.scalars().all()


async def create_ad(db: AsyncSession, ad: schemas.AdCreate) -> models.Ad:
    db_ad = models.Ad(user=ad.user, price=ad.price, amount=ad.amount, type=ad.type)
    db.add(db_ad)
    await db.commit()
    await db.refresh(db_ad)
    return db_ad
