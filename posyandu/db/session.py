"""asyncpg pool owned by the application lifespan.

Requests borrow one connection each through ``get_db_connection``; the seed
script reuses the same pool via ``get_pool``.
"""
import logging
from typing import AsyncGenerator, Optional

import asyncpg
from asyncpg import Connection
from asyncpg.pool import Pool

from posyandu.core.config import settings

logger = logging.getLogger(__name__)

_pool: Optional[Pool] = None


async def connect_db_pool() -> Pool:
    global _pool
    if _pool is not None:
        return _pool
    try:
        _pool = await asyncpg.create_pool(
            dsn=settings.asyncpg_url,
            min_size=settings.DB_POOL_MIN_SIZE,
            max_size=settings.DB_POOL_MAX_SIZE,
            timeout=settings.DB_POOL_TIMEOUT,
        )
    except (OSError, asyncpg.PostgresError) as e:
        logger.error("Could not create database pool: %s", e)
        raise
    logger.info(
        "Database pool ready (min=%s, max=%s)",
        settings.DB_POOL_MIN_SIZE,
        settings.DB_POOL_MAX_SIZE,
    )
    return _pool


async def get_pool() -> Pool:
    return _pool if _pool is not None else await connect_db_pool()


async def close_db_pool() -> None:
    global _pool
    pool, _pool = _pool, None
    if pool is not None:
        await pool.close()
        logger.info("Database pool closed.")


async def get_db_connection() -> AsyncGenerator[Connection, None]:
    if _pool is None:
        raise RuntimeError("Database pool is not initialized; is the app lifespan running?")
    async with _pool.acquire() as connection:
        yield connection
