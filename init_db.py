import asyncio
import logging

from sqlalchemy import text

from todoapp.core.config import settings
from todoapp.core.database import engine, create_tables

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("init_db")


async def init_db():
    logger.info(f"Initializing database for {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    try:
        await create_tables()

        async with engine.connect() as conn:
            query = "SELECT sqlite_version();" if settings.is_sqlite else "SELECT version();"
            row = (await conn.execute(text(query))).fetchone()
            logger.info(f"Database version: {row[0]}")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        if "ssl" in str(e).lower():
            logger.error("Hint: hosted Postgres providers usually require SSL in the connection string.")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
