# scripts/init_db.py
#  to run the script, run the following command:
#  python scripts/init_db.py [--drop]

"""
Database Initialisation Script
Creates every clinic table on the database named by DATABASE_URL
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from app.database.connection import create_tables, drop_tables, engine
from config.appconfig import settings

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def init_db(drop: bool = False) -> None:
    try:
        if drop:
            logger.warning("⚠️ Dropping existing tables")
            await drop_tables()
        await create_tables()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the clinic schema")
    parser.add_argument("--drop", action="store_true", help="drop all tables first")
    args = parser.parse_args()

    print("\n" + "="*60)
    print(f"   {settings.APP_NAME.upper()} - DATABASE INIT")
    print("="*60 + "\n")

    try:
        asyncio.run(init_db(drop=args.drop))
    except Exception as e:
        logger.error(f"❌ Failed to initialise database: {e}", exc_info=True)
        sys.exit(1)

    print("\n" + "="*60)
    print("   ✅ SUCCESS - Schema ready!")
    print("="*60 + "\n")
