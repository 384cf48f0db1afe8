import logging
from app.core.config import settings
from app.core.database import Store, init_db

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def seed_data():
    """
    Create the tables and the default course catalog without starting the API.
    Safe to run repeatedly: existing tables and courses are left alone.
    """
    store = Store.from_settings(settings)
    try:
        if not store.check_connection():
            logger.error("Cannot connect to database, nothing seeded.")
            return
        init_db(store)
    finally:
        store.dispose() # Always release the pool

if __name__ == "__main__":
    seed_data()
