import logging

from tenacity import retry, stop_after_attempt, wait_fixed

from core.config_loader import load_config
from core.vetting.rubric import load_rubric_definition
from database.database import engine, db_session_scope
from database.models import Base
from database.repositories import RubricRepository

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2))
def init_db(rubric_file=None):
    """Create tables and seed the vetting rubric. Retried while the database starts up."""
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise

    rubric_file = rubric_file or load_config().vetting.rubric_file
    definition = load_rubric_definition(rubric_file)
    with db_session_scope() as session:
        RubricRepository(session).seed(definition)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
