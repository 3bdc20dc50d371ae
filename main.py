import logging

import uvicorn

from contact_api.app import create_app
from contact_api.config import Settings

settings = Settings.from_env()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s | %(levelname)-8s | %(message)s',
)
log = logging.getLogger(__name__)

# Initialize FastAPI app
app = create_app(settings)


# Dev entry point
if __name__ == "__main__":
    log.info(f"Server running at http://{settings.host}:{settings.port}")
    log.info(f"API documentation is available at http://{settings.host}:{settings.port}/api-docs")
    uvicorn.run(app, host=settings.host, port=settings.port)
