import uvicorn

from app.core.config import settings
from app.main import app, logger

if __name__ == "__main__":
    logger.info(f"Server is running on port: http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
