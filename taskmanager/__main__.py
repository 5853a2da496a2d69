import logging

import uvicorn

from taskmanager.config import PORT

logger = logging.getLogger("taskmanager")


def main():
    from taskmanager.main import app

    logger.info("app is running on port %s", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
