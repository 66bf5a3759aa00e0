"""Run the API with uvicorn.

Usage:
    python -m survey_backend.serve
"""
import logging

import uvicorn

from survey_backend.core import config


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    config.validate_runtime_config()
    logging.getLogger(__name__).info('Server running on port %s', config.PORT)
    uvicorn.run('survey_backend.main:app', host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    main()
