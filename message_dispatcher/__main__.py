"""Run the demo dispatch: ``python -m message_dispatcher``."""

import asyncio

from message_dispatcher.core.logging import configure_logging
from message_dispatcher.core.settings import settings
from message_dispatcher.services.demo import run_demo


def main() -> None:
    configure_logging(settings.log_level)
    asyncio.run(run_demo(settings=settings))


if __name__ == "__main__":
    main()
