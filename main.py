"""
Career Assistant Entry Point

This file sets up:
1) Configuration (.env + environment) and logging
2) The controller over the configured storage backend
3) The interactive CLI, all on one event loop
"""

import asyncio
import sys

from config.settings import load_settings
from orchestrator.controller import Controller
from ui.cli import CLI


def main() -> int:
    settings = load_settings()
    loop = asyncio.new_event_loop()
    controller = Controller(settings)

    try:
        loop.run_until_complete(controller.initialize())
        CLI(controller, loop=loop).cmdloop()
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    finally:
        loop.run_until_complete(controller.shutdown())
        loop.close()


if __name__ == "__main__":
    sys.exit(main())
