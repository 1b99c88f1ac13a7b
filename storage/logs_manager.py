"""
Logging Management Module (Async)

Application log for the career assistant, written through aiologger:
- One file per day, <data_dir>/logs/app_YYYYMMDD.log, opened on initialize()
- Optional console echo; warnings and errors are coloured with colorama
- Messages below the configured level are dropped, ERROR and CRITICAL never are
- Workflow lifecycle helpers shared by the analysis agents

Until initialize() has run (and after shutdown()) only the console echo is active,
so agents can log from tests without a file handler.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from aiologger.handlers.files import AsyncFileHandler
from aiologger.levels import LogLevel
from aiologger.logger import Logger
from colorama import Fore, Style, init as colorama_init

from constants import Messages

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_CONSOLE_COLOURS = {
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
    LogLevel.CRITICAL: Fore.RED,
}


class LogsManager:
    def __init__(self, settings):
        """
        Args:
            settings (dict): Reads
                settings['system']['data_dir']        base directory for logs/
                settings['system']['log_level']       DEBUG/INFO/WARNING/ERROR/CRITICAL
                settings['logging']['console_output'] echo messages to stdout
        """
        system = settings.get('system', {})
        requested = str(system.get('log_level', 'INFO')).upper()
        self.log_level = requested if requested in _LEVEL_NAMES else 'INFO'
        self.threshold = LogLevel[self.log_level]
        self.console_output = settings.get('logging', {}).get('console_output', True)

        self.log_dir = Path(system.get('data_dir', './data')) / 'logs'
        self.log_file = self.log_dir / f"app_{datetime.now():%Y%m%d}.log"

        self.logger: Optional[Logger] = None
        self.file_handler: Optional[AsyncFileHandler] = None

        colorama_init(autoreset=False)

    @property
    def is_initialized(self) -> bool:
        return self.logger is not None

    async def initialize(self):
        """Open today's log file. Must run on the loop that will do the logging."""
        if self.is_initialized:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger = Logger(name="CareerAssistant", level=self.threshold)
        handler = AsyncFileHandler(filename=str(self.log_file))
        logger.add_handler(handler)

        self.logger, self.file_handler = logger, handler
        await self.logger.info(f"Logging to {self.log_file}")

    async def shutdown(self):
        """Flush and close the log file. Safe to call more than once."""
        logger, handler = self.logger, self.file_handler
        self.logger = None
        self.file_handler = None
        if logger is None:
            return

        try:
            if handler is not None:
                logger.remove_handler(handler)
                await handler.close()
            await logger.shutdown()
        except OSError as e:
            # The logger itself is gone at this point
            print(f"Error while closing log file {self.log_file}: {e}")

    async def _log(self, level: LogLevel, msg: str):
        if level < self.threshold and level < LogLevel.ERROR:
            return

        if self.console_output:
            colour = _CONSOLE_COLOURS.get(level)
            line = f"[{level.name}] {msg}"
            print(f"{colour}{line}{Style.RESET_ALL}" if colour else line)

        if self.logger is not None:
            await getattr(self.logger, level.name.lower())(msg)

    async def debug(self, msg: str):
        await self._log(LogLevel.DEBUG, msg)

    async def info(self, msg: str):
        await self._log(LogLevel.INFO, msg)

    async def warning(self, msg: str):
        await self._log(LogLevel.WARNING, msg)

    async def error(self, msg: str):
        await self._log(LogLevel.ERROR, msg)

    async def critical(self, msg: str):
        await self._log(LogLevel.CRITICAL, msg)

    # Workflow lifecycle

    async def log_workflow_started(self, workflow: str):
        await self.info(Messages.WORKFLOW_STARTED.format(workflow))

    async def log_workflow_completed(self, workflow: str, result_id: str):
        await self.info(Messages.WORKFLOW_COMPLETED.format(workflow, result_id))

    async def log_workflow_failed(self, workflow: str, error: Exception):
        await self.error(Messages.WORKFLOW_FAILED.format(workflow, str(error)))
