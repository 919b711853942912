"""
Run Orchestration & Lifecycle Management.

This module provides the `RootOrchestrator`, the central authority for
initializing and tearing down the execution context of a pipeline run. It
synchronizes the filesystem (RunPaths), telemetry (Logging) and metadata
preservation (config manifest) into a single context manager.

Key Responsibilities:
    - Path Atomicity: Generates and materialises the run workspace.
    - Telemetry: Initializes the run logger with a file sink in the workspace.
    - Metadata Preservation: Writes the resolved configuration as YAML.
    - Lifecycle Safety: Logs failures on exit without suppressing them.

Randomness is not configured here: the split and model seeds travel inside
the configuration to the stages that consume them.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import time
from typing import Callable, Optional

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .config import Config
from .io import save_config_as_yaml
from .logger import Logger, LogStyle, Reporter
from .paths import LOGGER_NAME, RunPaths, setup_static_directories

# =========================================================================== #
#                                Time Tracking                                #
# =========================================================================== #

class TimeTracker:
    """Wall-clock stopwatch for the pipeline duration."""

    def __init__(self):
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def start(self) -> None:
        self._start = time.perf_counter()
        self._end = None

    def stop(self) -> None:
        if self._start is not None:
            self._end = time.perf_counter()

    @property
    def elapsed_seconds(self) -> float:
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start

    @property
    def elapsed_formatted(self) -> str:
        total = self.elapsed_seconds
        minutes, seconds = divmod(total, 60)
        hours, minutes = divmod(int(minutes), 60)
        if hours:
            return f"{hours}h {minutes}m {seconds:.1f}s"
        if minutes:
            return f"{minutes}m {seconds:.1f}s"
        return f"{seconds:.2f}s"


# =========================================================================== #
#                              Root Orchestrator                              #
# =========================================================================== #

class RootOrchestrator:
    """
    High-level lifecycle controller for a pipeline run.

    Attributes:
        cfg (Config): The immutable global configuration manifest.
        reporter (Reporter): Utility for environment telemetry.
        time_tracker (TimeTracker): Measures the run duration.
        paths (Optional[RunPaths]): Directories of the current run.
        run_logger (Optional[logging.Logger]): Active logger instance for the run.
    """

    def __init__(
        self,
        cfg: Config,
        log_initializer: Callable[..., logging.Logger] = Logger.setup,
        reporter: Optional[Reporter] = None,
    ):
        """
        Args:
            cfg: The validated global configuration manifest.
            log_initializer: Function initializing the logging system.
            reporter: Status reporter; a default one is created when None.
        """
        self.cfg = cfg
        self.reporter = reporter or Reporter()
        self.time_tracker = TimeTracker()
        self._log_initializer = log_initializer
        self.paths: Optional[RunPaths] = None
        self.run_logger: Optional[logging.Logger] = None

    def __enter__(self) -> "RootOrchestrator":
        """
        Context Manager entry point.

        Returns:
            RootOrchestrator: The initialized instance ready for pipeline execution.
        """
        try:
            self.initialize_core_services()
        except Exception:
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Context Manager exit point. Logs the failure, if any, and stops the
        clock.

        Returns:
            bool: Always False to allow exception propagation.
        """
        if exc_type is not None and issubclass(exc_type, Exception) and self.run_logger is not None:
            stage = getattr(exc_val, "stage", None)
            where = f" during '{stage}'" if stage else ""
            self.run_logger.error(
                f"{LogStyle.WARNING} Run failed{where}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
            )
        self.cleanup()
        return False

    def initialize_core_services(self) -> RunPaths:
        """
        Runs the initialization sequence in a fixed order.

        Returns:
            RunPaths: The directory container for the current session.
        """
        self.time_tracker.start()

        # 1. Static Environment Setup
        setup_static_directories(self.cfg.telemetry.output_dir)

        # 2. Dynamic Path Initialization
        self.paths = RunPaths.create(
            dataset_slug=self.cfg.dataset.dataset_name,
            model_name=self.cfg.model.name,
            base_dir=self.cfg.telemetry.output_dir,
        )

        # 3. Logger Initialization
        self.run_logger = self._log_initializer(
            name=LOGGER_NAME,
            log_dir=self.paths.logs,
            level=self.cfg.telemetry.log_level,
        )

        # 4. Metadata Preservation
        manifest = self.cfg.model_dump(mode="json")
        manifest["telemetry"] = self.cfg.telemetry.to_portable_dict()
        save_config_as_yaml(data=manifest, yaml_path=self.paths.get_config_path())

        # 5. Environment Reporting
        self.reporter.log_initial_status(
            logger=self.run_logger,
            cfg=self.cfg,
            paths=self.paths,
        )

        return self.paths

    def cleanup(self) -> None:
        """Stops the clock and flushes the run logger's handlers."""
        self.time_tracker.stop()
        if self.run_logger is not None:
            for handler in self.run_logger.handlers:
                handler.flush()
