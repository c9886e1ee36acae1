# -*- coding: utf-8 -*-
"""
Container Factory Module

The only place shared services are created and assembled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from soundgraph.app.container import AppContainer

logger = logging.getLogger(__name__)


class AppContainerFactory:
    """Application Container Factory

    Usage Example:
        # Inside a running QApplication
        container = AppContainerFactory.create(use_qt=True)

        # In tests (no Qt)
        container = AppContainerFactory.create_for_testing()
    """

    @staticmethod
    def create(
        config_path: Optional[str] = None,
        use_qt: bool = False,
    ) -> "AppContainer":
        """Create Application Container

        Args:
            config_path: YAML configuration file path
            use_qt: Whether ticks run on the Qt event loop
                    - True: QtTickScheduler (needs a QApplication)
                    - False: ManualTickScheduler pumped by the caller

        Returns:
            A configured AppContainer instance
        """
        from soundgraph.app.container import AppContainer
        from soundgraph.core.event_bus import EventBus
        from soundgraph.core.scheduling import ManualTickScheduler
        from soundgraph.logging_config import setup_logging
        from soundgraph.services.config_service import ConfigService

        config = ConfigService(config_path)
        setup_logging(config)
        logger.info("Creating application container...")

        interval_ms = int(config.get("visualization.tick_interval_ms", 16))
        if use_qt:
            try:
                from soundgraph.ui.qt_scheduler import QtTickScheduler
                scheduler = QtTickScheduler(interval_ms)
                logger.debug("Using QtTickScheduler (%d ms)", interval_ms)
            except ImportError:
                logger.error(
                    "Failed to import QtTickScheduler, using ManualTickScheduler; "
                    "ticks only run when the caller pumps scheduler.run_pending()"
                )
                scheduler = ManualTickScheduler()
        else:
            scheduler = ManualTickScheduler()
            logger.debug("Using ManualTickScheduler (Non-Qt mode)")

        container = AppContainer(
            config=config,
            event_bus=EventBus(),
            scheduler=scheduler,
        )
        logger.info("Application container creation complete")
        return container

    @staticmethod
    def create_for_testing(config_path: Optional[str] = None) -> "AppContainer":
        """Create a container with a manual scheduler, independent of Qt."""
        return AppContainerFactory.create(config_path, use_qt=False)
