"""
Application composition root.
"""

from soundgraph.app.container import AppContainer
from soundgraph.app.container_factory import AppContainerFactory

__all__ = ["AppContainer", "AppContainerFactory"]
