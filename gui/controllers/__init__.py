"""GUI controllers package for orchestrating application logic."""

from .project_controller import ProjectController
from .editor_controller import EditorController
from .menubar_manager import MenuBarManager

__all__ = [
    'ProjectController',
    'EditorController',
    'MenuBarManager'
]
