"""Editor components package."""

from .code_editor import CodeEditor
from .suggestion_popup import SuggestionPopup
from .document_viewer import DocumentWidget
from .editor_widget import EditorWidget

__all__ = [
    'CodeEditor',
    'SuggestionPopup',
    'DocumentWidget',
    'EditorWidget',
]
