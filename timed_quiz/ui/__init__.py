"""Qt UI components for the quiz application.

Widgets are imported from their modules directly so that the Qt-free helpers
in this package can be used without loading QtWidgets.
"""
