"""
Qt compatibility layer:
- WORDBYWORD_QT_API selects PyQt6 or PySide6
- auto tries PyQt6 first, then PySide6
"""

import os

QT_API = None
_requested = os.getenv("WORDBYWORD_QT_API", "auto").strip().lower()

if _requested in {"pyqt6", "pyqt"}:
    from PyQt6 import QtCore, QtGui, QtWidgets  # type: ignore

    Signal = QtCore.pyqtSignal
    Slot = QtCore.pyqtSlot
    QT_API = "PyQt6"
elif _requested in {"pyside6", "pyside"}:
    from PySide6 import QtCore, QtGui, QtWidgets  # type: ignore

    Signal = QtCore.Signal
    Slot = QtCore.Slot
    QT_API = "PySide6"
else:
    try:
        from PyQt6 import QtCore, QtGui, QtWidgets  # type: ignore

        Signal = QtCore.pyqtSignal
        Slot = QtCore.pyqtSlot
        QT_API = "PyQt6"
    except ImportError:  # pragma: no cover
        from PySide6 import QtCore, QtGui, QtWidgets  # type: ignore

        Signal = QtCore.Signal
        Slot = QtCore.Slot
        QT_API = "PySide6"
