# core/signals.py
from PyQt5.QtCore import QObject, pyqtSignal


class StoreSignals(QObject):
    # Any change to either collection
    data_changed = pyqtSignal()
    # Carries the new snapshot of the collection that changed
    tips_changed = pyqtSignal(object)
    categories_changed = pyqtSignal(object)
