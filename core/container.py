# -*- coding: utf-8 -*-
# core/container.py
from infrastructure.key_value_store import KeyValueStore, QSettingsKeyValueStore
from infrastructure.local_store import LocalStore
from application.services.tip_manager import TipManager
from application.services.tip_service import TipService
from application.services.category_service import CategoryService
from application.services.query_service import QueryService


class AppContainer:
    """Wires the store, manager and services together. Build one per app."""

    def __init__(self, kv_store: KeyValueStore = None):
        self.kv_store = kv_store if kv_store is not None else QSettingsKeyValueStore()
        self.local_store = LocalStore(self.kv_store)

        self.manager = TipManager(self.local_store)
        self.tip_service = TipService(self.manager)
        self.category_service = CategoryService(self.manager)
        self.query_service = QueryService(self.manager)

    def start(self):
        self.manager.initialize()
        return self.manager
