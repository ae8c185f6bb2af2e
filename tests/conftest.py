from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """One headless Qt application for every test that needs timers or signals."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
