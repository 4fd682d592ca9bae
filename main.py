# main.py
import sys

from PyQt5.QtCore import QCoreApplication

from core.config import SETTINGS_ORGANIZATION, SETTINGS_APPLICATION
from core.container import AppContainer
from core.logger import get_logger, setup_logging
from core.settings import has_seen_onboarding, mark_onboarding_seen

logger = get_logger("TipBox")


def main(argv=None):
    argv = sys.argv if argv is None else argv
    setup_logging()

    app = QCoreApplication.instance() or QCoreApplication(argv)
    app.setOrganizationName(SETTINGS_ORGANIZATION)
    app.setApplicationName(SETTINGS_APPLICATION)

    container = AppContainer()
    manager = container.start()
    manager.subscribe(lambda: logger.debug("Tip data changed"))

    if '--reset' in argv[1:]:
        manager.reset_data()

    if not has_seen_onboarding():
        logger.info("First run, onboarding pending")
        mark_onboarding_seen()

    summary = container.query_service.summary()
    print(f"{summary['tips']} tips in {summary['categories']} categories, {summary['favorites']} favorites")
    return 0


if __name__ == '__main__':
    sys.exit(main())
