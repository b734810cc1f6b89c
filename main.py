from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from lomaji.services.settings_store import SettingsStore
from lomaji.ui.main_window import create_main_window


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lomaji syllable input composer")
    parser.add_argument("--settings", default=None, help="path to settings.yaml")
    args, qt_args = parser.parse_known_args(argv if argv is not None else sys.argv[1:])

    store = SettingsStore(args.settings)
    logging.basicConfig(
        level=getattr(logging, store.get_log_level()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication([sys.argv[0]] + qt_args)
    window = create_main_window(settings_path=args.settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
