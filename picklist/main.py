"""Entry point for the picklist demo application."""

import logging
import sys
from pathlib import Path

from castella import App
from castella.frame import Frame

from .config import load_config
from .i18n import init_i18n, t
from .ui import PicklistDemo


def main():
    """Run the picklist demo."""
    # Project directory from command line or current directory
    project_path = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else None

    config = load_config(project_path)
    logging.basicConfig(
        level=config.settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_i18n(config.settings.locale)

    app = App(
        Frame(t("demo.title"), width=480, height=360),
        PicklistDemo(config),
    )
    app.run()


if __name__ == "__main__":
    main()
