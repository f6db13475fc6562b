import logging
from pathlib import Path

import sys

from PyQt5.QtWidgets import QApplication

from OP_Libs.constants import CONFIG_FILE_NAME
from OP_Libs.editor_config import load_editor_config
from OP_Libs.EditorWindowLib.pixel_editor_window import start_pixel_editor


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_editor_config(Path.cwd() / CONFIG_FILE_NAME)

    app = QApplication(sys.argv)
    window = start_pixel_editor(config=config)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
