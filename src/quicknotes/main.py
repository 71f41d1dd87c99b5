# SPDX-License-Identifier: GPL-3.0-or-later

import sys

from quicknotes.config import setup_logging
from quicknotes.constants import VERSION


def main(argv=None):
    logger = setup_logging()
    logger.info('Starting QuickNotes %s', VERSION)

    from quicknotes.application import QuickNotesApp

    app = QuickNotesApp(version=VERSION)
    return app.run(sys.argv if argv is None else argv)


if __name__ == '__main__':
    sys.exit(main())
