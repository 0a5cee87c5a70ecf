# SPDX-License-Identifier: MIT

from calgrid.cleanup import register_cleanup
from calgrid.initialize import initialize
from calgrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
