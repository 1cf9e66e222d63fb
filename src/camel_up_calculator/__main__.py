from __future__ import annotations

from dataclasses import dataclass

import cappa

from camel_up_calculator.cli.commands.calculate import (
    CalculateCommand,  # noqa: TC001 # cappa needs to know about this at runtime
)
from camel_up_calculator.cli.commands.show import ShowCommand  # noqa: TC001


@dataclass
class Main:
    subcommand: cappa.Subcommands[CalculateCommand | ShowCommand]


def main():
    cappa.invoke(Main)


if __name__ == "__main__":
    main()
