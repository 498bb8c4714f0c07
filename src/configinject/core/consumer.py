"""
A consumer that only knows its settings through capability interfaces.
"""

import sys
from typing import TextIO

from .contracts import EmailSettingsLike, FluxCapacitorSettingsLike


class Consumer:
    """Reports what it was configured with.

    It neither knows nor cares whether its settings were hard-coded or
    resolved from configuration.
    """

    def __init__(
        self,
        email_settings: EmailSettingsLike,
        flux_capacitor_settings: FluxCapacitorSettingsLike,
    ):
        self._email_settings = email_settings
        self._flux_capacitor_settings = flux_capacitor_settings

    def lines(self) -> list[str]:
        return [
            f"the default e-mail is {self._email_settings.default_email_address}",
            f"I can retry an e-mail {self._email_settings.number_of_retries} times",
            "the flux capacitor requires "
            f"{self._flux_capacitor_settings.required_gigawatts} gigwatts of power",
        ]

    def run(self, stream: TextIO | None = None) -> list[str]:
        """Write the report to ``stream`` (stdout by default) and return it."""
        out = stream or sys.stdout
        lines = self.lines()
        for line in lines:
            print(line, file=out)
        return lines
