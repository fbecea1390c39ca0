"""Navigator Interface

Redirecting ends the running action: implementations raise RedirectSignal
and the HTTP layer turns it into a redirect response.
"""

from abc import ABC, abstractmethod
from typing import NoReturn


class RedirectSignal(Exception):
    """Raised to stop an action and send the caller to another path"""

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path


class Navigator(ABC):

    @abstractmethod
    def redirect(self, path: str) -> NoReturn:
        """
        Send the caller to path

        Never returns. Must only be called after a successful mutation.
        """
        pass
