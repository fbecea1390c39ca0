from typing import NoReturn
from src.app.services.navigator import Navigator, RedirectSignal


class HttpNavigator(Navigator):
    """Raises RedirectSignal; the API turns it into a 303 response"""

    def redirect(self, path: str) -> NoReturn:
        raise RedirectSignal(path)
