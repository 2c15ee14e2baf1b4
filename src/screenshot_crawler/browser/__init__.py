from .session import BrowserSession, PlaywrightSession

__all__ = ["BrowserSession", "PlaywrightSession"]
