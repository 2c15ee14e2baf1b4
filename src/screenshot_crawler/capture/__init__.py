from .page_capture import capture_page

__all__ = ["capture_page"]
