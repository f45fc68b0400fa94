from adiparse.clients.base import BaseHTTPClient
from adiparse.clients.qoboto import FetchResult, QobotoClient
from adiparse.clients.sections import MainSectionFields, clean_text, find_main_section

__all__ = [
    "BaseHTTPClient",
    "FetchResult",
    "MainSectionFields",
    "QobotoClient",
    "clean_text",
    "find_main_section",
]
