from typing import TypedDict


class ClientOptionsType(TypedDict, total=False):
    baseUrl: str  # API host, e.g. https://vinyldns.example.com
    apiKey: str  # sent as Authorization: Bearer
    timeout: float  # seconds, per request
    userAgent: str
