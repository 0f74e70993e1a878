from chatwire.rest.api import RestClient

__all__ = ["RestClient"]
