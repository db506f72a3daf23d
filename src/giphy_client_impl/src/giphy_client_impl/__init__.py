"""Public exports for the Giphy client implementation package."""

from giphy_client_impl.giphy_impl import register

register()
