"""Configuration package.

Note: Do not import and construct settings at package import time so that
importing the store never resolves paths from the environment. Import from
``contactbook.config.settings`` directly where needed.
"""

__all__: list[str] = []
