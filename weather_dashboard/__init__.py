"""Weather Dashboard app"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-dashboard")
except PackageNotFoundError:
    __version__ = "dev"
