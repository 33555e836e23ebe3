from pagedraft.session.client import HttpSaveClient, SaveClient
from pagedraft.session.controller import EditSessionController
from pagedraft.session.regions import PlaywrightRegionReader, RegionReader

__all__ = [
    "EditSessionController",
    "HttpSaveClient",
    "PlaywrightRegionReader",
    "RegionReader",
    "SaveClient",
]
