#===============================================================================
#
#  Map sketching and GeoJSON tools
#
#  Copyright (c) 2024  geosketch contributors
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import math
from typing import Callable, NamedTuple

#===============================================================================

from geosketch.geometry import Extent, SpatialReference
from geosketch.geometry import MapPoint, geographic_to_mercator
from geosketch.utils import log

from .graphics import EventHandle

#===============================================================================

# Web Mercator world width in metres and the pixel size of a map tile

WORLD_SIZE = 2*math.pi*6378137
TILE_SIZE  = 256

#===============================================================================

class ZoomConstraints(NamedTuple):
    min_zoom: float
    max_zoom: float
    snap_to_zoom: bool = False

    def clamp(self, zoom: float) -> float:
    #=====================================
        zoom = min(max(zoom, self.min_zoom), self.max_zoom)
        return round(zoom) if self.snap_to_zoom else zoom

#===============================================================================

class ClickEvent(NamedTuple):
    map_point: MapPoint             # In the display projection

ClickHandler = Callable[[ClickEvent], None]

#===============================================================================

class MapView(object):
    def __init__(self, center: tuple[float, float], zoom: float,
                       constraints: ZoomConstraints,
                       size: tuple[int, int]=(800, 600)):
        self.__center = MapPoint(*geographic_to_mercator(*center))
        self.__constraints = constraints
        self.__zoom = constraints.clamp(zoom)
        self.__size = size
        self.__click_handlers: list[ClickHandler] = []
        self.__log = log.bind(type='view')

    @property
    def center(self) -> MapPoint:
        return self.__center

    @center.setter
    def center(self, center: MapPoint):
        if center.spatial_reference != SpatialReference.WEB_MERCATOR:
            center = MapPoint(*geographic_to_mercator(center.x, center.y))
        self.__center = center

    @property
    def constraints(self) -> ZoomConstraints:
        return self.__constraints

    @constraints.setter
    def constraints(self, constraints: ZoomConstraints):
        self.__constraints = constraints
        self.__zoom = constraints.clamp(self.__zoom)

    @property
    def extent(self) -> Extent:
        resolution = self.resolution
        half_width = resolution*self.__size[0]/2.0
        half_height = resolution*self.__size[1]/2.0
        return Extent(self.__center.x - half_width, self.__center.y - half_height,
                      self.__center.x + half_width, self.__center.y + half_height)

    @property
    def resolution(self) -> float:
        """Metres per pixel at the current zoom level."""
        return WORLD_SIZE/(TILE_SIZE*2**self.__zoom)

    @property
    def size(self) -> tuple[int, int]:
        return self.__size

    @property
    def zoom(self) -> float:
        return self.__zoom

    @zoom.setter
    def zoom(self, zoom: float):
        self.__zoom = self.__constraints.clamp(zoom)

    def click(self, x: float, y: float):
    #===================================
        event = ClickEvent(MapPoint(x, y))
        for handler in list(self.__click_handlers):
            handler(event)

    def go_to(self, target: Extent | MapPoint):
    #==========================================
        """
        Centre the view on ``target`` and, for an extent, zoom so that it
        fills the view.
        """
        if isinstance(target, MapPoint):
            self.center = target
        else:
            self.center = MapPoint(*target.center,
                                   spatial_reference=target.spatial_reference)
            if target.width > 0 or target.height > 0:
                scale = min(self.__size[0]/target.width if target.width > 0 else math.inf,
                            self.__size[1]/target.height if target.height > 0 else math.inf)
                self.zoom = math.log2(WORLD_SIZE*scale/TILE_SIZE)
        self.__log.debug('View moved', center=self.__center.coords[0], zoom=self.__zoom)

    def on_click(self, handler: ClickHandler) -> EventHandle:
    #========================================================
        self.__click_handlers.append(handler)
        return EventHandle(self.__click_handlers, handler)

#===============================================================================
