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

from enum import Enum
import math
from typing import Any, Iterable, Optional

#===============================================================================

import shapely.geometry

#===============================================================================

def finite(value: Any) -> bool:
#==============================
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
        and math.isfinite(value))

#===============================================================================

class SpatialReference(Enum):
    WEB_MERCATOR = 3857     # The map's display projection
    WGS84        = 4326     # Geographic longitude and latitude

    @property
    def epsg(self) -> str:
        return f'EPSG:{self.value}'

    @property
    def is_wgs84(self) -> bool:
        return self is SpatialReference.WGS84

#===============================================================================

class Extent(object):
    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float,
                 spatial_reference: SpatialReference=SpatialReference.WEB_MERCATOR):
        self.__bounds = (min(xmin, xmax), min(ymin, ymax), max(xmin, xmax), max(ymin, ymax))
        self.__spatial_reference = spatial_reference

    def __eq__(self, other):
        return (isinstance(other, Extent)
            and self.__bounds == other.__bounds
            and self.__spatial_reference == other.__spatial_reference)

    def __repr__(self):
        return 'Extent({}, {})'.format(', '.join(str(b) for b in self.__bounds),
                                       self.__spatial_reference.name)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[tuple[float, float]],
                         spatial_reference: SpatialReference=SpatialReference.WEB_MERCATOR) -> Optional['Extent']:
        points = [(x, y) for (x, y) in coordinates if finite(x) and finite(y)]
        if len(points) == 0:
            return None
        return cls(*shapely.geometry.MultiPoint(points).bounds, spatial_reference=spatial_reference)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self.__bounds

    @property
    def center(self) -> tuple[float, float]:
        return ((self.__bounds[0] + self.__bounds[2])/2.0,
                (self.__bounds[1] + self.__bounds[3])/2.0)

    @property
    def height(self) -> float:
        return self.__bounds[3] - self.__bounds[1]

    @property
    def spatial_reference(self) -> SpatialReference:
        return self.__spatial_reference

    @property
    def width(self) -> float:
        return self.__bounds[2] - self.__bounds[0]

    def expand(self, factor: float) -> 'Extent':
    #===========================================
        """
        Scale the extent's width and height by ``factor`` about its centre.
        """
        (cx, cy) = self.center
        dx = factor*self.width/2.0
        dy = factor*self.height/2.0
        return Extent(cx - dx, cy - dy, cx + dx, cy + dy, self.__spatial_reference)

    def union(self, other: 'Extent') -> 'Extent':
    #============================================
        if other.spatial_reference != self.__spatial_reference:
            raise ValueError('Cannot combine extents with different spatial references')
        corners = shapely.geometry.MultiPoint([self.__bounds[:2], self.__bounds[2:],
                                               other.bounds[:2], other.bounds[2:]])
        return Extent(*corners.bounds, spatial_reference=self.__spatial_reference)

#===============================================================================

# Exports
from .shapes import MapPoint, Polyline
from .projection import Reprojector, geographic_to_mercator, mercator_to_geographic

#===============================================================================
