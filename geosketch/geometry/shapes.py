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

from typing import Iterable, Optional, Sequence

#===============================================================================

from . import Extent, SpatialReference

#===============================================================================

Coordinate = tuple[Optional[float], Optional[float]]

#===============================================================================

class Geometry(object):
    geom_type: Optional[str] = None

    def __init__(self, spatial_reference: Optional[SpatialReference]):
        self.__spatial_reference = spatial_reference

    @property
    def coords(self) -> list[Coordinate]:
        return []

    @property
    def extent(self) -> Optional[Extent]:
        if self.__spatial_reference is None:
            return None
        return Extent.from_coordinates(self.coords, self.__spatial_reference)

    @property
    def spatial_reference(self) -> Optional[SpatialReference]:
        return self.__spatial_reference

#===============================================================================

class MapPoint(Geometry):
    geom_type = 'Point'

    def __init__(self, x: Optional[float], y: Optional[float],
                 spatial_reference: Optional[SpatialReference]=SpatialReference.WEB_MERCATOR):
        super().__init__(spatial_reference)
        self.__x = x
        self.__y = y

    def __eq__(self, other):
        return (isinstance(other, MapPoint)
            and (self.__x, self.__y) == (other.__x, other.__y)
            and self.spatial_reference == other.spatial_reference)

    def __repr__(self):
        return f'MapPoint({self.__x}, {self.__y}, {self.spatial_reference})'

    @property
    def coords(self) -> list[Coordinate]:
        return [(self.__x, self.__y)]

    @property
    def x(self) -> Optional[float]:
        return self.__x

    @property
    def y(self) -> Optional[float]:
        return self.__y

#===============================================================================

class Polyline(Geometry):
    geom_type = 'Polyline'

    def __init__(self, paths: Iterable[Sequence[Sequence[float]]],
                 spatial_reference: Optional[SpatialReference]=SpatialReference.WEB_MERCATOR):
        super().__init__(spatial_reference)
        self.__paths: list[list[Coordinate]] = [
            [(point[0], point[1]) for point in path] for path in paths
        ]

    def __eq__(self, other):
        return (isinstance(other, Polyline)
            and self.__paths == other.__paths
            and self.spatial_reference == other.spatial_reference)

    def __repr__(self):
        return f'Polyline({self.__paths}, {self.spatial_reference})'

    @property
    def coords(self) -> list[Coordinate]:
        return [point for path in self.__paths for point in path]

    @property
    def paths(self) -> list[list[Coordinate]]:
        return [list(path) for path in self.__paths]

#===============================================================================
