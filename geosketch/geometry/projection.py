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

from typing import Optional

#===============================================================================

import numpy as np
import pyproj
from pyproj.enums import TransformDirection

#===============================================================================

from geosketch.utils import log

from . import SpatialReference
from .shapes import Coordinate, Geometry, MapPoint, Polyline

#===============================================================================

# Web Mercator is undefined at the poles
MAX_LATITUDE = 89.99999

#===============================================================================

mercator_transformer = pyproj.Transformer.from_crs(SpatialReference.WEB_MERCATOR.epsg,
                                                   SpatialReference.WGS84.epsg,
                                                   always_xy=True)

def mercator_to_geographic(x: Optional[float], y: Optional[float]) -> Coordinate:
#===============================================================================
    if x is None or y is None:
        return (x, y)
    (lon, lat) = mercator_transformer.transform(x, y)
    return (float(lon), float(lat))

def geographic_to_mercator(lon: Optional[float], lat: Optional[float]) -> Coordinate:
#===================================================================================
    if lon is None or lat is None:
        return (lon, lat)
    lat = min(max(lat, -MAX_LATITUDE), MAX_LATITUDE)
    (x, y) = mercator_transformer.transform(lon, lat, direction=TransformDirection.INVERSE)
    return (float(x), float(y))

#===============================================================================

def path_to_geographic(path: list[Coordinate]) -> list[Coordinate]:
#==================================================================
    if len(path) == 0:
        return []
    coords = np.array(path, dtype=float)
    (lons, lats) = mercator_transformer.transform(coords[:, 0], coords[:, 1])
    return [(float(lon), float(lat)) for (lon, lat) in zip(lons, lats)]

def path_to_mercator(path: list[Coordinate]) -> list[Coordinate]:
#================================================================
    if len(path) == 0:
        return []
    coords = np.array(path, dtype=float)
    lats = np.clip(coords[:, 1], -MAX_LATITUDE, MAX_LATITUDE)
    (xs, ys) = mercator_transformer.transform(coords[:, 0], lats,
                                              direction=TransformDirection.INVERSE)
    return [(float(x), float(y)) for (x, y) in zip(xs, ys)]

#===============================================================================

class Reprojector(object):
    """
    Convert points and polylines between the map's display projection
    (Web Mercator) and WGS84 longitude and latitude.

    Geometries already in the requested spatial reference are returned
    unchanged; otherwise a new geometry is returned, the input is never
    modified.
    """
    def to_display(self, geometry: Geometry) -> Geometry:
    #====================================================
        return self.__reproject(geometry, SpatialReference.WEB_MERCATOR)

    def to_geographic(self, geometry: Geometry) -> Geometry:
    #=======================================================
        return self.__reproject(geometry, SpatialReference.WGS84)

    def __reproject(self, geometry: Geometry, target: SpatialReference) -> Geometry:
    #===============================================================================
        spatial_reference = getattr(geometry, 'spatial_reference', None)
        if spatial_reference is None:
            raise ValueError('Geometry to reproject has no spatial reference')
        if spatial_reference == target:
            return geometry
        if isinstance(geometry, MapPoint):
            transform = mercator_to_geographic if target.is_wgs84 else geographic_to_mercator
            return MapPoint(*transform(geometry.x, geometry.y), spatial_reference=target)
        elif isinstance(geometry, Polyline):
            transform = path_to_geographic if target.is_wgs84 else path_to_mercator
            return Polyline([transform(path) for path in geometry.paths], spatial_reference=target)
        log.debug('Unsupported geometry', type=getattr(geometry, 'geom_type', None))
        raise ValueError(f'Cannot reproject geometry of type {type(geometry).__name__}')

#===============================================================================
