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

import json
from typing import Any, NamedTuple, Optional

#===============================================================================

from geosketch.geometry import MapPoint, Polyline, Reprojector, SpatialReference
from geosketch.geometry import finite
from geosketch.surface import Graphic, GraphicsLayer
from geosketch.utils import log

#===============================================================================

class GeoJSONError(ValueError):
    pass

#===============================================================================

class ImportResult(NamedTuple):
    created: int
    skipped: int

#===============================================================================

def point_coordinates(coordinates: Any) -> tuple[Optional[float], Optional[float]]:
#==================================================================================
    if not isinstance(coordinates, (list, tuple)):
        coordinates = []
    # Missing or non-numeric values are passed through as ``None``
    x = coordinates[0] if len(coordinates) > 0 and finite(coordinates[0]) else None
    y = coordinates[1] if len(coordinates) > 1 and finite(coordinates[1]) else None
    return (x, y)

def reject_constant(name: str):
#==============================
    raise ValueError(f'{name} is not valid JSON')

def valid_position(position: Any) -> bool:
#=========================================
    return (isinstance(position, (list, tuple)) and len(position) >= 2
        and finite(position[0]) and finite(position[1]))

#===============================================================================

class GeoJSONSource(object):
    def __init__(self, reprojector: Reprojector, restore_properties: bool=True):
        self.__reprojector = reprojector
        self.__restore_properties = restore_properties
        self.__log = log.bind(type='import')

    def features(self, parsed: Any) -> list:
    #=======================================
        if isinstance(parsed, dict) and isinstance(features := parsed.get('features'), list):
            return features
        return []

    def graphic(self, feature: Any) -> Optional[Graphic]:
    #====================================================
        """
        A display projection graphic for a ``Point`` or ``LineString`` feature,
        or ``None`` if the feature has no geometry, is of some other type, or
        is a line with less than two valid positions.
        """
        if not isinstance(feature, dict) or not isinstance(geometry := feature.get('geometry'), dict):
            return None
        coordinates = geometry.get('coordinates')
        if geometry.get('type') == 'Point':
            wgs84 = MapPoint(*point_coordinates(coordinates), spatial_reference=SpatialReference.WGS84)
        elif geometry.get('type') == 'LineString':
            if (not isinstance(coordinates, list) or len(coordinates) < 2
             or not all(valid_position(position) for position in coordinates)):
                return None
            wgs84 = Polyline([coordinates], spatial_reference=SpatialReference.WGS84)
        else:
            return None
        properties = feature.get('properties')
        attributes = properties if self.__restore_properties and isinstance(properties, dict) else None
        return Graphic(self.__reprojector.to_display(wgs84), attributes)

    def graphics(self, features: list) -> tuple[list[Graphic], int]:
    #===============================================================
        graphics = []
        skipped = 0
        for (n, feature) in enumerate(features):
            if (graphic := self.graphic(feature)) is not None:
                graphics.append(graphic)
            else:
                self.__log.debug('Feature skipped', index=n)
                skipped += 1
        return (graphics, skipped)

    def load(self, text: str, layer: GraphicsLayer) -> ImportResult:
    #===============================================================
        """
        Replace the graphics in ``layer`` with those of a GeoJSON
        FeatureCollection.

        :raises GeoJSONError: if ``text`` isn't valid JSON, in which
                              case the layer is unchanged
        """
        features = self.features(self.parse(text))
        layer.remove_all()
        (graphics, skipped) = self.graphics(features)
        layer.add_many(graphics)
        if skipped:
            self.__log.warning('Features not imported', skipped=skipped)
        self.__log.info('Imported GeoJSON', created=len(graphics), skipped=skipped)
        return ImportResult(len(graphics), skipped)

    def parse(self, text: str) -> Any:
    #=================================
        try:
            return json.loads(text, parse_constant=reject_constant)
        except (TypeError, ValueError) as err:
            raise GeoJSONError(f'Invalid JSON: {err}') from None

#===============================================================================
